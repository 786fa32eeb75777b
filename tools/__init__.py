# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between an MCP client and core/.
#   Each tool:
#     1. Receives schema-validated arguments from FastMCP
#     2. Builds a request dataclass from core/models.py
#     3. Awaits the matching core/ handler
#     4. Flattens the OperationResult into a JSON-friendly dict
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate domain rules or parse Pastebin responses
#     (that's in core/)
#   - They do NOT know about Google ADK
# =============================================================================
