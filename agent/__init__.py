# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK assistant configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is a conversational client of the Pastebin tools.  It:
#     1. Receives a request in plain language ("save this snippet privately")
#     2. Picks the right tool (create_paste, read_paste, list_user_pastes)
#     3. Calls it via MCP
#     4. Explains the outcome, including any error the tool reported
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the paste logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
