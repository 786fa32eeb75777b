# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL paste-handling logic: validation, credential
# resolution, form building, the HTTP transport, response normalization
# and the error taxonomy.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or dotenv.  The
#   only third-party import is httpx, confined to core/transport.py.
#   Handlers take their credentials and transport as parameters, so every
#   one of them can be exercised with in-process fakes.
# =============================================================================
