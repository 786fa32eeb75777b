# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the three Pastebin tools with FastMCP.  Each tool is a thin
#   wrapper around a core/ handler: it turns the tool arguments into a
#   request dataclass, awaits the handler, and returns the result as a dict.
#
# HOW IT WORKS (the flow):
#   1. A client (the assistant in agent/, or any MCP client) calls a tool
#      by name, e.g. "create_paste"
#   2. FastMCP validates the arguments against the declared schema
#   3. The function below builds a request and awaits the core/ handler
#   4. The handler's OperationResult is flattened into a plain dict
#
# TOOLS:
#   - create_paste      → write (creates a paste on every call, not idempotent)
#   - read_paste        → read-only
#   - list_user_pastes  → read-only
#
# FAILURES:
#   core/ handlers return every anticipated failure as a value.  The only
#   thing caught here is a genuine bug: it comes back as
#   {"error": "Unexpected error: ...", "details": <traceback>}.
#
# RUNNING THIS SERVER:
#     a) Standalone:        python -m tools.mcp_server
#     b) Console script:    pastebin-mcp-server
#     c) From the assistant via stdio transport (agent/paste_agent.py)
# =============================================================================

import json
import logging
import sys
import traceback
from typing import Annotated, Awaitable, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

# Load PASTEBIN_API_KEY / PASTEBIN_USER_KEY from .env before anything reads them.
load_dotenv()

from core.config import load_settings
from core.create_paste import create_paste
from core.credentials import EnvCredentialProvider
from core.list_pastes import list_pastes
from core.models import OperationResult, PasteCreateRequest, PasteListRequest, PasteReadRequest
from core.read_paste import read_paste
from core.transport import PastebinTransport

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP stdio protocol, and anything
# else written there would corrupt it.
#
# ANSI colors:
#     - CYAN   for incoming requests (tool name + parameters)
#     - GREEN  for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

TOOL_NAMES = ("create_paste", "read_paste", "list_user_pastes")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    # Paste bodies can be large; only their length is logged.
    summary = dict(result)
    if "content" in summary and isinstance(summary["content"], str):
        summary["content"] = f"<{len(summary['content'])} chars>"
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(summary, separators=(',', ':'), default=str)}{_RESET}")
    return result


# =============================================================================
# Shared dependencies
# =============================================================================
# Credentials are looked up from the environment on every call; the
# transport opens a fresh HTTP client per request.  Neither holds state
# between tool calls, so concurrent calls need no locking.
# =============================================================================
_credentials = EnvCredentialProvider()
_transport = PastebinTransport(load_settings())


async def _run_tool(tool_name: str, call: Awaitable[OperationResult]) -> dict:
    """Await a core handler and turn the outcome (or a crash) into a dict."""
    try:
        result = await call
    except Exception as exc:
        logger.exception("%s crashed", tool_name)
        return _log_response(tool_name, {
            "error": f"Unexpected error: {exc}",
            "details": traceback.format_exc(),
        })

    if result.success:
        _log_status("Succeeded")
    else:
        _log_status(f"Failed ({result.kind.value if result.kind else 'unknown'}): {result.error}")
    return _log_response(tool_name, result.to_dict())


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("pastebin-server")


# =============================================================================
# TOOL 1: create_paste
# =============================================================================
async def create_paste_tool(
    content: Annotated[str, Field(description="Content of the paste (required)")],
    title: Annotated[Optional[str], Field(description="Title of the paste")] = None,
    format: Annotated[
        str,
        Field(description="Format/language of the paste (optional, e.g., javascript, python, text)"),
    ] = "text",
    visibility: Annotated[
        Literal["public", "unlisted", "private"],
        Field(description="Visibility of the paste"),
    ] = "public",
) -> dict:
    """Create a new paste on Pastebin.

    Private pastes need PASTEBIN_USER_KEY to be configured on the server.

    Returns:
        On success: {"success": true, "url": "https://pastebin.com/<key>", "message": ...}
        On failure: {"error": ..., "kind": ..., "details"?: ...}
    """
    _log_request("create_paste", title=title, format=format, visibility=visibility,
                 content=f"<{len(content or '')} chars>")
    request = PasteCreateRequest(content=content, visibility=visibility, title=title, format=format)
    return await _run_tool("create_paste", create_paste(request, _credentials, _transport))


mcp.tool(name="create_paste", description="Create a new paste on Pastebin")(create_paste_tool)


# =============================================================================
# TOOL 2: read_paste
# =============================================================================
async def read_paste_tool(
    pasteKey: Annotated[str, Field(description="The key of the paste to read (required)")],
) -> dict:
    """Read a paste from Pastebin by its key.

    Returns:
        On success: {"success": true, "content": ..., "pasteKey": ..., "url": ...}
        If the content fetch fails, the error still carries pasteKey and url.
    """
    _log_request("read_paste", pasteKey=pasteKey)
    request = PasteReadRequest(paste_key=pasteKey)
    return await _run_tool("read_paste", read_paste(request, _credentials, _transport))


mcp.tool(name="read_paste", description="Read a paste from Pastebin by its key")(read_paste_tool)


# =============================================================================
# TOOL 3: list_user_pastes
# =============================================================================
async def list_user_pastes_tool(
    limit: Annotated[
        int,
        Field(ge=1, le=100, description="Maximum number of pastes to return (optional, default 10, max 100)"),
    ] = 10,
) -> dict:
    """List the configured user's pastes from Pastebin.

    Needs both PASTEBIN_API_KEY and PASTEBIN_USER_KEY.

    Returns:
        {"success": true, "pastes": [{key, title, date, size, url, format}, ...],
         "count": N, "message": ...}
    """
    _log_request("list_user_pastes", limit=limit)
    request = PasteListRequest(limit=limit)
    return await _run_tool("list_user_pastes", list_pastes(request, _credentials, _transport))


mcp.tool(name="list_user_pastes", description="List user's pastes from Pastebin")(list_user_pastes_tool)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    logger.info("Starting Pastebin MCP Server...")
    logger.info("Available tools: %s", ", ".join(TOOL_NAMES))
    mcp.run()


if __name__ == "__main__":
    main()
