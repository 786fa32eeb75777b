# =============================================================================
# agent/paste_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent that talks to the user and
#   calls the Pastebin tools on their behalf.
#
#   ┌──────────────────────────────────────────────────────────────┐
#   │                     Google ADK Agent                         │
#   │   System prompt ──▶ LLM (via LiteLlm) ──▶ MCPToolset          │
#   └──────────────────────────────────────────────────────────────┘
#                                                  │ stdio
#                                                  ▼
#                                   ┌──────────────────────────────┐
#                                   │  FastMCP Server              │
#                                   │  (tools/mcp_server.py)       │
#                                   │   • create_paste             │
#                                   │   • read_paste               │
#                                   │   • list_user_pastes         │
#                                   └──────────────────────────────┘
#                                                  │
#                                                  ▼
#                                   ┌──────────────────────────────┐
#                                   │  core/  →  Pastebin API      │
#                                   └──────────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the MCP server as a subprocess ("uv run python -m
#   tools.mcp_server", from the project root) and talks to it over
#   stdin/stdout.  The subprocess inherits this process's environment, so
#   PASTEBIN_API_KEY / PASTEBIN_USER_KEY loaded from .env reach it.
#
# MODEL:
#   PASTE_AGENT_MODEL picks the LiteLlm model string
#   (default "openrouter/openai/gpt-4o"; LiteLlm reads OPENROUTER_API_KEY).
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_paste_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent(model: Optional[str] = None) -> Agent:
    """Create and configure the Pastebin assistant agent.

    Args:
        model: LiteLlm model string.  Falls back to PASTE_AGENT_MODEL, then
            to DEFAULT_MODEL.

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
            env=dict(os.environ),
        ),
    )

    model_name = model or os.environ.get("PASTE_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="pastebin_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_paste_assistant_prompt(),
        tools=[mcp_tools],
    )
