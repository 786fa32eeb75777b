# =============================================================================
# main.py  —  Entry Point for the Pastebin Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the console script: pastebin-assistant)
#
# WHAT HAPPENS:
#   1. Loads .env (PASTEBIN_API_KEY, PASTEBIN_USER_KEY, OPENROUTER_API_KEY)
#   2. Creates the Google ADK agent (agent/paste_agent.py), which starts the
#      FastMCP server as a subprocess
#   3. Reads a request from the terminal and sends it to the agent
#   4. Prints each tool call as it happens, then the agent's final answer
#
# To expose the tools to some other MCP client instead, run the server
# on its own:  python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must happen BEFORE creating the agent: LiteLlm reads its API key from the
# environment, and the MCP subprocess inherits the Pastebin secrets.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.paste_agent import create_agent

APP_NAME = "pastebin_assistant"
USER_ID = "local_user"


async def run_agent():
    """Run the Pastebin assistant interactively until the user quits."""

    # =========================================================================
    # Step 1: Create the agent
    # =========================================================================
    print("=" * 70)
    print("  PASTEBIN ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # =========================================================================
    # Step 2: Create a Runner and Session
    # =========================================================================
    # InMemorySessionService keeps the conversation in RAM for this process
    # only.  Pastes themselves live on Pastebin; nothing is stored locally.
    # =========================================================================
    session_service = InMemorySessionService()

    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )

    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")

    # =========================================================================
    # Step 3: Interactive loop
    # =========================================================================
    print("💬 Ask me to create, read, or list your pastes.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # =====================================================================
        # Step 4: Stream the agent's response
        # =====================================================================
        # Events carry either text from the agent or a tool call it made.
        # The last text part is the final answer.
        # =====================================================================
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if hasattr(part, "text") and part.text:
                        final_response = part.text

                    if hasattr(part, "function_call") and part.function_call:
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def main() -> None:
    asyncio.run(run_agent())


if __name__ == "__main__":
    main()
