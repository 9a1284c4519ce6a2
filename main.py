"""
Main entry point for the Trade Log Assistant.

• Loads the trade log schema and builds the chat pipeline.
• Serves POST /api/chat and GET /api/health with uvicorn.
• Each chat turn: resolve intent → log trade / summarize → compose reply.
"""

import sys
from pathlib import Path

# Ensure the package root is importable when launched as a script
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import uvicorn

from config import HOST, PORT, LLM_MODEL, OPENAI_API_KEY, TAVILY_API_KEY, TRADE_LOG_CONFIG
from api import create_app


def main() -> None:
    print("🚀 Trade Log Assistant starting")
    print(f"   Model: {LLM_MODEL}{'' if OPENAI_API_KEY else ' (no OPENAI_API_KEY – manual logging only)'}")
    print(f"   Web search: {'Tavily' if TAVILY_API_KEY else 'not configured'}")
    print(f"   Trade log config: {TRADE_LOG_CONFIG}")
    print(f"   Listening on http://localhost:{PORT}")
    print()

    uvicorn.run(create_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    main()
