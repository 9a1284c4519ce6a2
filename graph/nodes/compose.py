"""
Node: Write the assistant reply (with optional web search).
"""

from typing import Any, Dict

from core.errors import is_llm_auth_error
from graph.consts import OK
from graph.services import ChatServices
from graph.state import ChatState


def compose(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---COMPOSE---")
    try:
        reply, tools = services.composer.compose(
            state["message"],
            state.get("context"),
            state.get("history", []),
        )
    except Exception as exc:
        if not is_llm_auth_error(exc):
            raise
        print(f"[COMPOSE] ⚠️  Language model unavailable ({exc}) – using manual reply")
        return {"llm_unavailable": True}
    return {"reply": reply, "tools": tools, "status": OK}
