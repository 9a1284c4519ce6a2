"""
Node: Ask the intent chain what the user wants.
An authentication failure is not an error here; it routes to the manual fallback.
"""

from typing import Any, Dict

from core.errors import is_llm_auth_error
from graph.services import ChatServices
from graph.state import ChatState


def resolve(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---RESOLVE---")
    try:
        action = services.resolver.resolve(state["message"], state.get("history", []))
    except Exception as exc:
        if not is_llm_auth_error(exc):
            raise
        print(f"[RESOLVE] ⚠️  Language model unavailable ({exc}) – using manual parser")
        return {"llm_unavailable": True}
    return {"action": action}
