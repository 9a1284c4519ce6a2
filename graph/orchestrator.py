"""
Top-level driver for one chat turn.

Runs the chat graph, turns unexpected failures into an error reply, and
records the turn in the bounded history on every path.
"""

import traceback
from dataclasses import dataclass, field
from typing import Optional

from core.search import ToolUsage
from graph.consts import ERROR, OK
from graph.history import ChatHistory
from graph.services import ChatServices

from .graph import build_chat_graph


@dataclass(frozen=True)
class ChatResponse:
    """Reply text, its tool usage, and how the turn ended."""

    reply: str
    tools: ToolUsage = field(default_factory=ToolUsage)
    status: str = OK  # "ok" | "service_unavailable" | "error"


class ChatOrchestrator:
    """
    Handles chat messages end to end.

    Parameters:
        services: Resolver, composer and ledger used by the graph nodes
        history:  Chat history shared by every request this orchestrator serves
    """

    def __init__(self, services: ChatServices, history: Optional[ChatHistory] = None):
        self.services = services
        self.history = history if history is not None else ChatHistory()
        self.app = build_chat_graph(services)

    def handle_message(self, message: str, history: Optional[ChatHistory] = None) -> ChatResponse:
        history = history if history is not None else self.history
        message = message.strip()

        try:
            result = self.app.invoke({"message": message, "history": history.snapshot()})
            response = ChatResponse(
                reply=result.get("reply", ""),
                tools=result.get("tools") or ToolUsage(),
                status=result.get("status", OK),
            )
        except Exception as exc:
            print(f"[CHAT] ❌ Turn failed: {type(exc).__name__}: {exc}")
            traceback.print_exc()
            response = ChatResponse(reply=self._error_reply(message, exc, history), status=ERROR)

        history.record_turn(message, response.reply)
        return response

    def _error_reply(self, message: str, error: Exception, history: ChatHistory) -> str:
        """Let the model explain *error*; fall back to the raw error text."""
        error_message = str(error) or "Unexpected server error."
        try:
            reply, _ = self.services.composer.compose(
                message,
                {"error": error_message},
                history.snapshot(),
                use_search=False,
            )
            return reply or error_message
        except Exception as exc:
            print(f"[CHAT] Could not compose error reply: {exc}")
            return error_message
