"""
Reply chain: write the assistant's answer, pulling in web search when the
message asks about prices.
"""

import json
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from langchain_core.runnables import Runnable

from core.errors import SearchUnavailable
from core.search import SearchTool, ToolUsage, should_use_web_search
from graph.history import ChatHistoryEntry, format_history

from .factory import ChainFactory


class ReplyComposer:
    """Builds the final reply and the ToolUsage that goes with it."""

    def __init__(
        self,
        chain: Optional[Runnable] = None,
        search_tool: Optional[SearchTool] = None,
        should_search: Callable[[str], bool] = should_use_web_search,
    ):
        self._chain = chain
        self.search_tool = search_tool or SearchTool()
        self.should_search = should_search

    @property
    def chain(self) -> Runnable:
        if self._chain is None:
            self._chain = ChainFactory.build_chain_by_name("reply")
        return self._chain

    def run_search(self, message: str) -> Tuple[ToolUsage, Optional[str]]:
        """Search for *message* if it warrants it. Returns usage and JSON payload."""
        if not self.should_search(message):
            return ToolUsage(), None

        try:
            outcome = self.search_tool.search(message)
        except SearchUnavailable as exc:
            return ToolUsage(status=exc.status), None

        count = len(outcome.results)
        if not count:
            return ToolUsage(status="attempted"), None
        return ToolUsage(status="used", results=count), json.dumps(outcome.payload)

    def compose(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        history: Sequence[ChatHistoryEntry] = (),
        use_search: bool = True,
    ) -> Tuple[str, ToolUsage]:
        if use_search:
            tools, search_payload = self.run_search(message)
        else:
            tools, search_payload = ToolUsage(), None
        reply = self.chain.invoke(
            {
                "history": format_history(history),
                "context": json.dumps(context, default=str) if context else "",
                "search": search_payload or "",
                "message": message,
            }
        )
        print(f"[REPLY] Composed reply (search: {tools.status}, {tools.results} result(s))")
        return reply.strip(), tools
