"""
Live web search for replies that need fresh market data.

Uses the Tavily API. A missing TAVILY_API_KEY is not an error: the reply is
composed without search and the tool usage says "not_configured".
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict
from tavily import TavilyClient

from config import SEARCH_DEPTH, SEARCH_MAX_RESULTS, SEARCH_TRIGGER_KEYWORDS, TAVILY_API_KEY
from core.errors import SearchUnavailable

SearchStatus = Literal["used", "attempted", "not_configured", "error", "skipped"]


class ToolUsage(BaseModel):
    """How the search tool took part in one reply."""

    model_config = ConfigDict(frozen=True)

    status: SearchStatus = "skipped"
    results: int = 0

    def as_payload(self) -> Dict[str, Any]:
        return {"search": self.model_dump()}


def should_use_web_search(message: str, keywords: Sequence[str] = tuple(SEARCH_TRIGGER_KEYWORDS)) -> bool:
    """Cheap keyword check: does *message* ask about prices or quotes?"""
    text = message.lower()
    return any(keyword in text for keyword in keywords)


@dataclass
class SearchOutcome:
    """Result list for a query (each item has name, url and content)."""

    results: List[Dict[str, str]] = field(default_factory=list)

    @property
    def payload(self) -> Dict[str, Any]:
        return {"results": self.results}


class SearchTool:
    """Thin wrapper around TavilyClient with fixed search parameters."""

    def __init__(
        self,
        api_key: str = TAVILY_API_KEY,
        client: Optional[Any] = None,
        max_results: int = SEARCH_MAX_RESULTS,
        depth: str = SEARCH_DEPTH,
    ):
        self.api_key = api_key
        self.max_results = max_results
        self.depth = depth
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self._client is not None or self.api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = TavilyClient(api_key=self.api_key)
        return self._client

    def search(self, query: str) -> SearchOutcome:
        """
        Run *query* and normalise the hits.

        Raises SearchUnavailable("not_configured") without an API key and
        SearchUnavailable("error") when the call fails.
        """
        if not self.configured:
            raise SearchUnavailable("not_configured", "TAVILY_API_KEY not set")

        print(f"[SEARCH] Searching: {query!r}")
        try:
            response = self._get_client().search(
                query=query,
                search_depth=self.depth,
                max_results=self.max_results,
                include_raw_content=False,
            )
        except Exception as exc:
            print(f"[SEARCH] Error: {type(exc).__name__}: {exc}")
            raise SearchUnavailable("error", str(exc)) from exc

        if not isinstance(response, dict) or response.get("error"):
            raise SearchUnavailable("error", f"Unexpected search response: {response!r}")

        hits = response.get("results") or []
        if not isinstance(hits, list):
            raise SearchUnavailable("error", f"Unexpected search results: {hits!r}")

        results = [
            {
                "name": str(r.get("title") or ""),
                "url": str(r.get("url") or ""),
                "content": str(r.get("content") or ""),
            }
            for r in hits
            if isinstance(r, dict)
        ][: self.max_results]
        print(f"[SEARCH] {len(results)} result(s)")
        return SearchOutcome(results=results)
