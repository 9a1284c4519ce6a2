"""Bounded chat history shared across requests (in memory only)."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Literal, Sequence

from config import MAX_HISTORY


@dataclass(frozen=True)
class ChatHistoryEntry:
    role: Literal["user", "assistant"]
    text: str


class ChatHistory:
    """FIFO of the most recent chat turns; the oldest entry is evicted first.

    Not synchronized: the server assumes one request writes at a time.
    """

    def __init__(self, capacity: int = MAX_HISTORY):
        self.capacity = capacity
        self._entries: Deque[ChatHistoryEntry] = deque()

    def append(self, role: Literal["user", "assistant"], text: str) -> None:
        self._entries.append(ChatHistoryEntry(role, text))
        while len(self._entries) > self.capacity:
            self.evict_oldest()

    def record_turn(self, user_text: str, assistant_text: str) -> None:
        """Store one user message and the reply it got."""
        self.append("user", user_text)
        self.append("assistant", assistant_text)

    def evict_oldest(self) -> None:
        if self._entries:
            self._entries.popleft()

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> List[ChatHistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ChatHistoryEntry]:
        return iter(list(self._entries))


def format_history(history: Sequence[ChatHistoryEntry]) -> str:
    """Render history as "role: text" lines for a prompt."""
    return "\n".join(f"{entry.role}: {entry.text}" for entry in history)
