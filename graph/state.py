"""
Graph state definition for the chat pipeline.
Flows through every node in the LangGraph.
"""

from typing import Any, Dict, List, Optional, TypedDict

from core.ledger.models import TradeRecord
from core.search import ToolUsage
from graph.chains.intent import ResolvedAction
from graph.history import ChatHistoryEntry


class ChatState(TypedDict, total=False):
    """
    Attributes:
        message:          The user's message, already trimmed.
        history:          Snapshot of earlier turns for the prompts.
        action:           What the intent chain decided (LogTrade / Summarize / Unknown).
        llm_unavailable:  Set when the completion service rejected our credential.
        committed_trade:  Trade written to the ledger during this turn, if any.
        context:          Structured context handed to the reply chain.
        reply:            Final assistant text.
        tools:            Search tool usage for this reply.
        status:           "ok" or "service_unavailable".
    """

    message: str
    history: List[ChatHistoryEntry]
    action: ResolvedAction
    llm_unavailable: bool
    committed_trade: Optional[TradeRecord]
    context: Dict[str, Any]
    reply: str
    tools: ToolUsage
    status: str
