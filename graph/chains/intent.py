"""
Intent chain: classify a chat message as log_trade / summarize / unknown.

The model returns free text. We cut out the JSON object, validate it against
a strict shape and decode it into a ResolvedAction. Anything malformed becomes
Unknown; only completion-service failures propagate.
"""

import json
from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence, Union

from langchain_core.runnables import Runnable
from pydantic import BaseModel, StrictFloat, StrictStr, ValidationError

from core.ledger.models import SummaryQuery, TradeRecord
from graph.history import ChatHistoryEntry, format_history

from .factory import ChainFactory


class TradePayload(BaseModel):
    """Trade fields exactly as the model must return them."""

    date: StrictStr
    transactionType: Literal["buy", "sell"]
    symbol: StrictStr
    quantity: StrictFloat
    amountPerUnit: StrictFloat
    totalAmount: StrictFloat
    tradingFees: StrictFloat
    investmentAccount: StrictStr


class SummaryPayload(BaseModel):
    symbol: Optional[StrictStr] = None
    startDate: Optional[StrictStr] = None
    endDate: Optional[StrictStr] = None


class IntentPayload(BaseModel):
    action: Literal["log_trade", "summarize", "unknown"]
    trade: Optional[TradePayload] = None
    summary: Optional[SummaryPayload] = None


@dataclass(frozen=True)
class LogTrade:
    trade: TradeRecord
    kind: Literal["log_trade"] = "log_trade"


@dataclass(frozen=True)
class Summarize:
    query: SummaryQuery
    kind: Literal["summarize"] = "summarize"


@dataclass(frozen=True)
class Unknown:
    kind: Literal["unknown"] = "unknown"


ResolvedAction = Union[LogTrade, Summarize, Unknown]


def extract_json(text: str) -> Optional[str]:
    """Slice from the first "{" to the last "}", or None if there is no such span."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start:end + 1]


def parse_payload(text: str) -> Any:
    """Best-effort JSON decode of a model response; failures give {}."""
    json_text = extract_json(text or "")
    if not json_text:
        return {}
    try:
        return json.loads(json_text)
    except ValueError:
        return {}


def decode_action(payload: Any) -> ResolvedAction:
    """Turn untyped model output into a ResolvedAction. Never raises."""
    try:
        parsed = IntentPayload.model_validate(payload)
    except ValidationError:
        return Unknown()

    if parsed.action == "log_trade" and parsed.trade is not None:
        return LogTrade(TradeRecord.model_validate(parsed.trade.model_dump()))
    if parsed.action == "summarize":
        summary = parsed.summary.model_dump() if parsed.summary else {}
        return Summarize(SummaryQuery.model_validate(summary))
    return Unknown()


class IntentResolver:
    """Runs the intent chain and decodes its answer."""

    def __init__(self, chain: Optional[Runnable] = None):
        self._chain = chain

    @property
    def chain(self) -> Runnable:
        # Built on first use so a missing API key surfaces per request
        if self._chain is None:
            self._chain = ChainFactory.build_chain_by_name("intent")
        return self._chain

    def resolve(self, message: str, history: Sequence[ChatHistoryEntry] = ()) -> ResolvedAction:
        raw = self.chain.invoke({"history": format_history(history), "message": message})
        action = decode_action(parse_payload(raw))
        print(f"[RESOLVE] Action: {action.kind}")
        return action
