"""
Nodes: Carry out the resolved action and build the reply context.
- log_trade → append the trade to the ledger
- summarize → read the ledger and summarize it
- unknown   → nothing to do; the reply asks a clarifying question
"""

from typing import Any, Dict

from core.summary import summarize as summarize_rows
from graph.services import ChatServices
from graph.state import ChatState


def log_trade(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---LOG TRADE---")
    ledger = services.ledger
    trade = ledger.with_default_account(state["action"].trade)
    ledger.append_trade(trade)
    return {
        "committed_trade": trade,
        "context": {"action": "log_trade", "trade": trade.model_dump(by_alias=True)},
    }


def summarize(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---SUMMARIZE---")
    query = state["action"].query
    ledger = services.ledger
    rows = ledger.read_all_trades()
    summary_text = summarize_rows(rows, query, ledger.schema)
    print(f"[SUMMARIZE] {len(rows)} row(s) read")
    return {
        "context": {
            "action": "summarize",
            "summary": query.model_dump(by_alias=True),
            "summaryText": summary_text,
        }
    }


def unknown(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---UNKNOWN---")
    return {"context": {"action": "unknown"}}
