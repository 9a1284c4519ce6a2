"""
Node: Handle the message without the language model.

- A trade already written this turn → confirm it.
- A complete "Label: value" trade message → write it and confirm.
- Anything else → explain the outage and list the missing fields.
"""

from typing import Any, Dict

from core.manual import (
    manual_trade_confirmation,
    manual_trade_prompt,
    missing_fields,
    parse_manual,
    to_trade,
)
from core.search import ToolUsage
from graph.consts import OK, SERVICE_UNAVAILABLE
from graph.services import ChatServices
from graph.state import ChatState


def manual_fallback(state: ChatState, services: ChatServices) -> Dict[str, Any]:
    print("---MANUAL FALLBACK---")
    committed = state.get("committed_trade")
    if committed is not None:
        return {"reply": manual_trade_confirmation(committed), "tools": ToolUsage(), "status": OK}

    fields = parse_manual(state["message"])
    missing = missing_fields(fields)
    if missing:
        print(f"[MANUAL] Missing fields: {', '.join(missing)}")
        return {"reply": manual_trade_prompt(missing), "tools": ToolUsage(), "status": SERVICE_UNAVAILABLE}

    trade = to_trade(fields)
    services.ledger.append_trade(trade)
    return {
        "committed_trade": trade,
        "reply": manual_trade_confirmation(trade),
        "tools": ToolUsage(),
        "status": OK,
    }
