"""
Shared fixtures: an in-memory Trade Log sheet, fake chat models and a fake
Tavily client, so no test touches the network.

Usage:
    pytest testing -v
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from langchain_core.language_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from core.errors import CredentialAuthError
from core.ledger import LedgerClient, LedgerSchema
from core.search import SearchTool
from core.sheets import InMemorySheetStore
from graph.chains import ChainFactory, IntentResolver, ReplyComposer
from graph.history import ChatHistory
from graph.orchestrator import ChatOrchestrator
from graph.services import ChatServices

SHEET = "Trade Log"

HEADERS = [
    "Date",
    "Transaction Type",
    "Stock/ETF Symbol",
    "Quantity of Units",
    "Amount per unit",
    "Total Amount (before fees)",
    "Trading Fees",
    "Investment Account",
]

COLUMNS = {
    "date": "Date",
    "transactionType": "Transaction Type",
    "symbol": "Stock/ETF Symbol",
    "quantity": "Quantity of Units",
    "amountPerUnit": "Amount per unit",
    "totalAmount": "Total Amount (before fees)",
    "tradingFees": "Trading Fees",
    "investmentAccount": "Investment Account",
}

MANUAL_TRADE_MESSAGE = (
    "- Transaction Type: buy\n"
    "- **Stock/ETF Symbol:** aapl\n"
    "- Quantity of Units: 10\n"
    "- Amount per unit: $192.50\n"
    "- Date: 01-20-2026\n"
    "- Total Amount (before fees): 1,925.00\n"
    "- Trading Fees: 0\n"
    "- Investment Account: Brokerage 1"
)


class FakeTavilyClient:
    """Records search calls and returns canned results."""

    def __init__(self, results: List[Dict[str, Any]] | None = None, error: Exception | None = None):
        self.results = results or []
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def search(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"query": kwargs.get("query"), "results": self.results}


def fake_chain(config_name: str, responses: List[str]):
    """A real prompt | model | parser chain over a scripted chat model."""
    return ChainFactory.build_chain_by_name(config_name, llm=FakeListChatModel(responses=responses))


def failing_chain(error: Exception, calls: List[Any] | None = None):
    """A chain that raises *error*, recording each attempted call."""

    def _raise(inputs):
        if calls is not None:
            calls.append(inputs)
        raise error

    return RunnableLambda(_raise)


def recording_chain(reply: str, calls: List[Any]):
    """A chain that answers *reply* and records its inputs."""

    def _answer(inputs):
        calls.append(inputs)
        return reply

    return RunnableLambda(_answer)


@pytest.fixture
def schema() -> LedgerSchema:
    return LedgerSchema(sheet_label=SHEET, header_row=1, columns=COLUMNS)


@pytest.fixture
def store() -> InMemorySheetStore:
    store = InMemorySheetStore(spreadsheet_id="sheet-123", client_email="bot@example.iam.gserviceaccount.com")
    store.add_sheet(SHEET, rows=[HEADERS], row_count=5, column_count=8)
    return store


@pytest.fixture
def ledger(store, schema) -> LedgerClient:
    return LedgerClient(store, schema, default_account="Default Broker")


@pytest.fixture
def history() -> ChatHistory:
    return ChatHistory(capacity=20)


@pytest.fixture
def auth_error() -> CredentialAuthError:
    return CredentialAuthError("Incorrect API key provided: sk-bad")


def make_orchestrator(ledger, history, intent_chain, reply_chain, search_tool=None) -> ChatOrchestrator:
    services = ChatServices(
        resolver=IntentResolver(chain=intent_chain),
        composer=ReplyComposer(chain=reply_chain, search_tool=search_tool or SearchTool(api_key="")),
        ledger_factory=lambda: ledger,
    )
    return ChatOrchestrator(services, history)
