"""Collaborators the chat graph nodes call into."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from core.ledger.client import LedgerClient
from graph.chains.intent import IntentResolver
from graph.chains.reply import ReplyComposer


@dataclass
class ChatServices:
    """Intent resolver, reply composer and a lazily built ledger client.

    The ledger is created on first use so missing sheet credentials fail the
    request that needs them rather than server start-up.
    """

    resolver: IntentResolver
    composer: ReplyComposer
    ledger_factory: Callable[[], LedgerClient]
    _ledger: Optional[LedgerClient] = field(default=None, init=False, repr=False)

    @property
    def ledger(self) -> LedgerClient:
        if self._ledger is None:
            self._ledger = self.ledger_factory()
        return self._ledger
