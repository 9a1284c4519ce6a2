# Import factory and configs
from .factory import ChainFactory
from .config import CHAIN_CONFIGS, ChainConfig

from .intent import (
    IntentResolver,
    LogTrade,
    ResolvedAction,
    Summarize,
    Unknown,
    decode_action,
    extract_json,
    parse_payload,
)
from .reply import ReplyComposer

__all__ = [
    "ChainFactory",
    "ChainConfig",
    "CHAIN_CONFIGS",
    # Intent
    "IntentResolver",
    "ResolvedAction",
    "LogTrade",
    "Summarize",
    "Unknown",
    "decode_action",
    "extract_json",
    "parse_payload",
    # Reply
    "ReplyComposer",
]
