from .resolve import resolve
from .actions import log_trade, summarize, unknown
from .compose import compose
from .manual_fallback import manual_fallback

__all__ = ["resolve", "log_trade", "summarize", "unknown", "compose", "manual_fallback"]
