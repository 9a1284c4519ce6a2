"""Node / edge name constants for the chat graph."""

RESOLVE = "resolve"
LOG_TRADE = "log_trade"
SUMMARIZE = "summarize"
UNKNOWN = "unknown"
COMPOSE = "compose"
MANUAL_FALLBACK = "manual_fallback"

# Response statuses
OK = "ok"
SERVICE_UNAVAILABLE = "service_unavailable"
ERROR = "error"
