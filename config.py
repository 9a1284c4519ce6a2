"""
Central configuration for the Trade Log Assistant.
All tunables live here so they're easy to find and override via env vars.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ────────────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).parent          # project root
TRADE_LOG_CONFIG = Path(os.getenv("TRADE_LOG_CONFIG", str(BASE_DIR / "trade_log.json")))
CLIENT_DIST_DIR = Path(os.getenv("CLIENT_DIST_DIR", str(BASE_DIR / "client" / "dist")))

# ── OpenAI ───────────────────────────────────────────────────────────────────
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()
LLM_MODEL = os.getenv("LLM_MODEL", "").strip() or "gpt-4o-mini"
INTENT_TEMPERATURE = float(os.getenv("INTENT_TEMPERATURE", "0.2"))
REPLY_TEMPERATURE = float(os.getenv("REPLY_TEMPERATURE", "0.4"))

# ── Tavily ───────────────────────────────────────────────────────────────────
TAVILY_API_KEY = os.getenv("TAVILY_API_KEY", "").strip()
SEARCH_MAX_RESULTS = int(os.getenv("SEARCH_MAX_RESULTS", "5"))
SEARCH_DEPTH = os.getenv("SEARCH_DEPTH", "basic")

# Comma-separated phrases that make a message worth a live web search
SEARCH_TRIGGER_KEYWORDS = [
    k.strip().lower()
    for k in os.getenv(
        "SEARCH_TRIGGER_KEYWORDS",
        "price,quote,stock price,current price,market price",
    ).split(",")
    if k.strip()
]

# ── Google Sheets ────────────────────────────────────────────────────────────
GOOGLE_SHEETS_SPREADSHEET_ID = os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID", "")
GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL = os.getenv("GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL", "")
# Private keys pasted into .env usually carry literal "\n" sequences
GOOGLE_SHEETS_PRIVATE_KEY = os.getenv("GOOGLE_SHEETS_PRIVATE_KEY", "").replace("\\n", "\n")

# ── Trade log rules ──────────────────────────────────────────────────────────
DEFAULT_INVESTMENT_ACCOUNT = os.getenv("DEFAULT_INVESTMENT_ACCOUNT", "Interactive Brokers (IBKR)")
MAX_HISTORY = int(os.getenv("MAX_HISTORY", "20"))

# ── HTTP server ──────────────────────────────────────────────────────────────
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))
