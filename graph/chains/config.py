"""
Chain configurations for the chat pipeline.

Defines the system prompts, input templates and sampling settings for each
chain in a data-driven format. Prompt text goes through ChatPromptTemplate, so
literal braces are doubled.
"""

from dataclasses import dataclass
from typing import List

from config import INTENT_TEMPERATURE, LLM_MODEL, REPLY_TEMPERATURE


@dataclass
class ChainConfig:
    """Configuration for building an LLM chain."""

    name: str  # Chain identifier (e.g., "intent")
    system_prompt: str  # System message for the chain
    human_prompt_template: str  # Human message template with {variables}
    input_variables: List[str]  # Expected input variable names
    llm_model: str = LLM_MODEL  # LLM model to use
    temperature: float = 0.0  # LLM temperature


INTENT_CONFIG = ChainConfig(
    name="intent",
    system_prompt=(
        'You are a precise JSON generator for a trading assistant connected to a Google Sheet named "Trade Log".\n'
        "Return ONLY valid JSON with these fields:\n"
        '- action: "log_trade" | "summarize" | "unknown"\n'
        "- trade: object {{\n"
        "  date (MM-DD-YYYY),\n"
        "  transactionType (buy or sell),\n"
        "  symbol,\n"
        "  quantity,\n"
        "  amountPerUnit,\n"
        "  totalAmount,\n"
        "  tradingFees,\n"
        "  investmentAccount\n"
        "}} or null\n"
        "- summary: object {{ symbol, startDate, endDate }} or null\n\n"
        "Rules:\n"
        '- Use "buy" or "sell" for transactionType.\n'
        "- quantity, amountPerUnit, totalAmount, tradingFees must be numbers.\n"
        '- If the user does not provide all trade fields, set action to "unknown".\n'
        '- If the user asks for a summary, set action to "summarize".\n'
        '- If the user wants to log a trade, set action to "log_trade".\n'
        '- If unclear, use "unknown".'
    ),
    human_prompt_template="Conversation:\n{history}\n\nUser message: {message}",
    input_variables=["history", "message"],
    temperature=INTENT_TEMPERATURE,
)

REPLY_CONFIG = ChainConfig(
    name="reply",
    system_prompt=(
        "You are a helpful trading assistant. Respond naturally to the user.\n"
        "If context JSON is provided, use it to craft a helpful response.\n"
        "If web search results are provided, use them for up-to-date info and cite the URL in parentheses.\n"
        'If action is "summarize", explain the summary in plain language.\n'
        'If action is "log_trade", confirm what was logged.\n'
        'If action is "unknown", ask a brief clarifying question.\n'
        "If an error is provided, explain it briefly and say what the user can do about it.\n"
        "Required trade fields:\n"
        "- Date (MM-DD-YYYY)\n"
        "- Transaction Type (buy or sell)\n"
        "- Stock / ETF Symbol\n"
        "- Quantity of Units\n"
        "- Amount per unit\n"
        "- Total Amount (before trading fees)\n"
        "- Trading Fees\n"
        "- Investment Account\n"
        "Keep responses concise."
    ),
    human_prompt_template=(
        "Conversation:\n{history}\n\n"
        "Context JSON: {context}\n"
        "Web search JSON: {search}\n"
        "User message: {message}"
    ),
    input_variables=["history", "context", "search", "message"],
    temperature=REPLY_TEMPERATURE,
)

# Registry of all chain configurations
CHAIN_CONFIGS = {
    "intent": INTENT_CONFIG,
    "reply": REPLY_CONFIG,
}
