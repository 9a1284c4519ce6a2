"""
LangGraph workflow for the trade log chat.

Pipeline: RESOLVE → {LOG_TRADE | SUMMARIZE | UNKNOWN} → COMPOSE → END
When the language model rejects our credential, RESOLVE or COMPOSE hand off
to MANUAL_FALLBACK instead, which ends the turn without the model.
"""

from functools import partial

from langgraph.graph import END, StateGraph

from .consts import (
    RESOLVE,
    LOG_TRADE,
    SUMMARIZE,
    UNKNOWN,
    COMPOSE,
    MANUAL_FALLBACK,
)
from .nodes import (
    resolve,
    log_trade,
    summarize,
    unknown,
    compose,
    manual_fallback,
)
from .services import ChatServices
from .state import ChatState


def route_after_resolve(state: ChatState) -> str:
    if state.get("llm_unavailable"):
        return MANUAL_FALLBACK
    return state["action"].kind


def route_after_compose(state: ChatState) -> str:
    return MANUAL_FALLBACK if state.get("llm_unavailable") else END


def build_chat_graph(services: ChatServices):
    """Wire the chat nodes to *services* and compile the graph."""
    workflow = StateGraph(ChatState)

    # Add nodes
    workflow.add_node(RESOLVE, partial(resolve, services=services))
    workflow.add_node(LOG_TRADE, partial(log_trade, services=services))
    workflow.add_node(SUMMARIZE, partial(summarize, services=services))
    workflow.add_node(UNKNOWN, partial(unknown, services=services))
    workflow.add_node(COMPOSE, partial(compose, services=services))
    workflow.add_node(MANUAL_FALLBACK, partial(manual_fallback, services=services))

    # resolve → action → compose → END, with the manual detour
    workflow.set_entry_point(RESOLVE)
    workflow.add_conditional_edges(
        RESOLVE,
        route_after_resolve,
        {
            LOG_TRADE: LOG_TRADE,
            SUMMARIZE: SUMMARIZE,
            UNKNOWN: UNKNOWN,
            MANUAL_FALLBACK: MANUAL_FALLBACK,
        },
    )
    workflow.add_edge(LOG_TRADE, COMPOSE)
    workflow.add_edge(SUMMARIZE, COMPOSE)
    workflow.add_edge(UNKNOWN, COMPOSE)
    workflow.add_conditional_edges(
        COMPOSE,
        route_after_compose,
        {MANUAL_FALLBACK: MANUAL_FALLBACK, END: END},
    )
    workflow.add_edge(MANUAL_FALLBACK, END)

    # Compile
    return workflow.compile()
