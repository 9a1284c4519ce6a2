"""
FastAPI application: the chat endpoint, a health check, and (optionally) the
built web client.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from config import CLIENT_DIST_DIR, TRADE_LOG_CONFIG
from core.ledger import LedgerClient, load_ledger_schema
from core.search import ToolUsage
from graph.chains import IntentResolver, ReplyComposer
from graph.consts import ERROR, SERVICE_UNAVAILABLE
from graph.history import ChatHistory
from graph.orchestrator import ChatOrchestrator
from graph.services import ChatServices

EMPTY_MESSAGE_REPLY = "Message is required."

_STATUS_CODES = {
    SERVICE_UNAVAILABLE: 503,
    ERROR: 500,
}


class ChatRequest(BaseModel):
    message: Optional[str] = ""


def build_default_orchestrator() -> ChatOrchestrator:
    """Orchestrator backed by OpenAI, Tavily and the configured Google Sheet."""
    from core.sheets.google import GoogleSheetStore

    schema = load_ledger_schema(TRADE_LOG_CONFIG)
    services = ChatServices(
        resolver=IntentResolver(),
        composer=ReplyComposer(),
        ledger_factory=lambda: LedgerClient(GoogleSheetStore.from_env(), schema),
    )
    return ChatOrchestrator(services, ChatHistory())


def create_app(
    orchestrator: Optional[ChatOrchestrator] = None,
    client_dist: Optional[Path] = CLIENT_DIST_DIR,
) -> FastAPI:
    orchestrator = orchestrator or build_default_orchestrator()
    app = FastAPI(
        title="Trade Log Assistant",
        description="Log trades and summarize them through chat",
        version="0.1.0",
    )
    app.state.orchestrator = orchestrator

    @app.post("/api/chat")
    def chat(request: ChatRequest) -> JSONResponse:
        """Handle one chat message."""
        message = (request.message or "").strip()
        if not message:
            return JSONResponse(
                status_code=400,
                content={"reply": EMPTY_MESSAGE_REPLY, "tools": ToolUsage().as_payload()},
            )

        response = orchestrator.handle_message(message)
        return JSONResponse(
            status_code=_STATUS_CODES.get(response.status, 200),
            content={"reply": response.reply, "tools": response.tools.as_payload()},
        )

    @app.get("/api/health")
    def health_check() -> dict:
        """Health check endpoint."""
        return {"ok": True}

    # Serve the built client last so /api routes win
    if client_dist is not None and client_dist.is_dir():
        app.mount("/", StaticFiles(directory=str(client_dist), html=True), name="client")

    return app
