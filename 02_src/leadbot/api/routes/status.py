"""Status and inspection routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...app import Application
from ...models import TransportState


class HealthResponse(BaseModel):
    status: str
    state: str
    timestamp: datetime


class StatusResponse(BaseModel):
    state: str
    ready: bool
    qr_code: str | None = None
    detail: str | None = None
    updated_at: datetime | None = None
    conversations: int
    overridden: int


class ConversationResponse(BaseModel):
    id: str
    step: str
    answers: dict[str, str | None]
    error_count: dict[str, int]
    overridden: bool


def create_status_router(app: Application) -> APIRouter:
    """Create status router."""
    router = APIRouter(tags=["status"])

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """``ready`` once the transport is connected, ``initializing`` otherwise."""
        state = app.status.state
        return {
            "status": "ready" if state == TransportState.READY else "initializing",
            "state": state.value,
            "timestamp": datetime.now(timezone.utc),
        }

    @router.get("/", response_model=StatusResponse)
    async def status() -> dict:
        """Connection state plus the pending QR code, if any."""
        engine = app.engine
        return {
            "state": app.status.state.value,
            "ready": app.status.state == TransportState.READY,
            "qr_code": app.status.qr_code,
            "detail": app.status.detail,
            "updated_at": app.status.updated_at,
            "conversations": engine.conversation_count(),
            "overridden": len(engine.overridden_ids()),
        }

    @router.get("/api/conversations/{conversation_id}", response_model=ConversationResponse)
    async def get_conversation(conversation_id: str) -> dict:
        engine = app.engine
        conversation = engine.snapshot(conversation_id)
        if conversation is None:
            raise HTTPException(status_code=404, detail="Conversation not found")
        return {
            "id": conversation.id,
            "step": conversation.step.value,
            "answers": conversation.answers.to_dict(),
            "error_count": {
                step.value: count for step, count in conversation.error_count.items()
            },
            "overridden": engine.is_overridden(conversation_id),
        }

    return router
