"""Operator control routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...app import Application


class ControlResponse(BaseModel):
    """Response model for control actions."""

    status: str
    conversation_id: str


def create_control_router(app: Application) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/reset/{conversation_id}", response_model=ControlResponse)
    async def reset_conversation(conversation_id: str, notify: bool = True) -> dict:
        """Same as sending the reset command quoting the customer."""
        try:
            await app.engine.reset(conversation_id, notify=notify)
            return {"status": "ok", "conversation_id": conversation_id}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/override/{conversation_id}", response_model=ControlResponse)
    async def override_conversation(conversation_id: str) -> dict:
        """Same as a human agent writing the takeover marker."""
        try:
            app.engine.override(conversation_id)
            return {"status": "ok", "conversation_id": conversation_id}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
