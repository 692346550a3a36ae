"""Gateway webhook route."""

from fastapi import APIRouter, BackgroundTasks
from pydantic import BaseModel

from ...app import IApplication
from ...logging_config import get_logger
from ..schemas import WebhookEvent, to_inbound_event, to_lifecycle_event

logger = get_logger(__name__)


class AcceptedResponse(BaseModel):
    """Response model for webhook deliveries."""

    status: str


def create_webhook_router(app: IApplication) -> APIRouter:
    """Create webhook router."""
    router = APIRouter(prefix="/api", tags=["webhook"])

    @router.post("/webhook", response_model=AcceptedResponse)
    async def receive_event(
        event: WebhookEvent, background_tasks: BackgroundTasks
    ) -> dict:
        """Accept a gateway event and process it in the background."""
        inbound = to_inbound_event(event)
        if inbound is not None:
            background_tasks.add_task(app.publish_message, inbound)
            return {"status": "accepted"}

        lifecycle = to_lifecycle_event(event)
        if lifecycle is not None:
            background_tasks.add_task(app.publish_lifecycle, lifecycle)
            return {"status": "accepted"}

        logger.debug("Skipping webhook event %s", event.event)
        return {"status": "ignored"}

    return router
