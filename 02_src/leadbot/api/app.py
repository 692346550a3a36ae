"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from .routes import create_control_router, create_status_router, create_webhook_router


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or Application()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Lead Qualification Bot",
        description="Scripted WhatsApp lead qualification",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    fastapi_app.include_router(create_status_router(application))
    fastapi_app.include_router(create_webhook_router(application))
    fastapi_app.include_router(create_control_router(application))

    return fastapi_app
