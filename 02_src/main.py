"""Main entry point for the lead qualification bot."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from leadbot.api import create_fastapi_app
from leadbot.app import Application
from leadbot.config import Settings
from leadbot.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    app = create_fastapi_app(Application(settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
