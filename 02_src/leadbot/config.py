"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_CATALOG_DIR = DATA_DIR / "catalog"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"


PathLike = Union[str, Path]


def resolve_path(env_value: PathLike | None, default: Path) -> Path:
    """Resolve a configured path; relative paths are taken from the project root."""
    if not env_value:
        return default

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime settings, read from environment variables."""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"

    # Operator signals
    human_agent_marker: str = "###"
    reset_command: str = "RESET_BOT"
    quoted_reply_is_takeover: bool = True

    # Dialogue
    max_attempts: int = 3

    # Catalog pacing (seconds)
    message_delay: float = 1.0
    under50_image_delay: float = 1.5
    under100_image_delay: float = 2.0
    catalog_dir: Path = DEFAULT_CATALOG_DIR

    # WhatsApp gateway
    whatsapp_server_url: str | None = None
    whatsapp_server_api_key: str | None = None
    whatsapp_server_instance_name: str | None = None

    # Keep-alive
    keepalive_url: str | None = None
    keepalive_interval: float = 840.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            api_host=os.getenv("API_HOST", "localhost"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            human_agent_marker=os.getenv("HUMAN_AGENT_MARKER", "###"),
            reset_command=os.getenv("RESET_COMMAND", "RESET_BOT"),
            quoted_reply_is_takeover=_env_bool("QUOTED_REPLY_IS_TAKEOVER", True),
            max_attempts=int(os.getenv("MAX_ATTEMPTS", "3")),
            message_delay=float(os.getenv("MESSAGE_DELAY", "1.0")),
            under50_image_delay=float(os.getenv("UNDER50_IMAGE_DELAY", "1.5")),
            under100_image_delay=float(os.getenv("UNDER100_IMAGE_DELAY", "2.0")),
            catalog_dir=resolve_path(os.getenv("CATALOG_DIR"), DEFAULT_CATALOG_DIR),
            whatsapp_server_url=os.getenv("WHATSAPP_SERVER_URL"),
            whatsapp_server_api_key=os.getenv("WHATSAPP_SERVER_API_KEY"),
            whatsapp_server_instance_name=os.getenv("WHATSAPP_SERVER_INSTANCE_NAME"),
            keepalive_url=os.getenv("KEEPALIVE_URL") or None,
            keepalive_interval=float(os.getenv("KEEPALIVE_INTERVAL", "840")),
        )
