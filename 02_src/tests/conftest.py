"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def texts_sent(transport, conversation_id: str | None = None) -> list[str]:
    """Texts passed to transport.send_text, optionally for one conversation."""
    return [
        call.args[1]
        for call in transport.send_text.await_args_list
        if conversation_id is None or call.args[0] == conversation_id
    ]


@pytest.fixture
def settings(tmp_path):
    """Settings with no pacing and an empty catalog directory."""
    from leadbot.config import Settings

    return Settings(
        message_delay=0.0,
        under50_image_delay=0.0,
        under100_image_delay=0.0,
        catalog_dir=tmp_path / "catalog",
    )


@pytest.fixture
def transport():
    """Create mock transport."""
    tr = Mock()
    tr.send_text = AsyncMock(return_value=None)
    tr.send_media = AsyncMock(return_value=None)
    return tr


@pytest.fixture
def sleep():
    """Recorded no-op sleep."""
    return AsyncMock(return_value=None)


@pytest.fixture
def store():
    from leadbot.storage import InMemoryConversationStore

    return InMemoryConversationStore()


@pytest.fixture
def overrides(store):
    from leadbot.override import OverrideTracker

    return OverrideTracker(store)


@pytest.fixture
def composer():
    from leadbot.composer import ResponseComposer

    return ResponseComposer()


@pytest.fixture
def dispatcher(transport, composer, settings, sleep):
    from leadbot.catalog import CatalogDispatcher, default_tiers

    return CatalogDispatcher(
        transport=transport,
        composer=composer,
        tiers=default_tiers(settings),
        message_delay=settings.message_delay,
        sleep=sleep,
    )


@pytest.fixture
def engine(store, overrides, composer, dispatcher, transport, settings):
    """Create DialogueEngine for testing."""
    from leadbot.classifier import MessageClassifier
    from leadbot.dialogue import DialogueEngine

    return DialogueEngine(
        store=store,
        overrides=overrides,
        classifier=MessageClassifier(settings),
        composer=composer,
        dispatcher=dispatcher,
        transport=transport,
        max_attempts=settings.max_attempts,
    )


@pytest.fixture
def customer_event():
    """Factory for customer message events."""
    from leadbot.models import InboundEvent

    def make(body: str, chat_id: str = "919800000001@c.us") -> InboundEvent:
        return InboundEvent(chat_id=chat_id, sender_id=chat_id, body=body)

    return make
