"""EventBus implementation for transport events."""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)


class Topic(str, Enum):
    """EventBus topics."""

    MESSAGE = "message"
    LIFECYCLE = "lifecycle"


TopicHandler = Callable[[Any], Awaitable[None]]


class IEventBus(Protocol):
    """In-memory pub/sub for transport events."""

    def subscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        ...

    async def publish(self, topic: Topic, event: Any) -> None:
        """Publish an event: calls subscriber callbacks."""
        ...


class EventBus:
    """In-memory pub/sub event bus."""

    def __init__(self):
        self._subscribers: dict[Topic, list[TopicHandler]] = {
            Topic.MESSAGE: [],
            Topic.LIFECYCLE: [],
        }

    def subscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        self._subscribers[topic].append(handler)

    def clear(self) -> None:
        for handlers in self._subscribers.values():
            handlers.clear()

    async def publish(self, topic: Topic, event: Any) -> None:
        """Publish an event to every handler of its topic."""
        handlers = self._subscribers.get(topic, [])
        if not handlers:
            logger.debug("No subscribers for %s event", topic.value)
            return

        results = await asyncio.gather(
            *[handler(event) for handler in handlers],
            return_exceptions=True,
        )

        for i, result in enumerate(results):
            if isinstance(result, Exception):
                logger.error(
                    "Error in %s handler %s: %s",
                    topic.value,
                    i,
                    result,
                    exc_info=result,
                )
