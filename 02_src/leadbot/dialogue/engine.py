"""DialogueEngine implementation."""

import asyncio
from typing import Protocol

from ..catalog import CatalogDispatcher
from ..classifier import MessageClassifier
from ..composer import ResponseComposer
from ..logging_config import get_logger
from ..models import (
    Answers,
    Conversation,
    EffectKind,
    InboundEvent,
    MessageKind,
    Prompt,
    Step,
    Transition,
)
from ..override import OverrideTracker
from ..storage import IConversationStore
from ..transport import ITransport
from .machine import DEFAULT_MAX_ATTEMPTS, advance, apply_transition

logger = get_logger(__name__)


class IDialogueEngine(Protocol):
    """Runs the qualification script for every conversation."""

    async def handle_event(self, event: InboundEvent) -> None:
        """Classify an inbound event and act on it."""
        ...

    async def handle_customer_message(
        self, conversation_id: str, text: str, raw_text: str
    ) -> None:
        """Advance one conversation with a customer reply."""
        ...


class DialogueEngine:
    """Owns conversation state and override flags."""

    def __init__(
        self,
        store: IConversationStore,
        overrides: OverrideTracker,
        classifier: MessageClassifier,
        composer: ResponseComposer,
        dispatcher: CatalogDispatcher,
        transport: ITransport,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self._store = store
        self._overrides = overrides
        self._classifier = classifier
        self._composer = composer
        self._dispatcher = dispatcher
        self._transport = transport
        self._max_attempts = max_attempts
        self._locks: dict[str, asyncio.Lock] = {}

    async def handle_event(self, event: InboundEvent) -> None:
        """Classify an inbound event and route it."""
        classification = self._classifier.classify(event)
        kind = classification.kind
        conversation_id = classification.conversation_id

        if kind in (MessageKind.IGNORE, MessageKind.SELF_ECHO):
            logger.debug("Dropping %s event for %s", kind.value, conversation_id)
            return
        if kind == MessageKind.HUMAN_AGENT_MARKER:
            self._overrides.mark_override(conversation_id)
            return
        if kind == MessageKind.RESET_COMMAND:
            await self._handle_reset(event)
            return

        await self.handle_customer_message(
            classification.conversation_id,
            classification.text,
            classification.raw_text,
        )

    async def handle_customer_message(
        self, conversation_id: str, text: str, raw_text: str
    ) -> None:
        """Advance one conversation. Replies are sent before returning."""
        lock = self._locks.setdefault(conversation_id, asyncio.Lock())
        async with lock:
            try:
                await self._process(conversation_id, text, raw_text)
            except Exception as e:
                logger.error(
                    "Error handling message from %s: %s",
                    conversation_id,
                    e,
                    exc_info=True,
                    extra={"conversation_id": conversation_id},
                )
                await self._send_generic_error(conversation_id)

    async def _process(self, conversation_id: str, text: str, raw_text: str) -> None:
        if self._overrides.is_overridden(conversation_id):
            logger.info(
                "Human agent has control of %s. Bot will not respond.",
                conversation_id,
                extra={"conversation_id": conversation_id},
            )
            return

        conversation = self._store.get(conversation_id)

        if conversation is None:
            self._store.create(conversation_id)
            await self._transport.send_text(
                conversation_id, self._composer.render(Prompt.WELCOME)
            )
            logger.info(
                "Welcome message sent to new conversation %s",
                conversation_id,
                extra={"conversation_id": conversation_id},
            )
            return

        if conversation.step.is_terminal:
            logger.debug(
                "Conversation %s is %s, ignoring: %s",
                conversation_id,
                conversation.step.value,
                raw_text,
                extra={"conversation_id": conversation_id},
            )
            return

        previous = conversation.step
        transition = advance(conversation, text, raw_text, self._max_attempts)
        apply_transition(conversation, transition)
        self._store.update(conversation)
        self._log_transition(conversation, previous, transition)

        await self._perform(conversation, transition)

    async def _perform(self, conversation: Conversation, transition: Transition) -> None:
        effect = transition.effect
        if effect.kind == EffectKind.REPLY and effect.prompt is not None:
            await self._transport.send_text(
                conversation.id, self._composer.render(effect.prompt)
            )
        elif effect.kind == EffectKind.DISPATCH:
            await self._dispatcher.dispatch(conversation.id, conversation.answers)

    def _log_transition(
        self, conversation: Conversation, previous: Step, transition: Transition
    ) -> None:
        extra = {"conversation_id": conversation.id, "step": conversation.step.value}
        if transition.error_step is not None:
            attempts = conversation.error_count[transition.error_step]
            if transition.step == Step.COMPLETED:
                logger.info(
                    "%s exceeded %d wrong attempts at step %s, handing off",
                    conversation.id,
                    attempts,
                    previous.value,
                    extra=extra,
                )
            else:
                logger.info(
                    "Invalid reply from %s at step %s (attempt %d)",
                    conversation.id,
                    previous.value,
                    attempts,
                    extra=extra,
                )
        elif transition.step != previous:
            logger.info(
                "%s: %s -> %s",
                conversation.id,
                previous.value,
                transition.step.value,
                extra=extra,
            )

    async def _send_generic_error(self, conversation_id: str) -> None:
        conversation = self._store.get(conversation_id)
        if self._overrides.is_overridden(conversation_id):
            return
        if conversation is not None and conversation.step.is_terminal:
            return
        try:
            await self._transport.send_text(
                conversation_id, self._composer.render(Prompt.GENERIC_ERROR)
            )
        except Exception as e:
            logger.error(
                "Could not send error message to %s: %s",
                conversation_id,
                e,
                extra={"conversation_id": conversation_id},
            )

    async def _handle_reset(self, event: InboundEvent) -> None:
        try:
            target = await event.resolve_quoted_sender()
        except Exception as e:
            logger.error("Error resolving reset target: %s", e, exc_info=True)
            return

        if not target:
            logger.warning("Reset command without a resolvable quoted sender")
            return

        await self.reset(target)

    async def reset(self, conversation_id: str, notify: bool = True) -> None:
        """Forget a conversation and lift any override on it.

        The conversation's lock is kept: a handler may still hold it
        mid-dispatch, and the next message must queue behind that handler.
        """
        self._overrides.clear(conversation_id)

        if not notify:
            return
        try:
            await self._transport.send_text(
                conversation_id, self._composer.render(Prompt.BOT_REENABLED)
            )
        except Exception as e:
            logger.error(
                "Error resetting bot for %s: %s",
                conversation_id,
                e,
                extra={"conversation_id": conversation_id},
            )

    def override(self, conversation_id: str) -> None:
        """Operator takeover without going through the chat."""
        self._overrides.mark_override(conversation_id)

    def is_overridden(self, conversation_id: str) -> bool:
        return self._overrides.is_overridden(conversation_id)

    def overridden_ids(self) -> list[str]:
        return self._overrides.overridden_ids()

    def snapshot(self, conversation_id: str) -> Conversation | None:
        """Read-only view of a conversation record."""
        conversation = self._store.get(conversation_id)
        if conversation is None:
            return None
        return Conversation(
            id=conversation.id,
            step=conversation.step,
            answers=Answers(**conversation.answers.to_dict()),
            error_count=dict(conversation.error_count),
        )

    def conversation_count(self) -> int:
        return len(self._store.all())
