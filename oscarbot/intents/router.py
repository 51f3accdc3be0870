from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog
from structlog.contextvars import bound_contextvars

from oscarbot.domain.lex import DialogResponse, LexEvent

logger = structlog.get_logger(__name__)

IntentHandlerFn = Callable[[LexEvent], Awaitable[DialogResponse]]


class UnknownIntentError(LookupError):
    def __init__(self, intent_name: str) -> None:
        super().__init__(f"No handler registered for intent {intent_name!r}")
        self.intent_name = intent_name


class IntentRouter:
    def __init__(self) -> None:
        self._handlers: dict[str, IntentHandlerFn] = {}

    def register(self, intent_name: str, handler: IntentHandlerFn) -> None:
        self._handlers[intent_name] = handler

    @property
    def intents(self) -> list[str]:
        return sorted(self._handlers)

    async def dispatch(self, event: LexEvent) -> DialogResponse:
        handler = self._handlers.get(event.intent_name)
        if handler is None:
            logger.warning("router.unknown_intent", intent=event.intent_name)
            raise UnknownIntentError(event.intent_name)

        with bound_contextvars(intent=event.intent_name, lex_user_id=event.user_id):
            logger.info(
                "router.dispatch",
                invocation_source=event.invocation_source,
                confirmation_status=str(event.confirmation_status),
            )
            response = await handler(event)
            logger.info("router.responded", dialog_action=str(response.dialog_action.type))
        return response
