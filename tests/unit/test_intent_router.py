from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from oscarbot.core.config import Settings
from oscarbot.core.container import AppContainer
from oscarbot.dialog.actions import delegate
from oscarbot.domain.lex import ConfirmIntentAction, DialogResponse, LexEvent
from oscarbot.intents.router import IntentRouter, UnknownIntentError


@pytest.mark.asyncio
async def test_router_dispatches_by_intent_name(make_event: Callable[..., LexEvent]) -> None:
    seen: list[str] = []

    async def _handler(event: LexEvent) -> DialogResponse:
        seen.append(event.intent_name)
        return delegate(event.session_attributes, event.slots)

    router = IntentRouter()
    router.register("OpenProject", _handler)

    response = await router.dispatch(make_event(intent_name="OpenProject"))

    assert seen == ["OpenProject"]
    assert response.to_payload()["dialogAction"]["type"] == "Delegate"


@pytest.mark.asyncio
async def test_router_rejects_unknown_intent(make_event: Callable[..., LexEvent]) -> None:
    router = IntentRouter()

    with pytest.raises(UnknownIntentError) as exc_info:
        await router.dispatch(make_event(intent_name="OrderPizza"))

    assert exc_info.value.intent_name == "OrderPizza"


@pytest.mark.asyncio
async def test_container_router_handles_star_project(make_event: Callable[..., LexEvent], fake_github: Any) -> None:
    container = AppContainer(settings=Settings(), github_client=fake_github)
    router = container.create_intent_router()

    response = await router.dispatch(make_event())

    assert router.intents == ["StarProject"]
    assert isinstance(response.dialog_action, ConfirmIntentAction)
