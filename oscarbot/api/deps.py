from __future__ import annotations

from typing import cast

from fastapi import Depends, Request

from oscarbot.core.container import AppContainer
from oscarbot.intents.router import IntentRouter


def get_container(request: Request) -> AppContainer:
    return cast(AppContainer, request.app.state.container)


def get_intent_router(container: AppContainer = Depends(get_container)) -> IntentRouter:
    return container.create_intent_router()
