from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from oscarbot.api.routes import router as api_router
from oscarbot.core.config import get_settings
from oscarbot.core.container import AppContainer
from oscarbot.core.logging import setup_logging
from oscarbot.domain.lex import LexEvent


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    app.state.container = AppContainer.from_settings(settings)
    yield


app = FastAPI(title=get_settings().app_name, lifespan=lifespan)
app.include_router(api_router)


async def handle_event(payload: dict[str, Any], container: AppContainer) -> dict[str, Any]:
    event = LexEvent.model_validate(payload)
    response = await container.create_intent_router().dispatch(event)
    return response.to_payload()


def lambda_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Entry point when the fulfillment code hook is deployed as an AWS Lambda."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    return asyncio.run(handle_event(event, AppContainer.from_settings(settings)))
