from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException

from oscarbot.api.deps import get_intent_router
from oscarbot.domain.lex import LexEvent
from oscarbot.intents.router import IntentRouter, UnknownIntentError

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("/health/live")
async def health_live() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/lex/fulfillment")
async def lex_fulfillment(
    event: LexEvent,
    intents: IntentRouter = Depends(get_intent_router),
) -> dict[str, Any]:
    try:
        response = await intents.dispatch(event)
    except UnknownIntentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return response.to_payload()
