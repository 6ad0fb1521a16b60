"""Greeting API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from app.schemas.greeting import GreetingDto
from app.services.greetings import greeting_from_dto
from app.services.greetings import project_greeting

logger = logging.getLogger(__name__)

router = APIRouter(tags=["greetings"])


async def read_greeting_dto(request: Request) -> GreetingDto:
    """Decode the request body as JSON regardless of its Content-Type."""
    try:
        raw_body = await request.json()
    except ValueError as exc:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        ) from exc

    try:
        return GreetingDto.model_validate(raw_body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


@router.post("/", response_class=PlainTextResponse)
def create_greeting_endpoint(payload: GreetingDto = Depends(read_greeting_dto)) -> PlainTextResponse:
    """Validate a greeting request and answer with the rendered greeting."""
    reply = project_greeting(greeting_from_dto(payload))
    if reply.status_code >= 400:
        logger.info("Rejected greeting payload: %s", reply.body)
    return PlainTextResponse(content=reply.body, status_code=reply.status_code)
