"""Greeting validation, mapping, and response projection."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import status

from app.domain.greeting import Greeting
from app.domain.greeting import ToneEnum
from app.domain.greeting import greeting_message
from app.domain.validation import Invalid
from app.domain.validation import Valid
from app.domain.validation import Validated
from app.domain.validation import map_valid
from app.schemas.greeting import GreetingDto

ERROR_SEPARATOR = "; "

_TONE_LABELS: dict[str, ToneEnum] = {tone.value: tone for tone in ToneEnum}


@dataclass(frozen=True)
class GreetingReply:
    """Transport-neutral response for a greeting request."""

    status_code: int
    body: str


def tone_from_string(raw_tone: str | None) -> Validated[ToneEnum]:
    """Match a tone label exactly; labels are case-sensitive."""
    tone = _TONE_LABELS.get(raw_tone or "")
    if tone is None:
        return Invalid.of(f"Unknown tone {raw_tone or ''}")
    return Valid(tone)


def validate_addressee(raw_addressee: str | None) -> Validated[str]:
    """Reject absent, empty, and whitespace-only addressees."""
    if raw_addressee is None or not raw_addressee.strip():
        return Invalid.of("Missing addressee")
    return Valid(raw_addressee)


def greeting_from_dto(dto: GreetingDto) -> Validated[Greeting]:
    """Validate every field of the DTO and build the domain greeting."""
    tone = tone_from_string(dto.tone)
    addressee = validate_addressee(dto.addressee)

    return map_valid(
        lambda valid_tone, valid_addressee: Greeting(addressee=valid_addressee, tone=valid_tone),
        tone,
        addressee,
    )


def project_greeting(outcome: Validated[Greeting]) -> GreetingReply:
    """Turn a validation outcome into a status code and plain-text body."""
    if isinstance(outcome, Invalid):
        return GreetingReply(
            status_code=status.HTTP_400_BAD_REQUEST,
            body=ERROR_SEPARATOR.join(outcome.errors),
        )
    return GreetingReply(status_code=status.HTTP_200_OK, body=greeting_message(outcome.value))
