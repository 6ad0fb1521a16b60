"""Greeting domain model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ToneEnum(str, Enum):
    FORMAL = "Formal"
    CASUAL = "Casual"


@dataclass(frozen=True)
class Greeting:
    """Validated greeting request; addressee is never blank."""

    addressee: str
    tone: ToneEnum


def greeting_message(greeting: Greeting) -> str:
    """Render the greeting text for the requested tone."""
    if greeting.tone is ToneEnum.FORMAL:
        return f"Salutations, {greeting.addressee}. With the highest respect, Giraffe"
    return f"Hello {greeting.addressee}, from Giraffe!"
