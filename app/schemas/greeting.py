"""Pydantic schemas for greeting API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import model_validator


class GreetingDto(BaseModel):
    """Wire shape of a greeting request.

    Both fields stay optional free-form strings so that a missing or unknown
    value reaches the validators instead of failing inside decoding. Keys
    match case-insensitively.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    addressee: str | None = None
    tone: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key.lower() if isinstance(key, str) else key: value for key, value in data.items()}
        return data
