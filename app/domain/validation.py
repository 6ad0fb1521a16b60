"""Validation outcome types and the accumulating combinator."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation carrying the checked value."""

    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying every field error in evaluation order."""

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid outcome requires at least one error")

    @classmethod
    def of(cls, *errors: str) -> Invalid:
        return cls(errors=tuple(errors))


Validated = Valid[T] | Invalid


def map_valid(build: Callable[..., T], *results: Validated[Any]) -> Validated[T]:
    """Combine independent validation results.

    Every result is inspected; failures are concatenated in argument order
    instead of stopping at the first one. ``build`` only runs when all of the
    results are valid and receives their values positionally.
    """
    errors: list[str] = []
    values: list[Any] = []
    for result in results:
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        else:
            values.append(result.value)

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(build(*values))

