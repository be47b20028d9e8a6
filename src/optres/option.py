"""Option type for explicit absence.

Provides an Option[T] type with Some and Nothing variants.

Usage:
    def find_user(name: str) -> Option[User]:
        user = users.get(name)
        return some(user) if user is not None else none()

    found = find_user("ada")
    if is_some(found):
        print(found.data)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from optres._tag import Kind, Tagged, kind_of


@final
@dataclass(frozen=True, slots=True)
class Some[T](Tagged):
    """An Option holding a value."""

    data: T

    _kind = Kind.SOME


@final
@dataclass(frozen=True, slots=True)
class Nothing(Tagged):
    """An Option holding no value. Use ``none()`` rather than instantiating."""

    _kind = Kind.NONE


NOTHING = Nothing()

type Option[T] = Some[T] | Nothing


def some[T](data: T) -> Some[T]:
    """Wrap ``data`` in a Some. Options are never flattened."""
    return Some(data)


def none() -> Nothing:
    """Return the shared Nothing instance."""
    return NOTHING


def is_some(value: object) -> bool:
    """Returns True if the value is a Some."""
    return kind_of(value) is Kind.SOME


def is_none(value: object) -> bool:
    """Returns True if the value is Nothing."""
    return kind_of(value) is Kind.NONE


def is_option(value: object) -> bool:
    """Returns True only for values built by ``some()`` or ``none()``."""
    return kind_of(value) in (Kind.SOME, Kind.NONE)
