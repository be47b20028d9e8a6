"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants. The error payload is
not restricted to exceptions: any value can describe a failure.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a number: {raw!r}")
        return ok(int(raw))

    match parse_port("8080"):
        case Ok(port):
            serve(port)
        case Err(reason):
            log.warning(reason)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from optres._tag import Kind, Tagged, kind_of


@final
@dataclass(frozen=True, slots=True)
class Ok[T](Tagged):
    """Represents a successful result containing a value."""

    data: T

    _kind = Kind.OK


@final
@dataclass(frozen=True, slots=True)
class Err[E](Tagged):
    """Represents a failed result containing an error payload."""

    err: E

    _kind = Kind.ERR


type Result[T, E] = Ok[T] | Err[E]


def ok[T](data: T) -> Ok[T]:
    """Wrap ``data`` in an Ok."""
    return Ok(data)


def err[E](error: E) -> Err[E]:
    """Wrap ``error`` in an Err."""
    return Err(error)


def is_ok(value: object) -> bool:
    """Returns True if the value is an Ok."""
    return kind_of(value) is Kind.OK


def is_err(value: object) -> bool:
    """Returns True if the value is an Err."""
    return kind_of(value) is Kind.ERR


def is_result(value: object) -> bool:
    """Returns True only for values built by ``ok()`` or ``err()``."""
    return kind_of(value) in (Kind.OK, Kind.ERR)
