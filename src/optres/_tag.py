"""Runtime discriminant shared by Option and Result containers.

Every container class derives from ``Tagged`` and declares its variant as a
class-level ``Kind``. Variant checks go through ``kind_of``/``family_of``
instead of probing for ``data``/``err`` attributes, so user objects that
happen to carry those attribute names are never mistaken for containers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class Kind(StrEnum):
    """Variant of a tagged container."""

    SOME = "some"
    NONE = "none"
    OK = "ok"
    ERR = "err"


class Family(StrEnum):
    """Container family a variant belongs to."""

    OPTION = "option"
    RESULT = "result"


_FAMILIES: dict[Kind, Family] = {
    Kind.SOME: Family.OPTION,
    Kind.NONE: Family.OPTION,
    Kind.OK: Family.RESULT,
    Kind.ERR: Family.RESULT,
}


class Tagged:
    """Base class for container variants. Not part of the public API."""

    __slots__ = ()

    _kind: ClassVar[Kind]

    @property
    def kind(self) -> Kind:
        return self._kind


def kind_of(value: object) -> Kind | None:
    """Return the variant of ``value``, or None if it is not a container."""
    if isinstance(value, Tagged):
        return value._kind
    return None


def family_of(value: object) -> Family | None:
    """Return the family of ``value``, or None if it is not a container."""
    kind = kind_of(value)
    if kind is None:
        return None
    return _FAMILIES[kind]
