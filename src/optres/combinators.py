"""Combinators shared by Option and Result.

Each function dispatches on the container's runtime tag, so one
implementation serves both families and the output keeps the input's family:
mapping a Some yields a Some, mapping an Ok yields an Ok.

``unwrap`` is the only combinator that raises ``UnwrapError``. Call it inside
a ``run()``/``safe()`` boundary to short-circuit on the first failure:

    def load_profile(user_id: int) -> Result[Profile, str]:
        user = unwrap(fetch_user(user_id))
        prefs = unwrap(fetch_prefs(user))
        return ok(Profile(user, prefs))

    result = run(lambda: load_profile(42))  # Err(...) instead of a raise
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from optres._tag import Family, Kind, family_of, kind_of
from optres.errors import UnwrapError
from optres.option import some
from optres.result import err, ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from optres.option import Option
    from optres.result import Result


def _require_kind(value: object, operation: str) -> Kind:
    kind = kind_of(value)
    if kind is None:
        raise TypeError(f"{operation}() expects an Option or Result, got {type(value).__name__}")
    return kind


def _require_result(value: object, operation: str) -> Kind:
    kind = _require_kind(value, operation)
    if family_of(value) is not Family.RESULT:
        raise TypeError(f"{operation}() is not defined for Option values")
    return kind


@overload
def unwrap[T](res_or_opt: Option[T]) -> T: ...


@overload
def unwrap[T, E](res_or_opt: Result[T, E]) -> T: ...


def unwrap(res_or_opt: Any) -> Any:
    """Return the contained value or raise UnwrapError.

    Raises:
        UnwrapError: For Nothing (``original_error`` is None) or for an Err
            (``original_error`` is the Err's payload).
        TypeError: If the argument is not an Option or Result.
    """
    kind = _require_kind(res_or_opt, "unwrap")
    if kind is Kind.NONE:
        raise UnwrapError(None, "called unwrap on Nothing")
    if kind is Kind.ERR:
        payload = res_or_opt.err
        error = UnwrapError(payload, f"called unwrap on Err: {payload!r}")
        if isinstance(payload, BaseException):
            error.__cause__ = payload
        raise error
    return res_or_opt.data


@overload
def unwrap_or[T, O](res_or_opt: Option[T], fallback: O) -> T | O: ...


@overload
def unwrap_or[T, E, O](res_or_opt: Result[T, E], fallback: O) -> T | O: ...


def unwrap_or(res_or_opt: Any, fallback: Any) -> Any:
    """Return the contained value, or ``fallback`` for Nothing/Err."""
    kind = _require_kind(res_or_opt, "unwrap_or")
    if kind is Kind.SOME or kind is Kind.OK:
        return res_or_opt.data
    return fallback


@overload
def map[T, R](res_or_opt: Option[T], fn: Callable[[T], R]) -> Option[R]: ...  # noqa: A001


@overload
def map[T, E, R](res_or_opt: Result[T, E], fn: Callable[[T], R]) -> Result[R, E]: ...  # noqa: A001


def map(res_or_opt: Any, fn: Callable[[Any], Any]) -> Any:  # noqa: A001
    """Apply ``fn`` to a Some/Ok payload, keeping the container family.

    Nothing and Err are returned as-is and ``fn`` is never called for them.
    """
    kind = _require_kind(res_or_opt, "map")
    if kind is Kind.SOME:
        return some(fn(res_or_opt.data))
    if kind is Kind.OK:
        return ok(fn(res_or_opt.data))
    return res_or_opt


def map_err[T, E, F](res: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply ``fn`` to an Err payload. Ok is returned as-is.

    Raises:
        TypeError: If ``res`` is an Option; absence has no payload to map.
    """
    kind = _require_result(res, "map_err")
    if kind is Kind.ERR:
        return err(fn(res.err))  # type: ignore[union-attr]
    return res  # type: ignore[return-value]


@overload
def and_then[T, R](res_or_opt: Option[T], fn: Callable[[T], Option[R]]) -> Option[R]: ...


@overload
def and_then[T, E, R](res_or_opt: Result[T, E], fn: Callable[[T], Result[R, E]]) -> Result[R, E]: ...


def and_then(res_or_opt: Any, fn: Callable[[Any], Any]) -> Any:
    """Chain a container-returning ``fn`` onto a Some/Ok payload.

    Nothing and Err are returned as-is without calling ``fn``.
    """
    kind = _require_kind(res_or_opt, "and_then")
    if kind is Kind.SOME or kind is Kind.OK:
        return fn(res_or_opt.data)
    return res_or_opt


def or_else[T, E, F](res: Result[T, E], fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
    """Recover from an Err by passing its payload to ``fn``. Ok is returned as-is."""
    kind = _require_result(res, "or_else")
    if kind is Kind.ERR:
        return fn(res.err)  # type: ignore[union-attr]
    return res  # type: ignore[return-value]

