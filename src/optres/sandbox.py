"""Sandbox boundaries that turn unwrap failures back into Err values.

``run`` catches only ``UnwrapError`` and re-raises anything else. ``safe``
also converts every other ``Exception`` into ``Err(RunError(exc))``, so it
never raises for failures in user code. Both accept functions returning a
Result directly or an awaitable Result; for the latter they return a
coroutine that must be awaited.

Usage:
    def checkout(cart_id: str) -> Result[Receipt, str]:
        cart = unwrap(load_cart(cart_id))
        payment = unwrap(charge(cart))
        return ok(Receipt(cart, payment))

    result = run(lambda: checkout("c-1"))

    @safe_box
    async def fetch(url: str) -> Result[bytes, str]:
        ...

    result = await fetch("https://example.com")
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from optres.config import SandboxSettings, configure, get_settings
from optres.errors import ConfigurationError, RunError, UnwrapError
from optres.result import err

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from optres.result import Err, Result

logger = logging.getLogger(__name__)


def _active_settings() -> SandboxSettings:
    """Return the active settings, falling back to defaults if they cannot be loaded.

    Called while a user exception is being handled, so it must not raise.
    The fallback is installed process-wide so the warning is logged once.
    """
    try:
        return get_settings()
    except ConfigurationError as exc:
        logger.warning("Invalid optres configuration, using defaults: %s", exc)
        fallback = SandboxSettings()
        configure(fallback)
        return fallback


def _convert(exc: Exception, *, total: bool) -> Err[Any] | None:
    """Map a raised exception to an Err, or None if it must propagate."""
    if not total and not isinstance(exc, UnwrapError):
        return None
    settings = _active_settings()
    if isinstance(exc, UnwrapError):
        logger.log(settings.log_level, "Converted unwrap failure to Err: %r", exc.original_error)
        return err(exc.original_error)
    logger.log(
        settings.log_level,
        "Captured uncontrolled failure in safe(): %s: %s",
        type(exc).__name__,
        exc,
        exc_info=exc if settings.log_tracebacks else None,
    )
    return err(RunError(exc))


async def _await_sandboxed(awaitable: Awaitable[Any], *, total: bool) -> Any:
    try:
        return await awaitable
    except Exception as exc:
        converted = _convert(exc, total=total)
        if converted is None:
            raise
        return converted


def _sandbox(fn: Callable[[], Any], *, total: bool) -> Any:
    try:
        value = fn()
    except Exception as exc:
        converted = _convert(exc, total=total)
        if converted is None:
            raise
        return converted

    if inspect.isawaitable(value):
        return _await_sandboxed(value, total=total)
    return value


@overload
def run[T, E](fn: Callable[[], Awaitable[Result[T, E]]]) -> Coroutine[Any, Any, Result[T, E]]: ...


@overload
def run[T, E](fn: Callable[[], Result[T, E]]) -> Result[T, E]: ...


def run(fn: Callable[[], Any]) -> Any:
    """Call ``fn`` and convert an escaping UnwrapError into an Err.

    Any other exception propagates unchanged.
    """
    return _sandbox(fn, total=False)


@overload
def safe[T, E](fn: Callable[[], Awaitable[Result[T, E]]]) -> Coroutine[Any, Any, Result[T, E | RunError]]: ...


@overload
def safe[T, E](fn: Callable[[], Result[T, E]]) -> Result[T, E | RunError]: ...


def safe(fn: Callable[[], Any]) -> Any:
    """Call ``fn`` and convert any escaping Exception into an Err.

    UnwrapError becomes ``Err(original_error)``; every other Exception becomes
    ``Err(RunError(exc))``. BaseExceptions such as KeyboardInterrupt and
    asyncio.CancelledError still propagate.
    """
    return _sandbox(fn, total=True)


def _boxed(fn: Callable[..., Any], *, total: bool) -> Callable[..., Any]:
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            result = _sandbox(functools.partial(fn, *args, **kwargs), total=total)
            if inspect.isawaitable(result):
                return await result
            return result

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return _sandbox(functools.partial(fn, *args, **kwargs), total=total)

    return wrapper


@overload
def box[**P, T, E](
    fn: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, Coroutine[Any, Any, Result[T, E]]]: ...


@overload
def box[**P, T, E](fn: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]: ...


def box(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``fn`` so that every call runs inside ``run()``."""
    return _boxed(fn, total=False)


@overload
def safe_box[**P, T, E](
    fn: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, Coroutine[Any, Any, Result[T, E | RunError]]]: ...


@overload
def safe_box[**P, T, E](fn: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E | RunError]]: ...


def safe_box(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap ``fn`` so that every call runs inside ``safe()``."""
    return _boxed(fn, total=True)
