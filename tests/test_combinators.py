"""Tests for the combinators module."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from optres.combinators import and_then, map, map_err, or_else, unwrap, unwrap_or  # noqa: A004
from optres.errors import UnwrapError
from optres.option import is_none, is_some, none, some
from optres.result import err, is_err, is_ok, ok


class TestUnwrap:
    def test_ok(self) -> None:
        """unwrap() returns the payload of an Ok."""
        assert unwrap(ok("hello")) == "hello"

    def test_some(self) -> None:
        assert unwrap(some("hello")) == "hello"

    def test_returns_identical_object(self) -> None:
        payload = object()
        assert unwrap(ok(payload)) is payload

    def test_err_raises_with_original_error(self) -> None:
        """unwrap() on an Err raises UnwrapError carrying the Err payload."""
        payload = {"code": 404}
        with pytest.raises(UnwrapError) as exc_info:
            unwrap(err(payload))
        assert exc_info.value.original_error is payload

    def test_err_exception_payload_is_chained(self) -> None:
        cause = ValueError("boom")
        with pytest.raises(UnwrapError) as exc_info:
            unwrap(err(cause))
        assert exc_info.value.__cause__ is cause

    def test_nothing_raises_without_payload(self) -> None:
        with pytest.raises(UnwrapError, match="Nothing") as exc_info:
            unwrap(none())
        assert exc_info.value.original_error is None

    def test_rejects_non_containers(self) -> None:
        """Passing a foreign value is a TypeError, not an unwrap failure."""
        with pytest.raises(TypeError, match="expects an Option or Result"):
            unwrap({"data": 1})  # type: ignore[call-overload]


class TestUnwrapOr:
    def test_ok(self) -> None:
        assert unwrap_or(ok("hi"), "fallback") == "hi"

    def test_err(self) -> None:
        assert unwrap_or(err("badcode"), "hello") == "hello"

    def test_some(self) -> None:
        assert unwrap_or(some("hi"), "hello") == "hi"

    def test_nothing(self) -> None:
        assert unwrap_or(none(), "hello") == "hello"

    def test_fallback_is_returned_unchanged(self) -> None:
        fallback: list[int] = []
        assert unwrap_or(err("x"), fallback) is fallback

    def test_falsy_payload_is_not_replaced(self) -> None:
        assert unwrap_or(ok(0), 5) == 0
        assert unwrap_or(some(None), 5) is None


class TestMap:
    def test_maps_ok(self) -> None:
        """map() applies the function to an Ok payload and stays a Result."""
        assert map(ok("hello"), str.upper) == ok("HELLO")

    def test_maps_some(self) -> None:
        """map() applies the function to a Some payload and stays an Option."""
        mapped = map(some("hello"), str.upper)
        assert mapped == some("HELLO")
        assert is_some(mapped)

    def test_err_is_returned_unchanged(self) -> None:
        """map() over an Err returns the same object without calling fn."""
        spy = MagicMock()
        original = err("badcode")
        assert map(original, spy) is original
        spy.assert_not_called()

    def test_nothing_is_returned_unchanged(self) -> None:
        spy = MagicMock()
        assert map(none(), spy) is none()
        spy.assert_not_called()

    def test_calls_fn_once_with_payload(self) -> None:
        spy = MagicMock(return_value=2)
        assert map(ok(1), spy) == ok(2)
        spy.assert_called_once_with(1)

    def test_preserves_family_for_container_output(self) -> None:
        """A function returning a container is not flattened."""
        assert map(some(1), ok) == some(ok(1))
        assert map(ok(1), some) == ok(some(1))

    def test_rejects_non_containers(self) -> None:
        with pytest.raises(TypeError):
            map([1, 2], str)  # type: ignore[call-overload]


class TestMapErr:
    def test_maps_err(self) -> None:
        """map_err() applies the function to an Err payload."""
        assert map_err(err("badcode"), lambda s: s.replace("bad", "good")) == err("goodcode")

    def test_ok_is_returned_unchanged(self) -> None:
        spy = MagicMock()
        original = ok("badcode")
        assert map_err(original, spy) is original
        spy.assert_not_called()

    def test_rejects_options(self) -> None:
        """Absence has no payload, so map_err() is undefined for Options."""
        with pytest.raises(TypeError, match="not defined for Option"):
            map_err(some(1), str)  # type: ignore[arg-type]


class TestAndThen:
    def test_chains_ok(self) -> None:
        assert and_then(ok(2), lambda x: ok(x * 10)) == ok(20)

    def test_chain_can_fail(self) -> None:
        assert is_err(and_then(ok(2), lambda _: err("too small")))

    def test_chains_some(self) -> None:
        assert is_none(and_then(some(2), lambda _: none()))

    def test_short_circuits(self) -> None:
        spy = MagicMock()
        original = err("stop")
        assert and_then(original, spy) is original
        assert and_then(none(), spy) is none()
        spy.assert_not_called()


class TestOrElse:
    def test_recovers_err(self) -> None:
        recovered = or_else(err("missing"), lambda _: ok("default"))
        assert is_ok(recovered)
        assert unwrap(recovered) == "default"

    def test_ok_is_returned_unchanged(self) -> None:
        spy = MagicMock()
        original = ok(1)
        assert or_else(original, spy) is original
        spy.assert_not_called()

    def test_rejects_options(self) -> None:
        with pytest.raises(TypeError):
            or_else(none(), lambda _: ok(1))  # type: ignore[arg-type]
