"""Tests for figiparse.core.result — Ok / Err parse outcomes."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from figiparse.core.identifiers import FIGI, check_checksum, check_structure
from figiparse.core.result import Err, Ok, sequence, unwrap


def _non_empty(raw: str) -> Ok[str] | Err[str]:
    if not raw:
        return Err("empty")
    return Ok(raw)


class TestVariants:
    def test_ok_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_err_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Err("e").error = "other"  # type: ignore[misc]

    def test_pattern_match(self) -> None:
        match FIGI.parse("BBG000B9XVV8"):
            case Ok(figi):
                assert figi.value == "BBG000B9XVV8"
            case Err(_):
                pytest.fail("Should match Ok")

    def test_ok_is_not_err(self) -> None:
        assert not isinstance(Ok(1), Err)
        assert not isinstance(Err(1), Ok)


class TestChaining:
    def test_map(self) -> None:
        assert Ok("bbg").map(str.upper) == Ok("BBG")
        assert Err("e").map(str.upper) == Err("e")

    def test_and_then_runs_second_step(self) -> None:
        assert check_structure("BBG000B9XVV8").and_then(check_checksum) == Ok("BBG000B9XVV8")

    def test_and_then_short_circuits(self) -> None:
        calls: list[str] = []

        def record(raw: str) -> Ok[str] | Err[str]:
            calls.append(raw)
            return Ok(raw)

        result = check_structure("short").and_then(record)
        assert isinstance(result, Err)
        assert calls == []

    def test_map_err(self) -> None:
        assert Err("e").map_err(lambda e: f"wrapped: {e}") == Err("wrapped: e")
        assert Ok(1).map_err(lambda e: f"wrapped: {e}") == Ok(1)


class TestUnwrap:
    def test_ok_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert unwrap(Ok(42)) == 42

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(RuntimeError, match="Called unwrap on Err"):
            Err("fail").unwrap()
        with pytest.raises(RuntimeError, match="unwrap on Err"):
            unwrap(Err("fail"))

    def test_unwrap_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]


class TestFreeFunctions:
    def test_sequence_all_valid(self) -> None:
        result = sequence(FIGI.parse(r) for r in ["BBG000B9XVV8", "KKG000003B64"])
        assert isinstance(result, Ok)
        assert [f.value for f in result.value] == ["BBG000B9XVV8", "KKG000003B64"]

    def test_sequence_first_err_wins(self) -> None:
        assert sequence([Ok(1), Err("a"), Err("b")]) == Err("a")

    def test_sequence_empty(self) -> None:
        assert sequence([]) == Ok([])

    def test_sequence_stops_consuming(self) -> None:
        consumed: list[int] = []

        def gen():  # type: ignore[no-untyped-def]
            consumed.append(1)
            yield Err("stop")
            consumed.append(2)
            yield Ok(2)

        assert sequence(gen()) == Err("stop")
        assert consumed == [1]


class TestLaws:
    @given(st.text())
    def test_map_identity(self, x: str) -> None:
        assert Ok(x).map(lambda v: v) == Ok(x)

    @given(st.text())
    def test_and_then_left_identity(self, x: str) -> None:
        assert Ok(x).and_then(_non_empty) == _non_empty(x)

    @given(st.text())
    def test_err_is_absorbing(self, e: str) -> None:
        assert Err(e).map(len).and_then(_non_empty) == Err(e)
