"""Tests for figiparse.core.errors — parse error value hierarchy."""

from __future__ import annotations

import dataclasses
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from figiparse.core.errors import (
    CommittedSubParseFailed,
    GrammarError,
    IdentifierError,
    InvalidChecksum,
    InvalidComponent,
    InvalidFormat,
    InvalidLength,
    ParseError,
    UnexpectedToken,
    UnknownIdentifierType,
    UnknownProvider,
    UnknownScheme,
)


def _checksum() -> InvalidChecksum:
    return InvalidChecksum(message="bad check digit", expected="8", found="9")


# ---------------------------------------------------------------------------
# ParseError base
# ---------------------------------------------------------------------------


class TestParseError:
    def test_is_frozen(self) -> None:
        err = ParseError(message="base error")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.message = "changed"  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        assert set(ParseError(message="m").to_dict().keys()) == {"code", "message"}

    def test_code_is_class_level(self) -> None:
        assert "code" not in {f.name for f in dataclasses.fields(InvalidLength)}
        assert InvalidLength.code == "INVALID_LENGTH"


class TestWithContext:
    def test_prepends_context(self) -> None:
        assert _checksum().with_context("row 3").message == "row 3: bad check digit"

    def test_preserves_subclass_and_fields(self) -> None:
        ctx = _checksum().with_context("ctx")
        assert isinstance(ctx, InvalidChecksum)
        assert ctx.expected == "8"
        assert ctx.found == "9"


# ---------------------------------------------------------------------------
# Subclasses - fields and to_dict keys
# ---------------------------------------------------------------------------


class TestIdentifierErrors:
    def test_invalid_length_keys(self) -> None:
        err = InvalidLength(message="m", expected=12, actual=3)
        assert set(err.to_dict().keys()) == {"code", "message", "expected", "actual"}

    def test_invalid_format_keys(self) -> None:
        err = InvalidFormat(message="m", position=4, found="a")
        assert err.to_dict() == {
            "code": "INVALID_FORMAT", "message": "m", "position": 4, "found": "a",
        }

    def test_invalid_component_keys(self) -> None:
        err = InvalidComponent(message="m", component="prefix", position=0, found="BS")
        assert set(err.to_dict().keys()) == {
            "code", "message", "component", "position", "found",
        }

    def test_invalid_checksum_keys(self) -> None:
        assert set(_checksum().to_dict().keys()) == {"code", "message", "expected", "found"}


class TestGrammarErrors:
    def test_unexpected_token_keys(self) -> None:
        err = UnexpectedToken(message="m", position=5, expected="/", found="x")
        assert set(err.to_dict().keys()) == {
            "code", "message", "position", "expected", "found",
        }

    def test_committed_nests_cause(self) -> None:
        err = CommittedSubParseFailed(
            message="m", position=20, type_label="FIGI", cause=_checksum(),
        )
        d = err.to_dict()
        assert d["type_label"] == "FIGI"
        assert d["cause"] == _checksum().to_dict()
        assert d["position"] == 20


# ---------------------------------------------------------------------------
# All errors
# ---------------------------------------------------------------------------


_ALL_ERROR_INSTANCES = [
    lambda: InvalidLength(message="m", expected=12, actual=0),
    lambda: InvalidFormat(message="m", position=0, found="a"),
    lambda: InvalidComponent(message="m", component="fixed", position=2, found="H"),
    _checksum,
    lambda: UnexpectedToken(message="m", position=0, expected="//", found="x"),
    lambda: UnknownScheme(message="m", position=2, found="bbg"),
    lambda: UnknownProvider(message="m", position=6, found="quotes"),
    lambda: UnknownIdentifierType(message="m", position=14, found="figi"),
    lambda: CommittedSubParseFailed(
        message="m", position=20, type_label="FIGI", cause=_checksum(),
    ),
]


class TestAllErrors:
    @pytest.mark.parametrize("factory", _ALL_ERROR_INSTANCES, ids=lambda f: f().__class__.__name__)
    def test_json_serializable(self, factory: object) -> None:
        err = factory()  # type: ignore[operator]
        json.dumps(err.to_dict())  # should not raise

    @pytest.mark.parametrize("factory", _ALL_ERROR_INSTANCES, ids=lambda f: f().__class__.__name__)
    def test_inherits_from_parse_error(self, factory: object) -> None:
        err = factory()  # type: ignore[operator]
        assert isinstance(err, ParseError)
        assert isinstance(err, IdentifierError | GrammarError)

    def test_codes_are_unique(self) -> None:
        codes = [f().code for f in _ALL_ERROR_INSTANCES]  # type: ignore[operator]
        assert len(codes) == len(set(codes))

    def test_grammar_errors_carry_position(self) -> None:
        for factory in _ALL_ERROR_INSTANCES[4:]:
            assert "position" in factory().to_dict()  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Property-based
# ---------------------------------------------------------------------------


class TestProperties:
    @given(msg=st.text(min_size=1), ctx=st.text(min_size=1))
    def test_with_context_format(self, msg: str, ctx: str) -> None:
        err = ParseError(message=msg)
        assert err.with_context(ctx).message == f"{ctx}: {msg}"

    @given(pos=st.integers(min_value=0), found=st.text())
    def test_to_dict_always_has_base_keys(self, pos: int, found: str) -> None:
        d = UnknownScheme(message="m", position=pos, found=found).to_dict()
        assert {"code", "message", "position"} <= set(d.keys())
