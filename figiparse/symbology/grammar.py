"""Parser combinators for symbology strings.

A parser is a plain function ``(text, pos) -> Ok[Parsed[T]] | Err[ParseError]``.
Combinators build larger parsers from smaller ones; delimiters are consumed
by their own parsers (``literal``, ``whitespace``) and never by token
parsers, so new token kinds compose without touching delimiter handling.

Two kinds of choice exist:

* ``one_of`` — ordinary backtracking alternation; every alternative starts
  at the same position and the first Ok wins.
* ``commit_on`` — a discriminator followed by an unconditionally fatal
  sub-parse. Once the tag matched, a failing branch is wrapped in
  CommittedSubParseFailed and no other branch is tried.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, final

from figiparse.core.errors import CommittedSubParseFailed, ParseError, UnexpectedToken
from figiparse.core.result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")
V = TypeVar("V")

# Characters that end a token. Whitespace always ends a token as well.
DELIMITERS = "/@"


@final
@dataclass(frozen=True, slots=True)
class Parsed(Generic[T]):
    """Value produced by a parser and the position just after it."""

    value: T
    pos: int


ParseResult = Result[Parsed[T], ParseError]
Parser = Callable[[str, int], ParseResult[T]]


# ---------------------------------------------------------------------------
# Scanning helpers
# ---------------------------------------------------------------------------


def _is_stop(c: str, stop: str) -> bool:
    return c in stop or c.isspace()


def token_end(text: str, pos: int, stop: str = DELIMITERS) -> int:
    """Index of the first stop character at or after pos."""
    end = pos
    while end < len(text) and not _is_stop(text[end], stop):
        end += 1
    return end


def found_at(text: str, pos: int) -> str:
    """Short description of what sits at pos, for error messages."""
    if pos >= len(text):
        return "end of input"
    end = token_end(text, pos)
    if end == pos:
        return text[pos]
    return text[pos:end]


# ---------------------------------------------------------------------------
# Primitive parsers
# ---------------------------------------------------------------------------


def literal(expected: str) -> Parser[str]:
    """Match an exact delimiter string."""

    def parse(text: str, pos: int) -> ParseResult[str]:
        if text.startswith(expected, pos):
            return Ok(Parsed(expected, pos + len(expected)))
        return Err(UnexpectedToken(
            message=f"expected '{expected}' at position {pos}, found '{found_at(text, pos)}'",
            position=pos, expected=expected, found=found_at(text, pos),
        ))

    return parse


def whitespace(text: str, pos: int) -> ParseResult[str]:
    """One or more whitespace characters followed by more input."""
    end = pos
    while end < len(text) and text[end].isspace():
        end += 1
    if end == pos or end == len(text):
        return Err(UnexpectedToken(
            message=f"expected whitespace-delimited token at position {pos}",
            position=pos, expected="whitespace", found=found_at(text, pos),
        ))
    return Ok(Parsed(text[pos:end], end))


def end_of_input(text: str, pos: int) -> ParseResult[None]:
    """Succeed only when nothing but whitespace remains."""
    end = pos
    while end < len(text) and text[end].isspace():
        end += 1
    if end != len(text):
        return Err(UnexpectedToken(
            message=f"unexpected trailing input at position {end}: '{found_at(text, end)}'",
            position=end, expected="end of input", found=found_at(text, end),
        ))
    return Ok(Parsed(None, end))


def token(label: str, stop: str = DELIMITERS) -> Parser[str]:
    """A non-empty run of characters up to the next stop character."""

    def parse(text: str, pos: int) -> ParseResult[str]:
        end = token_end(text, pos, stop)
        if end == pos:
            return Err(UnexpectedToken(
                message=f"expected {label} at position {pos}, found '{found_at(text, pos)}'",
                position=pos, expected=label, found=found_at(text, pos),
            ))
        return Ok(Parsed(text[pos:end], end))

    return parse


def keyword(word: str, value: T, stop: str = DELIMITERS) -> Parser[T]:
    """Case-insensitive whole-token match of ``word`` producing ``value``."""
    folded = word.casefold()

    def parse(text: str, pos: int) -> ParseResult[T]:
        end = token_end(text, pos, stop)
        if text[pos:end].casefold() == folded:
            return Ok(Parsed(value, end))
        return Err(UnexpectedToken(
            message=f"expected '{word}' at position {pos}",
            position=pos, expected=word, found=found_at(text, pos),
        ))

    return parse


def validated_token(
    validate: Callable[[str], Ok[T] | Err[Any]],
    label: str,
    stop: str = DELIMITERS,
) -> Parser[T]:
    """Read a token and hand it to a validator; validator errors pass through."""
    read = token(label, stop)

    def parse(text: str, pos: int) -> ParseResult[T]:
        match read(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(raw, end)):
                return validate(raw).map(lambda v: Parsed(v, end))

    return parse


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def map_parser(p: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    def parse(text: str, pos: int) -> ParseResult[U]:
        return p(text, pos).map(lambda r: Parsed(f(r.value), r.pos))

    return parse


def preceded(delimiter: Parser[Any], p: Parser[T]) -> Parser[T]:
    """Consume delimiter, then run p and keep only its value."""

    def parse(text: str, pos: int) -> ParseResult[T]:
        return delimiter(text, pos).and_then(lambda d: p(text, d.pos))

    return parse


def pair(first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    def parse(text: str, pos: int) -> ParseResult[tuple[A, B]]:
        match first(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(a, mid)):
                return second(text, mid).map(lambda b: Parsed((a, b.value), b.pos))

    return parse


def optional_preceded(delimiter: Parser[Any], p: Parser[T]) -> Parser[T | None]:
    """Optional element introduced by a delimiter.

    Absent delimiter yields None without consuming input. Once the
    delimiter matched, p's failure is returned as is.
    """

    def parse(text: str, pos: int) -> ParseResult[T | None]:
        match delimiter(text, pos):
            case Err():
                return Ok(Parsed(None, pos))
            case Ok(Parsed(_, after)):
                return p(text, after)

    return parse


def one_of(
    alternatives: Sequence[Parser[T]],
    on_none: Callable[[str, int], ParseError],
) -> Parser[T]:
    """Backtracking alternation; on_none builds the error when nothing matched."""

    def parse(text: str, pos: int) -> ParseResult[T]:
        for alt in alternatives:
            result = alt(text, pos)
            if isinstance(result, Ok):
                return result
        return Err(on_none(text, pos))

    return parse


def commit_on(
    tag: Parser[K],
    separator: Parser[Any],
    branch_for: Callable[[K], Parser[V]],
    label_for: Callable[[K], str],
) -> Parser[tuple[K, V]]:
    """Discriminated alternation with commit-on-match.

    ``tag`` chooses the branch (it may backtrack internally). After it
    matched, the separator and the branch's parser run unconditionally and
    any failure becomes CommittedSubParseFailed at the branch's start.
    """

    def parse(text: str, pos: int) -> ParseResult[tuple[K, V]]:
        match tag(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(key, after_tag)):
                pass

        def committed(error: ParseError, at: int) -> ParseError:
            label = label_for(key)
            return CommittedSubParseFailed(
                message=f"{label} at position {at}: {error.message}",
                position=at, type_label=label, cause=error,
            )

        match separator(text, after_tag):
            case Err(e):
                return Err(committed(e, after_tag))
            case Ok(Parsed(_, start)):
                pass

        return (
            branch_for(key)(text, start)
            .map(lambda parsed: Parsed((key, parsed.value), parsed.pos))
            .map_err(lambda e: committed(e, start))
        )

    return parse
