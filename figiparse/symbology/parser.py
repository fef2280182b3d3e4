"""Symbology parser — raw string to SecurityLocator.

Grammar::

    locator  := [service] "/" id-type "/" id-value ["@" pricing] [WS yellow-key] WS*
    service  := "//" scheme "/" provider

parse_symbology is the parse-symbology entry point. It is total: every
input yields Ok or Err, nothing raises.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, final

from figiparse.core.errors import (
    GrammarError,
    ParseError,
    UnexpectedToken,
    UnknownIdentifierType,
    UnknownProvider,
    UnknownScheme,
)
from figiparse.core.identifiers import FIGI
from figiparse.core.result import Err, Ok

E = TypeVar("E")
from figiparse.symbology.grammar import (
    Parsed,
    Parser,
    ParseResult,
    commit_on,
    end_of_input,
    found_at,
    keyword,
    literal,
    map_parser,
    one_of,
    optional_preceded,
    pair,
    preceded,
    token,
    validated_token,
    whitespace,
)
from figiparse.symbology.types import (
    PRICING_SOURCE_MAX_LENGTH,
    IdentifierType,
    Provider,
    Scheme,
    SecurityLocator,
    Service,
    YellowKey,
    is_pricing_source,
    value_agrees,
)

# ---------------------------------------------------------------------------
# Sub-parser registry
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class SubParser:
    """Value parser bound to an identifier type, with the label used in errors."""

    label: str
    parser: Parser[Any]


@final
@dataclass
class SubParserRegistry:
    """Identifier-type value parsers. Only registered types are dispatchable.

    Usage::

        registry = default_registry()
        registry.register(IdentifierType.ISIN, "ISIN", validated_token(parse_isin, "ISIN"))
    """

    _entries: dict[IdentifierType, SubParser] = field(default_factory=dict)

    def register(self, id_type: IdentifierType, label: str, parser: Parser[Any]) -> None:
        self._entries[id_type] = SubParser(label=label, parser=parser)

    def resolve(self, id_type: IdentifierType) -> SubParser | None:
        return self._entries.get(id_type)

    @property
    def id_types(self) -> tuple[IdentifierType, ...]:
        return tuple(self._entries)


def figi_value(text: str, pos: int) -> ParseResult[FIGI]:
    """bbgid value: the next token, validated as a FIGI."""
    return _FIGI_TOKEN(text, pos)


_FIGI_TOKEN: Parser[FIGI] = validated_token(FIGI.parse, "FIGI")


def default_registry() -> SubParserRegistry:
    """A fresh registry with the built-in bbgid parser."""
    registry = SubParserRegistry()
    registry.register(IdentifierType.BBGID, "FIGI", figi_value)
    return registry


# ---------------------------------------------------------------------------
# Closed-set token parsers
# ---------------------------------------------------------------------------


def _closed_set(
    members: tuple[E, ...],
    spelling: Callable[[E], str],
    on_none: Callable[[str, int], ParseError],
) -> Parser[E]:
    return one_of([keyword(spelling(m), m) for m in members], on_none)


def _unknown_scheme(text: str, pos: int) -> GrammarError:
    found = found_at(text, pos)
    return UnknownScheme(
        message=f"unknown scheme '{found}' at position {pos}", position=pos, found=found,
    )


def _unknown_provider(text: str, pos: int) -> GrammarError:
    found = found_at(text, pos)
    return UnknownProvider(
        message=f"unknown provider '{found}' at position {pos}", position=pos, found=found,
    )


def _unknown_identifier_type(text: str, pos: int) -> GrammarError:
    found = found_at(text, pos)
    known = {t.value for t in IdentifierType}
    if found.casefold() in known:
        message = f"no parser registered for identifier type '{found}' at position {pos}"
    else:
        message = f"unknown identifier type '{found}' at position {pos}"
    return UnknownIdentifierType(message=message, position=pos, found=found)


def _unknown_yellow_key(text: str, pos: int) -> GrammarError:
    found = found_at(text, pos)
    return UnexpectedToken(
        message=f"unknown yellow key '{found}' at position {pos}",
        position=pos, expected="yellow key", found=found,
    )


scheme: Parser[Scheme] = _closed_set(tuple(Scheme), lambda m: m.value, _unknown_scheme)
provider: Parser[Provider] = _closed_set(tuple(Provider), lambda m: m.value, _unknown_provider)
yellow_key: Parser[YellowKey] = _closed_set(
    tuple(YellowKey), lambda m: m.value, _unknown_yellow_key,
)

service: Parser[Service] = preceded(
    literal("//"),
    map_parser(
        pair(scheme, preceded(literal("/"), provider)),
        lambda sp: Service(scheme=sp[0], provider=sp[1]),
    ),
)

_PRICING_TOKEN = token("pricing source")


def pricing_source(text: str, pos: int) -> ParseResult[str]:
    """Pricing-source mnemonic, e.g. BVAL, BGN, CBBT."""
    match _PRICING_TOKEN(text, pos):
        case Err() as e:
            return e
        case Ok(Parsed(raw, end)):
            if not is_pricing_source(raw):
                return Err(UnexpectedToken(
                    message=(
                        f"pricing source must be 1-{PRICING_SOURCE_MAX_LENGTH} "
                        f"alphanumeric characters, got '{raw}'"
                    ),
                    position=pos, expected="pricing source", found=raw,
                ))
            return Ok(Parsed(raw, end))


# ---------------------------------------------------------------------------
# Locator
# ---------------------------------------------------------------------------


def locator_parser(registry: SubParserRegistry) -> Parser[SecurityLocator]:
    """Build the full symbology parser over the registry's identifier types."""

    def branch_for(id_type: IdentifierType) -> Parser[Any]:
        entry = registry.resolve(id_type)
        assert entry is not None  # tag parser only matches registered types

        def parse(text: str, pos: int) -> ParseResult[Any]:
            match entry.parser(text, pos):
                case Ok(Parsed(value, _)) if not value_agrees(id_type, value):
                    return Err(UnexpectedToken(
                        message=(
                            f"{entry.label} parser produced a {type(value).__name__}, "
                            f"which does not agree with identifier type '{id_type.value}'"
                        ),
                        position=pos, expected=entry.label, found=found_at(text, pos),
                    ))
                case result:
                    return result

        return parse

    def label_for(id_type: IdentifierType) -> str:
        entry = registry.resolve(id_type)
        return entry.label if entry is not None else id_type.value

    id_type_tag = _closed_set(registry.id_types, lambda m: m.value, _unknown_identifier_type)
    identifier = commit_on(id_type_tag, literal("/"), branch_for, label_for)
    maybe_service = optional_preceded(_lookahead("//"), service)
    maybe_pricing = optional_preceded(literal("@"), pricing_source)
    maybe_yellow_key = optional_preceded(whitespace, yellow_key)

    def parse(text: str, pos: int) -> ParseResult[SecurityLocator]:
        match maybe_service(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(svc, pos)):
                pass
        match preceded(literal("/"), identifier)(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed((id_type, value), pos)):
                pass
        match maybe_pricing(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(source, pos)):
                pass
        match maybe_yellow_key(text, pos):
            case Err() as e:
                return e
            case Ok(Parsed(key, pos)):
                pass
        return end_of_input(text, pos).map(lambda done: Parsed(
            SecurityLocator(
                service=svc,
                id_type=id_type,
                value=value,
                pricing_source=source,
                yellow_key=key,
            ),
            done.pos,
        ))

    return parse


def _lookahead(expected: str) -> Parser[None]:
    """Succeed without consuming input when ``expected`` comes next."""

    def parse(text: str, pos: int) -> ParseResult[None]:
        return literal(expected)(text, pos).map(lambda _: Parsed(None, pos))

    return parse


_DEFAULT_PARSER = locator_parser(default_registry())


def parse_symbology(
    raw: str, registry: SubParserRegistry | None = None,
) -> Ok[SecurityLocator] | Err[ParseError]:
    """Parse a symbology string into a SecurityLocator.

    Identifier-level failures surface wrapped in CommittedSubParseFailed.
    """
    parser = _DEFAULT_PARSER if registry is None else locator_parser(registry)
    return parser(raw, 0).map(lambda parsed: parsed.value)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def format_locator(locator: SecurityLocator) -> str:
    """Render canonical symbology text; parse_symbology(format_locator(x)) == Ok(x)."""
    parts = [
        str(locator.service) if locator.service is not None else "",
        f"/{locator.id_type.value}/{locator.value}",
    ]
    if locator.pricing_source is not None:
        parts.append(f"@{locator.pricing_source}")
    if locator.yellow_key is not None:
        parts.append(f" {locator.yellow_key.value}")
    return "".join(parts)


def locator_to_dict(locator: SecurityLocator) -> dict[str, Any]:
    """Serialize a SecurityLocator to a plain dict with stable keys."""
    return {
        "scheme": locator.service.scheme.value if locator.service is not None else None,
        "provider": locator.service.provider.value if locator.service is not None else None,
        "id_type": locator.id_type.value,
        "value": str(locator.value),
        "pricing_source": locator.pricing_source,
        "yellow_key": locator.yellow_key.value if locator.yellow_key is not None else None,
    }
