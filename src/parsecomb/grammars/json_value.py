"""JSON scalar values: strings without escapes and non-negative integers.

A small consumer of the combinator core. It owns conversion of matched
text into domain values; the core only reports what matched.

Example:
    >>> from parsecomb.input import ParseInput
    >>> json_value_parser().parse(ParseInput.of('"abc"')).value
    JsonString(value='abc')
    >>> json_value_parser().parse(ParseInput.of("123")).value
    JsonInteger(value=123)
"""

from dataclasses import dataclass

from parsecomb.combinators import Alt, Delimited, Map, TakeWhile0
from parsecomb.parser import Parser
from parsecomb.primitives import Digit1, Rune, Satisfy

__all__ = [
    "JsonInteger",
    "JsonString",
    "JsonValue",
    "json_integer_parser",
    "json_string_parser",
    "json_value_parser",
]

# JSON integers are mapped to signed 64-bit values.
_INT64_MAX: int = 2**63 - 1


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str


@dataclass(frozen=True, slots=True)
class JsonInteger:
    value: int


type JsonValue = JsonString | JsonInteger


def _to_int64(digits: str) -> JsonInteger:
    value = int(digits)
    if value > _INT64_MAX:
        msg = f"integer {digits} out of int64 range"
        raise ValueError(msg)
    return JsonInteger(value)


def _to_string(chars: list[str]) -> JsonString:
    return JsonString("".join(chars))


def json_value_parser() -> Parser[str, JsonValue]:
    """String or integer, tried in that order."""
    return Alt(json_string_parser(), json_integer_parser())


def json_string_parser() -> Parser[str, JsonValue]:
    begin = Rune('"')
    contents = TakeWhile0(Satisfy(lambda ch: ch != '"', "any character except '\"'"))
    end = Rune('"')
    return Map(Delimited(begin, contents, end), _to_string)


def json_integer_parser() -> Parser[str, JsonValue]:
    return Map(Digit1(), _to_int64)
