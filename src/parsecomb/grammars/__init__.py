"""Example grammars built on the combinator core."""

from parsecomb.grammars.json_value import (
    JsonInteger,
    JsonString,
    JsonValue,
    json_integer_parser,
    json_string_parser,
    json_value_parser,
)

__all__ = [
    "JsonInteger",
    "JsonString",
    "JsonValue",
    "json_integer_parser",
    "json_string_parser",
    "json_value_parser",
]
