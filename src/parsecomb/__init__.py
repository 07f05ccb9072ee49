"""parsecomb - generic parser combinators over any element sequence.

Build recursive-descent (PEG-style) parsers by composing small parsers
into larger ones. Inputs may be text, bytes, or sequences of tokens.

Public API:
    ParseInput - Immutable positioned view of the input
    ParseResult - (rest, value, error) triple returned by every parser
    Parser - Protocol implemented by every parser
    parse - Run a parser over a whole input, raising on failure
    parse_prefix - Run a parser and return the raw ParseResult

Primitives:
    Satisfy, Rune, Tag, Digit1, Eof

Combinators:
    Map, Alt, Opt, Delimited, Preceded, Terminated, Pair,
    TakeWhile, TakeWhile0, TakeWhile1, Lazy

Error values (returned, never raised by parsers):
    ParseError and its subclasses in parsecomb.errors

Exceptions (raised by the runner):
    ParsecombError, ParseFailedError, IncompleteParseError

Submodules:
    parsecomb.diagnostics - Diagnostic codes and message templates
    parsecomb.grammars - Example grammars (JSON scalar values)
"""

from .combinators import (
    Alt,
    Delimited,
    Lazy,
    Map,
    Opt,
    Pair,
    Preceded,
    TakeWhile,
    TakeWhile0,
    TakeWhile1,
    Terminated,
)
from .diagnostics import IncompleteParseError, ParsecombError, ParseFailedError
from .errors import (
    DepthLimitExceededError,
    ExpectedEndOfInputError,
    MapFunctionError,
    NoLeftInputToParseError,
    NotSatisfiedCountError,
    ParseError,
    UnexpectedElementError,
    UnexpectedRuneError,
    UnexpectedTagError,
)
from .input import ParseInput, ParseResult
from .parser import Parser
from .primitives import Digit1, Eof, Rune, Satisfy, Tag, is_ascii_digit
from .runner import parse, parse_prefix

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Alt",
    "Delimited",
    "DepthLimitExceededError",
    "Digit1",
    "Eof",
    "ExpectedEndOfInputError",
    "IncompleteParseError",
    "Lazy",
    "Map",
    "MapFunctionError",
    "NoLeftInputToParseError",
    "NotSatisfiedCountError",
    "Opt",
    "Pair",
    "ParseError",
    "ParseFailedError",
    "ParseInput",
    "ParseResult",
    "ParsecombError",
    "Parser",
    "Preceded",
    "Rune",
    "Satisfy",
    "Tag",
    "TakeWhile",
    "TakeWhile0",
    "TakeWhile1",
    "Terminated",
    "UnexpectedElementError",
    "UnexpectedRuneError",
    "UnexpectedTagError",
    "__version__",
    "is_ascii_digit",
    "parse",
    "parse_prefix",
]
