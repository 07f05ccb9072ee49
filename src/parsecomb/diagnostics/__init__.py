"""Diagnostic system for parse failures.

Provides diagnostic codes, message templates and the exceptions raised
when a failure reaches the top-level caller.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import IncompleteParseError, ParsecombError, ParseFailedError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "IncompleteParseError",
    "ParseFailedError",
    "ParsecombError",
]
