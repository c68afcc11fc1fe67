"""Exception hierarchy for json-flat.

Every error raised by the package derives from ``FlattenError`` and also from
the closest built-in exception, so callers can catch either:

- ParseError:        malformed input text (``ValueError``)
- InvalidTreeError:  value outside the JSON tagged union (``TypeError``)
- PathConflictError: incompatible keys during unflatten (``ValueError``)
- NestingDepthError: nesting beyond the configured guard (``RecursionError``)
"""

from __future__ import annotations

__all__ = [
    "FlattenError",
    "InvalidTreeError",
    "NestingDepthError",
    "ParseError",
    "PathConflictError",
]


class FlattenError(Exception):
    """Base exception for json-flat errors."""


class ParseError(FlattenError, ValueError):
    """Raised when input text cannot be parsed as JSON.

    Attributes:
        pos:    Character offset of the failure, when the parser reports one.
        lineno: 1-based line of the failure, when available.
        colno:  1-based column of the failure, when available.
    """

    def __init__(
        self,
        message: str,
        pos: int | None = None,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        super().__init__(message)
        self.pos = pos
        self.lineno = lineno
        self.colno = colno


class InvalidTreeError(FlattenError, TypeError):
    """Raised for values that are not JSON objects, arrays or scalars."""


class PathConflictError(FlattenError, ValueError):
    """Raised when two flat keys disagree about the shape of a shared prefix.

    Attributes:
        key:    The flat key being placed when the conflict was detected.
        prefix: The already-populated path the key collides with.
    """

    def __init__(self, key: str, prefix: str, reason: str) -> None:
        super().__init__(f"cannot place {key!r}: {reason} at {prefix!r}")
        self.key = key
        self.prefix = prefix


class NestingDepthError(FlattenError, RecursionError):
    """Raised when a document nests deeper than the configured limit."""
