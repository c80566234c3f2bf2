from __future__ import annotations
from typing import Optional

__all__ = [
    "AlignError",
    "InvalidSymbolError",
    "AlignmentBreakError",
    "ReferenceTooLongError",
]


class AlignError(Exception):
    """Base class for every error raised by an alignment request."""


class InvalidSymbolError(AlignError, ValueError):
    """
    A character outside {A, C, G, T} reached a routine expecting pure alphabet input.

    Parameters
    ----------
    symbol : str
        The offending character.
    position : Optional[int]
        0-based index of the character in its sequence, when known.
    hint : Optional[str]
        Extra guidance appended to the message (e.g. for lowercase input).
    """

    def __init__(self, symbol: str, position: Optional[int] = None, hint: Optional[str] = None):
        self.symbol = symbol
        self.position = position
        self.hint = hint

        message = f"Invalid DNA character: '{symbol}'"
        if position is not None:
            message += f" at position {position}"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class AlignmentBreakError(AlignError):
    """
    The query cannot be tiled by exact substrings of the reference on either strand.

    Parameters
    ----------
    position : int
        The query position at which reconstruction found no back-pointer.
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Alignment break: No match found at position {position}")


class ReferenceTooLongError(AlignError, ValueError):
    """The reference exceeds the configured all-substrings indexing limit."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Reference length {length} exceeds max_reference_length={limit}; "
            f"indexing all substrings is quadratic in the reference length."
        )
