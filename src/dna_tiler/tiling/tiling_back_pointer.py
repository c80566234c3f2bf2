from __future__ import annotations
from dataclasses import dataclass

from dna_tiler.structures import RefOccurrence

__all__ = ["TilingBackPointer"]


@dataclass(frozen=True, slots=True)
class TilingBackPointer:
    """
    The decision recorded for one query start position in the tiling DP.

    Attributes
    ----------
    occurrence : RefOccurrence
        The reference witness of the chosen substring.
    next_pos : int
        Query position the traceback continues from (``query_end + 1``).
    query_start : int
        Inclusive start of the matched query substring.
    query_end : int
        Inclusive end of the matched query substring.
    """
    occurrence: RefOccurrence
    next_pos: int
    query_start: int
    query_end: int

    @property
    def is_forward(self) -> bool:
        return not self.occurrence.is_reverse_complement
