from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

__all__ = ["Strand", "RefOccurrence", "Segment"]


class Strand(Enum):
    """
    Orientation of a reference match.

    FORWARD            : The query substring equals the reference substring as-is.
    REVERSE_COMPLEMENT : The query substring equals the reverse complement of
                         the reference substring.
    """
    FORWARD = "forward"
    REVERSE_COMPLEMENT = "reverse_complement"


@dataclass(frozen=True, slots=True)
class RefOccurrence:
    """
    The single witness the reference index keeps for one hash value.

    Attributes
    ----------
    start : int
        0-based inclusive start, in forward-reference coordinates.
    end : int
        0-based inclusive end, in forward-reference coordinates.
    strand : Strand
        The strand on which the hashed substring was found.
    """
    start: int
    end: int
    strand: Strand = Strand.FORWARD

    @property
    def is_reverse_complement(self) -> bool:
        return self.strand is Strand.REVERSE_COMPLEMENT


@dataclass(frozen=True, slots=True)
class Segment:
    """
    One reconstructed unit of a query tiling.

    All ranges are 0-based and inclusive. For a reverse-complement segment the
    reference range is still given on the forward strand; the query substring
    equals the reverse complement of ``reference[ref_start:ref_end + 1]``.

    Attributes
    ----------
    ref_start, ref_end : int
        Matched range of the reference (forward coordinates).
    query_start, query_end : int
        Matched range of the query.
    is_reverse_complement : bool
        True if the match is on the reverse-complement strand.
    """
    ref_start: int
    ref_end: int
    query_start: int
    query_end: int
    is_reverse_complement: bool = False

    @classmethod
    def from_occurrence(cls, occurrence: RefOccurrence, query_start: int, query_end: int) -> "Segment":
        return cls(
            ref_start=occurrence.start,
            ref_end=occurrence.end,
            query_start=query_start,
            query_end=query_end,
            is_reverse_complement=occurrence.is_reverse_complement,
        )

    @property
    def strand(self) -> Strand:
        return Strand.REVERSE_COMPLEMENT if self.is_reverse_complement else Strand.FORWARD

    @property
    def length(self) -> int:
        """Number of query bases covered by the segment."""
        return self.query_end - self.query_start + 1

    def matched_sequence(self, reference: str) -> str:
        """
        The literal reference bases of the match, read on the forward strand.

        Parameters
        ----------
        reference : str
            The reference the segment was aligned against.

        Returns
        -------
        str
            ``reference[ref_start:ref_end + 1]``.
        """
        return reference[self.ref_start:self.ref_end + 1]

    def query_sequence(self, query: str) -> str:
        """The query bases covered by the segment."""
        return query[self.query_start:self.query_end + 1]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ref_start": self.ref_start,
            "ref_end": self.ref_end,
            "query_start": self.query_start,
            "query_end": self.query_end,
            "strand": self.strand.value,
        }
