"""
Unit tests for the alignment value types: `Strand`, `RefOccurrence` and `Segment`.
"""
import pytest
from dataclasses import FrozenInstanceError

from dna_tiler.structures import RefOccurrence, Segment, Strand


def test_ref_occurrence_defaults_to_forward():
    occ = RefOccurrence(2, 5)
    assert occ.strand is Strand.FORWARD
    assert not occ.is_reverse_complement


def test_ref_occurrence_is_frozen_and_slotted():
    """
    Index entries are values; they cannot be mutated once stored.
    """
    occ = RefOccurrence(0, 1, Strand.REVERSE_COMPLEMENT)
    with pytest.raises(FrozenInstanceError):
        occ.start = 3
    assert not hasattr(occ, "__dict__")


def test_segment_from_occurrence_copies_strand():
    occ = RefOccurrence(4, 7, Strand.REVERSE_COMPLEMENT)
    seg = Segment.from_occurrence(occ, query_start=10, query_end=13)

    assert (seg.ref_start, seg.ref_end) == (4, 7)
    assert (seg.query_start, seg.query_end) == (10, 13)
    assert seg.is_reverse_complement
    assert seg.strand is Strand.REVERSE_COMPLEMENT
    assert seg.length == 4


def test_segment_sequences_are_inclusive_slices():
    """
    The matched sequence is always read from the forward reference.
    """
    reference = "AACGTT"
    query = "CGTT"
    # query[2..3] = "TT" is the reverse complement of reference[0..1] = "AA".
    seg = Segment(ref_start=0, ref_end=1, query_start=2, query_end=3, is_reverse_complement=True)

    assert seg.matched_sequence(reference) == "AA"
    assert seg.query_sequence(query) == "TT"


def test_segment_as_dict():
    seg = Segment(1, 3, 0, 2)
    assert seg.as_dict() == {
        "ref_start": 1,
        "ref_end": 3,
        "query_start": 0,
        "query_end": 2,
        "strand": "forward",
    }
