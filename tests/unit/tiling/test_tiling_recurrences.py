"""
Unit tests for the tiling DP engine.

Most cases use a hand-built `ReferenceIndex` holding exactly the substrings a
test needs, with chosen strands. This pins down the recurrence and the
forward-strand tie-break independently of how the index builder assigns
witnesses.
"""
import pytest

from dna_tiler.config import AlignerConfig
from dna_tiler.errors import InvalidSymbolError
from dna_tiler.indexing import ReferenceIndex, build_reference_index
from dna_tiler.structures import RefOccurrence, Strand
from dna_tiler.tiling import UNREACHABLE, make_tiling_state
from dna_tiler.tiling.tiling_recurrences import TilingEngine, find_optimal_tiling
from dna_tiler.utils.hash_utils import hash_sequence

FWD = Strand.FORWARD
REV = Strand.REVERSE_COMPLEMENT


# ---------------------- Fixtures ----------------------

@pytest.fixture
def index_factory():
    """
    Builds a frozen index from ``{substring: RefOccurrence}``.
    """
    def _make(entries):
        index = ReferenceIndex()
        for substring, occurrence in entries.items():
            index.insert_if_absent(hash_sequence(substring), occurrence)
        index.freeze()
        return index

    return _make


# ---------------------- Recurrence ----------------------

def test_costs_for_simple_query(index_factory):
    """
    With A, C, AC and G available, "ACG" tiles as AC + G.
    """
    index = index_factory({
        "A": RefOccurrence(0, 0, FWD),
        "C": RefOccurrence(1, 1, FWD),
        "AC": RefOccurrence(0, 1, FWD),
        "G": RefOccurrence(2, 2, FWD),
    })
    state = find_optimal_tiling("ACG", index)

    assert [int(c) for c in state.cost] == [2, 2, 1, 0]
    assert state.back_ptr[0].query_end == 1
    assert state.back_ptr[0].next_pos == 2
    assert state.back_ptr[3] is None


def test_unreachable_positions_have_no_back_pointer(index_factory):
    """
    A hit whose continuation cannot be tiled is never recorded.
    """
    index = index_factory({"A": RefOccurrence(0, 0, FWD)})
    state = find_optimal_tiling("AC", index)

    # "C" is absent, so position 1 and therefore position 0 are unreachable.
    assert int(state.cost[1]) == UNREACHABLE
    assert int(state.cost[0]) == UNREACHABLE
    assert state.back_ptr[0] is None
    assert state.back_ptr[1] is None
    assert state.min_segments() is None


# ---------------------- Tie-break ----------------------

def test_forward_replaces_reverse_on_equal_cost(index_factory):
    """
    At start 0 the scan first finds "A" (reverse, cost 2), then "AC" (forward,
    cost 2). The forward candidate replaces the reverse one on the tie.
    """
    index = index_factory({
        "A": RefOccurrence(5, 5, REV),
        "AC": RefOccurrence(0, 1, FWD),
        "CG": RefOccurrence(1, 2, FWD),
        "G": RefOccurrence(2, 2, FWD),
    })
    state = find_optimal_tiling("ACG", index)

    assert int(state.cost[0]) == 2
    chosen = state.back_ptr[0]
    assert chosen.is_forward
    assert (chosen.query_start, chosen.query_end) == (0, 1)


def test_same_strand_tie_keeps_first_found(index_factory):
    """
    Both "A" and "AC" are forward with cost 2; the shorter one, found first
    in the end-ascending scan, is kept.
    """
    index = index_factory({
        "A": RefOccurrence(0, 0, FWD),
        "AC": RefOccurrence(0, 1, FWD),
        "CG": RefOccurrence(1, 2, FWD),
        "G": RefOccurrence(2, 2, FWD),
    })
    state = find_optimal_tiling("ACG", index)

    chosen = state.back_ptr[0]
    assert (chosen.query_start, chosen.query_end) == (0, 0)
    assert chosen.next_pos == 1


def test_reverse_does_not_replace_forward_on_tie(index_factory):
    """
    "A" is forward and found first; an equal-cost reverse "AC" must not win.
    """
    index = index_factory({
        "A": RefOccurrence(0, 0, FWD),
        "AC": RefOccurrence(3, 4, REV),
        "CG": RefOccurrence(1, 2, FWD),
        "G": RefOccurrence(2, 2, FWD),
    })
    state = find_optimal_tiling("ACG", index)

    assert state.back_ptr[0].occurrence == RefOccurrence(0, 0, FWD)


def test_reverse_reverse_tie_keeps_first_found(index_factory):
    index = index_factory({
        "A": RefOccurrence(0, 0, REV),
        "AC": RefOccurrence(3, 4, REV),
        "CG": RefOccurrence(1, 2, FWD),
        "G": RefOccurrence(2, 2, FWD),
    })
    state = find_optimal_tiling("ACG", index)

    assert state.back_ptr[0].occurrence == RefOccurrence(0, 0, REV)


def test_strictly_cheaper_reverse_beats_forward(index_factory):
    """
    The tie-break never overrides a lower segment count.
    """
    index = index_factory({
        "A": RefOccurrence(0, 0, FWD),
        "C": RefOccurrence(1, 1, FWD),
        "AC": RefOccurrence(7, 8, REV),
    })
    state = find_optimal_tiling("AC", index)

    assert int(state.cost[0]) == 1
    assert state.back_ptr[0].occurrence.strand is REV


# ---------------------- Engine ----------------------

def test_engine_fill_empty_query_is_noop():
    index = build_reference_index("ACGT")
    state = make_tiling_state(0)
    TilingEngine(config=AlignerConfig()).fill("", index, state)

    assert state.min_segments() == 0


def test_engine_rejects_invalid_query_symbol():
    index = build_reference_index("ACGT")
    with pytest.raises(InvalidSymbolError):
        find_optimal_tiling("ACNT", index)


def test_engine_with_progress_enabled():
    """
    The progress bar flag does not change the result.
    """
    index = build_reference_index("ACGTTGCA")
    quiet = find_optimal_tiling("TGCAAC", index, AlignerConfig(show_progress=False))
    noisy = find_optimal_tiling("TGCAAC", index, AlignerConfig(show_progress=True))

    assert list(quiet.cost) == list(noisy.cost)
    assert quiet.back_ptr == noisy.back_ptr


# ---------------------- Hash identity ----------------------

def test_hash_hit_is_trusted_without_substring_check(index_factory):
    """
    Only hashes are compared, so a query piece whose hash is stored is used
    with whatever witness the index holds, even one spelling a different substring.
    """
    index = index_factory({"ACG": RefOccurrence(7, 9, REV)})
    state = find_optimal_tiling("ACG", index)

    assert state.min_segments() == 1
    assert state.back_ptr[0].occurrence == RefOccurrence(7, 9, REV)
    assert state.back_ptr[0].query_end == 2
