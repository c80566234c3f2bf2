from __future__ import annotations
from typing import Iterator

from dna_tiler.errors import AlignmentBreakError
from dna_tiler.structures import Segment
from dna_tiler.tiling.tiling_state import TilingState


def traceback_tiling(state: TilingState) -> Iterator[Segment]:
    """
    Reconstructs the optimal tiling by following back-pointers from position 0.

    Segments are yielded lazily in query order. Each back-pointer continues
    at ``query_end + 1``, so the yielded query ranges are contiguous and
    never overlap.

    Parameters
    ----------
    state : TilingState
        A state filled by `TilingEngine.fill`.

    Yields
    ------
    Segment
        The next segment of the tiling.

    Raises
    ------
    AlignmentBreakError
        When a non-terminal position has no back-pointer.
    """
    query_len = state.query_len
    pos = 0

    while pos < query_len:
        back_ptr = state.back_ptr[pos]
        if back_ptr is None:
            raise AlignmentBreakError(pos)

        yield Segment.from_occurrence(back_ptr.occurrence, back_ptr.query_start, back_ptr.query_end)
        pos = back_ptr.next_pos
