from __future__ import annotations
from dataclasses import dataclass
from typing import Final, List, Optional

import numpy as np

from dna_tiler.tiling.tiling_back_pointer import TilingBackPointer

# Finite sentinel; adding 1 to it must not overflow int64.
UNREACHABLE: Final[int] = int(np.iinfo(np.int64).max) - 20


@dataclass(frozen=True, slots=True)
class TilingState:
    """
    Holds the DP table for a suffix-indexed query tiling.

    Attributes
    ----------
    cost : np.ndarray
        ``cost[p]`` is the minimum number of segments tiling ``query[p:]``,
        or `UNREACHABLE`. Length ``query_len + 1``.
    back_ptr : List[Optional[TilingBackPointer]]
        The choice achieving ``cost[p]``; None where no tiling exists and at
        the terminal position.
    """
    cost: np.ndarray
    back_ptr: List[Optional[TilingBackPointer]]

    @property
    def query_len(self) -> int:
        return len(self.back_ptr) - 1

    def is_reachable(self, pos: int) -> bool:
        return int(self.cost[pos]) < UNREACHABLE

    def min_segments(self) -> Optional[int]:
        """Minimum segment count for the whole query, or None if it cannot be tiled."""
        return int(self.cost[0]) if self.is_reachable(0) else None


def make_tiling_state(query_len: int) -> TilingState:
    """
    Allocates the cost table and back-pointers for a query of `query_len` bases.

    Every cell starts `UNREACHABLE` with no back-pointer except the terminal
    cell ``cost[query_len] = 0``.
    """
    cost = np.full(query_len + 1, UNREACHABLE, dtype=np.int64)
    cost[query_len] = 0
    back_ptr: List[Optional[TilingBackPointer]] = [None] * (query_len + 1)

    return TilingState(cost=cost, back_ptr=back_ptr)
