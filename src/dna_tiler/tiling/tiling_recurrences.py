from __future__ import annotations
from dataclasses import dataclass
import logging
import time
from typing import Optional

from tqdm import tqdm

from dna_tiler.config import AlignerConfig
from dna_tiler.indexing import ReferenceIndex
from dna_tiler.tiling.tiling_back_pointer import TilingBackPointer
from dna_tiler.tiling.tiling_state import TilingState, UNREACHABLE, make_tiling_state
from dna_tiler.utils.hash_utils import extend_hash

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TilingEngine:
    """
    Minimum-segment tiling of a query by substrings present in a `ReferenceIndex`.

    The recurrence runs over query suffixes::

        cost[p] = min over e in [p, n) with hash(query[p..e]) in index of cost[e + 1] + 1
        cost[n] = 0

    Attributes
    ----------
    config : AlignerConfig
        Supplies the progress-bar flag.
    """
    config: AlignerConfig

    def fill(self, query: str, index: ReferenceIndex, state: TilingState) -> None:
        """
        Fills the cost table and back-pointers of `state` from right to left.

        ``cost[start]`` depends on ``cost[end + 1]`` for every ``end >= start``,
        so start positions are processed from ``n - 1`` down to 0. For each
        start the rolling hash is extended rightwards and every hit in the
        index is a candidate.

        Parameters
        ----------
        query : str
            Uppercase DNA query.
        index : ReferenceIndex
            The frozen two-strand reference index.
        state : TilingState
            A state made by `make_tiling_state(len(query))`.

        Raises
        ------
        InvalidSymbolError
            If `query` contains a character outside {A, C, G, T}.
        """
        start_time = time.perf_counter()
        query_len = len(query)
        cost = state.cost
        back_ptr = state.back_ptr

        if query_len == 0:
            logger.info("Tiling DP: empty query; nothing to fill.")
            return

        logger.info(f"Tiling DP for query length N={query_len} ({query_len * (query_len + 1) // 2:,} lookups)")

        start_iter = tqdm(range(query_len - 1, -1, -1), desc="Tiling DP", leave=False,
                          disable=not self.config.show_progress)

        for start in start_iter:
            seq_hash = 0
            for end in range(start, query_len):
                seq_hash = extend_hash(seq_hash, query[end])

                occurrence = index.lookup(seq_hash)
                if occurrence is None:
                    continue

                suffix_cost = int(cost[end + 1])
                if suffix_cost >= UNREACHABLE:
                    continue

                cand_cost = suffix_cost + 1
                best_cost = int(cost[start])
                current = back_ptr[start]

                if cand_cost < best_cost or (
                    cand_cost == best_cost
                    and not occurrence.is_reverse_complement
                    and current is not None
                    and not current.is_forward
                ):
                    cost[start] = cand_cost
                    back_ptr[start] = TilingBackPointer(
                        occurrence=occurrence,
                        next_pos=end + 1,
                        query_start=start,
                        query_end=end,
                    )

        elapsed = time.perf_counter() - start_time
        min_segments = state.min_segments()
        logger.info(f"Tiling DP completed in {elapsed:.2f}s ({elapsed * 1000:.0f}ms)")
        if min_segments is None:
            logger.info("Query cannot be fully tiled from the reference index")
        else:
            logger.info(f"Minimum segment count: {min_segments}")


def find_optimal_tiling(
    query: str,
    index: ReferenceIndex,
    config: Optional[AlignerConfig] = None,
) -> TilingState:
    """
    Allocates a `TilingState` for `query` and fills it against `index`.

    Returns
    -------
    TilingState
        The filled cost table and back-pointers.
    """
    engine = TilingEngine(config=config if config is not None else AlignerConfig())
    state = make_tiling_state(len(query))
    engine.fill(query, index, state)
    return state
