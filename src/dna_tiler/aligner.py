from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from dna_tiler.config import AlignerConfig
from dna_tiler.indexing import build_reference_index
from dna_tiler.structures import Segment
from dna_tiler.tiling.tiling_recurrences import find_optimal_tiling
from dna_tiler.tiling.tiling_traceback import traceback_tiling

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AlignmentResult:
    """
    A completed alignment: the inputs, the tiling and the index size it was built from.

    Attributes
    ----------
    reference : str
        The reference sequence.
    query : str
        The query sequence.
    segments : Tuple[Segment, ...]
        Segments in ascending query order, covering the whole query.
    index_size : int
        Number of distinct hashes in the reference index.
    """
    reference: str
    query: str
    segments: Tuple[Segment, ...]
    index_size: int

    @property
    def segment_count(self) -> int:
        return len(self.segments)


def run_alignment(reference: str, query: str, config: Optional[AlignerConfig] = None) -> AlignmentResult:
    """
    Tile `query` with the fewest exact substrings of `reference` on either strand.

    Both sequences must already be uppercase DNA. The reference index is
    built forward strand first, then reverse complement, and is discarded
    after the call.

    Parameters
    ----------
    reference : str
        The (longer) reference sequence.
    query : str
        The (shorter) query sequence.
    config : Optional[AlignerConfig]
        Indexing cap and progress settings.

    Returns
    -------
    AlignmentResult
        The reconstructed segments together with the inputs.

    Raises
    ------
    InvalidSymbolError
        If either sequence contains a character outside {A, C, G, T}.
    AlignmentBreakError
        If some part of the query exists on neither strand of the reference.
    ReferenceTooLongError
        If the reference exceeds `config.max_reference_length`.
    """
    if config is None:
        config = AlignerConfig()

    index = build_reference_index(reference, config)
    state = find_optimal_tiling(query, index, config)
    segments = tuple(traceback_tiling(state))

    logger.debug(f"Reconstructed {len(segments)} segment(s) for query of length {len(query)}")

    return AlignmentResult(reference=reference, query=query, segments=segments, index_size=len(index))


def align(reference: str, query: str, config: Optional[AlignerConfig] = None) -> List[Segment]:
    """
    Align `query` against `reference` and return its minimum-count segment list.

    See `run_alignment` for parameters and raised errors.
    """
    return list(run_alignment(reference, query, config).segments)
