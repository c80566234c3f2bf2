from dna_tiler.aligner import AlignmentResult, align, run_alignment
from dna_tiler.config import AlignerConfig, AlignerConfigLoader
from dna_tiler.errors import AlignError, AlignmentBreakError, InvalidSymbolError, ReferenceTooLongError
from dna_tiler.structures import RefOccurrence, Segment, Strand

__all__ = [
    "AlignmentResult",
    "align",
    "run_alignment",
    "AlignerConfig",
    "AlignerConfigLoader",
    "AlignError",
    "AlignmentBreakError",
    "InvalidSymbolError",
    "ReferenceTooLongError",
    "RefOccurrence",
    "Segment",
    "Strand",
]
