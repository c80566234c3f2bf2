from dna_tiler.structures.segment import Strand, RefOccurrence, Segment

__all__ = [
    "Strand",
    "RefOccurrence",
    "Segment",
]
