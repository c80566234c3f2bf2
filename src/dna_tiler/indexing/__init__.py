from dna_tiler.indexing.reference_index import ReferenceIndex, build_strand, build_reference_index

__all__ = [
    "ReferenceIndex",
    "build_strand",
    "build_reference_index",
]
