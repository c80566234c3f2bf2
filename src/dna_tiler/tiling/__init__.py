from dna_tiler.tiling.tiling_back_pointer import TilingBackPointer
from dna_tiler.tiling.tiling_state import TilingState, UNREACHABLE, make_tiling_state

__all__ = [
    "TilingBackPointer",
    "TilingState",
    "UNREACHABLE",
    "make_tiling_state",
]
