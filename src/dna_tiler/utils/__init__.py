from dna_tiler.utils.nucleotide_utils import (
    DNA_ALPHABET,
    complement_base,
    find_invalid_symbol,
    reverse_complement,
    symbol_code,
)
from dna_tiler.utils.hash_utils import HASH_BASE, HASH_MOD, extend_hash, hash_sequence

__all__ = [
    "DNA_ALPHABET",
    "complement_base",
    "find_invalid_symbol",
    "reverse_complement",
    "symbol_code",
    "HASH_BASE",
    "HASH_MOD",
    "extend_hash",
    "hash_sequence",
]
