from __future__ import annotations
from typing import Final

from dna_tiler.utils.nucleotide_utils import symbol_code

HASH_BASE: Final[int] = 5
HASH_MOD: Final[int] = 10_000_000_000_007


def extend_hash(prev_hash: int, base: str) -> int:
    """
    Extend a rolling hash by one nucleotide on the right.

    The hash treats a substring as a base-5 numeral over digits 1-4, reduced
    modulo `HASH_MOD`. Substrings of up to 18 bases never collide because
    ``5 ** 18 < HASH_MOD``; longer ones may, and collisions are accepted.

    Parameters
    ----------
    prev_hash : int
        Hash of the substring so far (0 for the empty substring).
    base : str
        The nucleotide appended to the substring.

    Returns
    -------
    int
        The hash of the extended substring, in ``[0, HASH_MOD)``.
    """
    return (prev_hash * HASH_BASE + symbol_code(base)) % HASH_MOD


def hash_sequence(seq: str) -> int:
    """
    Hash a whole sequence from scratch.

    Index building and tiling extend hashes one base at a time; this is the
    one-shot form for looking up a known substring.
    """
    seq_hash = 0
    for base in seq:
        seq_hash = extend_hash(seq_hash, base)
    return seq_hash
