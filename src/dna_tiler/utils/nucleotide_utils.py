from __future__ import annotations
from typing import Dict, Final, Optional, Tuple

from dna_tiler.errors import InvalidSymbolError

DNA_ALPHABET: Final[frozenset[str]] = frozenset("ACGT")

# Hash digits. Zero is never used so prefixes of different lengths cannot share a value.
SYMBOL_CODES: Final[Dict[str, int]] = {"A": 1, "T": 2, "C": 3, "G": 4}

COMPLEMENT: Final[Dict[str, str]] = {"A": "T", "T": "A", "C": "G", "G": "C"}


def symbol_code(base: str) -> int:
    """
    Map a nucleotide to its hash digit.

    Parameters
    ----------
    base : str
        Single uppercase nucleotide in {A, C, G, T}.

    Returns
    -------
    int
        The digit in {1, 2, 3, 4} used by the rolling hash.

    Raises
    ------
    InvalidSymbolError
        If `base` is not one of A, C, G, T.
    """
    try:
        return SYMBOL_CODES[base]
    except KeyError:
        raise InvalidSymbolError(base) from None


def complement_base(base: str) -> str:
    """Watson-Crick complement of a single uppercase nucleotide."""
    try:
        return COMPLEMENT[base]
    except KeyError:
        raise InvalidSymbolError(base) from None


def reverse_complement(seq: str) -> str:
    """
    Reverse a DNA sequence and complement every base (A<->T, C<->G).

    Parameters
    ----------
    seq : str
        Uppercase DNA sequence.

    Returns
    -------
    str
        The reverse complement. Applying the function twice returns `seq`.

    Raises
    ------
    InvalidSymbolError
        On the first character (scanning from the 3' end) outside {A, C, G, T}.
    """
    seq_len = len(seq)
    rev = []
    for offset, base in enumerate(reversed(seq)):
        try:
            rev.append(complement_base(base))
        except InvalidSymbolError:
            raise InvalidSymbolError(base, position=seq_len - offset - 1) from None

    return "".join(rev)


def find_invalid_symbol(seq: str) -> Optional[Tuple[int, str]]:
    """
    Locate the first character of `seq` outside the DNA alphabet.

    Returns
    -------
    Optional[Tuple[int, str]]
        `(position, character)` of the first violation, or `None` if the
        whole sequence is valid.
    """
    for pos, base in enumerate(seq):
        if base not in DNA_ALPHABET:
            return pos, base
    return None
