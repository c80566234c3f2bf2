from __future__ import annotations
import logging
import time
from typing import Dict, Iterator, Optional, Tuple

from tqdm import tqdm

from dna_tiler.config import AlignerConfig
from dna_tiler.errors import ReferenceTooLongError
from dna_tiler.structures import RefOccurrence, Strand
from dna_tiler.utils.hash_utils import extend_hash
from dna_tiler.utils.nucleotide_utils import reverse_complement

logger = logging.getLogger(__name__)


class ReferenceIndex:
    """
    Maps the rolling hash of every reference substring to one witness occurrence.

    Only the hash is compared, never the substring itself, so two substrings
    whose hashes collide share a single entry. Entries are written
    insert-if-absent: the first occurrence seen for a hash is the one kept.
    Once `freeze` has been called the index is read-only.
    """
    __slots__ = ("_entries", "_frozen")

    def __init__(self):
        self._entries: Dict[int, RefOccurrence] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def insert_if_absent(self, seq_hash: int, occurrence: RefOccurrence) -> bool:
        """
        Record `occurrence` for `seq_hash` unless the slot is already taken.

        Returns
        -------
        bool
            True if the occurrence was stored, False if an earlier witness won.

        Raises
        ------
        RuntimeError
            If the index has been frozen.
        """
        if self._frozen:
            raise RuntimeError("ReferenceIndex is frozen; no further inserts allowed.")

        if seq_hash in self._entries:
            return False

        self._entries[seq_hash] = occurrence
        return True

    def freeze(self) -> None:
        self._frozen = True

    def lookup(self, seq_hash: int) -> Optional[RefOccurrence]:
        return self._entries.get(seq_hash)

    def items(self) -> Iterator[Tuple[int, RefOccurrence]]:
        return iter(self._entries.items())

    def __contains__(self, seq_hash: object) -> bool:
        return seq_hash in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_strand(
    reference: str,
    strand: Strand,
    index: ReferenceIndex,
    show_progress: bool = False,
) -> None:
    """
    Hash every substring of one orientation of `reference` into `index`.

    For each start position the hash is reset and extended one base at a
    time over every end position, so each substring is hashed in O(1) from
    its prefix. Coordinates are stored on the forward strand: a substring
    ``[start, end]`` of the reverse complement maps back to
    ``[n - end - 1, n - start - 1]``.

    Call order matters. The forward strand must be built before the reverse
    complement so a forward witness takes any hash slot both strands hit.

    Parameters
    ----------
    reference : str
        The forward reference sequence.
    strand : Strand
        Which orientation to hash.
    index : ReferenceIndex
        The shared index to populate.
    show_progress : bool, optional
        Show a tqdm progress bar over start positions.

    Raises
    ------
    InvalidSymbolError
        If `reference` contains a character outside {A, C, G, T}.
    """
    ref_len = len(reference)
    is_reverse = strand is Strand.REVERSE_COMPLEMENT
    seq = reverse_complement(reference) if is_reverse else reference

    inserted = 0
    start_iter = tqdm(range(ref_len), desc=f"Index {strand.value}", leave=False, disable=not show_progress)
    for start in start_iter:
        seq_hash = 0
        for end in range(start, ref_len):
            seq_hash = extend_hash(seq_hash, seq[end])
            if seq_hash in index:
                continue

            if is_reverse:
                occurrence = RefOccurrence(ref_len - end - 1, ref_len - start - 1, strand)
            else:
                occurrence = RefOccurrence(start, end, strand)

            index.insert_if_absent(seq_hash, occurrence)
            inserted += 1

    logger.debug(f"{strand.value} strand added {inserted:,} entries")


def build_reference_index(reference: str, config: Optional[AlignerConfig] = None) -> ReferenceIndex:
    """
    Build and freeze the two-strand substring index for `reference`.

    Parameters
    ----------
    reference : str
        Uppercase DNA reference.
    config : Optional[AlignerConfig]
        Supplies the reference length cap and the progress flag.

    Returns
    -------
    ReferenceIndex
        The frozen index, forward witnesses first.

    Raises
    ------
    ReferenceTooLongError
        If `config.max_reference_length` is set and exceeded.
    InvalidSymbolError
        If `reference` contains a character outside {A, C, G, T}.
    """
    if config is None:
        config = AlignerConfig()

    ref_len = len(reference)
    limit = config.max_reference_length
    if limit and ref_len > limit:
        raise ReferenceTooLongError(ref_len, limit)

    start_time = time.perf_counter()
    logger.info(f"Indexing reference of length {ref_len} ({ref_len * (ref_len + 1):,} substrings over both strands)")

    index = ReferenceIndex()
    build_strand(reference, Strand.FORWARD, index, show_progress=config.show_progress)
    build_strand(reference, Strand.REVERSE_COMPLEMENT, index, show_progress=config.show_progress)
    index.freeze()

    elapsed = time.perf_counter() - start_time
    logger.info(f"Reference index built in {elapsed:.2f}s with {len(index):,} distinct hashes")

    return index
