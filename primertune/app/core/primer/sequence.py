# File: primertune/app/core/primer/sequence.py
# Version: v0.1.0
"""
Nucleotide sequence model.

- `Nucleotide`: the four DNA bases, nothing else.
- `Seq`: immutable tuple of nucleotides, 5' -> 3'.
- Text conversion is lenient: anything that is not a/t/c/g (any case) is dropped,
  so sequences can be pasted from FASTA files, GenBank dumps, numbered listings etc.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Tuple


class Nucleotide(str, Enum):
    A = "A"
    T = "T"
    C = "C"
    G = "G"


Seq = Tuple[Nucleotide, ...]

_FROM_CHAR: Dict[str, Nucleotide] = {
    "a": Nucleotide.A,
    "t": Nucleotide.T,
    "c": Nucleotide.C,
    "g": Nucleotide.G,
}

_COMPLEMENT: Dict[Nucleotide, Nucleotide] = {
    Nucleotide.A: Nucleotide.T,
    Nucleotide.T: Nucleotide.A,
    Nucleotide.C: Nucleotide.G,
    Nucleotide.G: Nucleotide.C,
}


def seq_from_str(text: str) -> Seq:
    """Parse text into a sequence, silently skipping non-ATCG characters."""
    return tuple(_FROM_CHAR[c] for c in text.lower() if c in _FROM_CHAR)


def seq_to_str(seq: Iterable[Nucleotide]) -> str:
    return "".join(nt.value for nt in seq)


def seq_complement(seq: Seq) -> Seq:
    """Reverse direction, then swap A<->T and C<->G."""
    return tuple(_COMPLEMENT[nt] for nt in reversed(seq))


def normalize_text(text: str) -> str:
    """Round-trip text through the parser (what an edited text box is rewritten to)."""
    return seq_to_str(seq_from_str(text))
