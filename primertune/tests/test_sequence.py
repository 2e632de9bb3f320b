# File: primertune/tests/test_sequence.py
# Version: v0.1.0
"""
Sequence model: lenient parsing, text rendering, complement.
"""

from __future__ import annotations

import itertools

from primertune.app.core.primer.sequence import (
    Nucleotide as N,
    normalize_text,
    seq_complement,
    seq_from_str,
    seq_to_str,
)


def test_parse_drops_non_atcg():
    assert seq_from_str("xyzATCG123") == (N.A, N.T, N.C, N.G)


def test_parse_is_case_insensitive():
    assert seq_from_str("aTcG") == seq_from_str("ATCG")
    assert seq_from_str("") == ()
    assert seq_from_str("nnnn\n  --") == ()


def test_to_text_is_upper_case():
    assert seq_to_str(seq_from_str("gattaca")) == "GATTACA"
    assert normalize_text("> gat tac\na") == "GATTACA"


def test_parse_round_trip_short_sequences():
    for n in range(0, 5):
        for combo in itertools.product("ATCG", repeat=n):
            s = tuple(N(c) for c in combo)
            assert seq_from_str(seq_to_str(s)) == s


def test_complement_reverses_then_swaps():
    assert seq_complement(seq_from_str("ATCG")) == seq_from_str("CGAT")
    assert seq_complement(seq_from_str("AAAC")) == seq_from_str("GTTT")
    assert seq_complement(()) == ()


def test_complement_is_an_involution():
    s = seq_from_str("GATCCGTACGTTAGCATGCCTAGGACTTGACC")
    assert seq_complement(seq_complement(s)) == s
