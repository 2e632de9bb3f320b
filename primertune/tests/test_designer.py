# File: primertune/tests/test_designer.py
# Version: v0.1.0
"""
Initial candidates for amplification and SLIC/FastCloning, end to end.
"""

from __future__ import annotations

import pytest

from primertune.app.core.primer.binding import PrimerDirection
from primertune.app.core.primer.designer import (
    DesignInfeasibleError,
    cloning_product,
    design_amplification_primers,
    design_slic_fc_primers,
)
from primertune.app.core.primer.parameters import PrimerDesignParameters
from primertune.app.core.primer.sequence import seq_complement, seq_from_str, seq_to_str
from primertune.app.core.primer.tuning import TuneSetting

VECTOR = seq_from_str("GATCCGTACGTTAGCATGCCTAGGACTTGACCAGTATCGAACGTGCAATG")  # 50 nt
INSERT = seq_from_str("ATGAGTAAAGGAGAAGAACT")  # 20 nt


def test_amplification_scenario():
    target = seq_from_str("ATGCATGCATGCATGCATGCATGCATGCATGC")
    fwd, rev = design_amplification_primers(target)

    assert fwd.sequence_input == target
    assert fwd.tunable_5p == TuneSetting.disabled()
    assert fwd.tunable_3p == TuneSetting.enabled_at(12)
    assert fwd.primer.sequence == target[:20]
    assert fwd.primer.direction == PrimerDirection.FORWARD
    assert fwd.metrics is not None

    assert rev.sequence_input == seq_complement(target)
    assert rev.tunable_5p == TuneSetting.disabled()
    assert rev.tunable_3p == TuneSetting.enabled_at(12)
    assert rev.primer.sequence == seq_complement(target)[:20]
    assert rev.primer.direction == PrimerDirection.REVERSE
    assert rev.metrics is not None


def test_amplification_long_target_uses_ends():
    target = VECTOR
    fwd, rev = design_amplification_primers(target)
    assert fwd.sequence_input == target[:32]
    assert rev.sequence_input == seq_complement(target[-32:])
    assert fwd.description == "Amplification Fwd"
    assert rev.description == "Amplification Rev"


def test_amplification_too_short():
    with pytest.raises(DesignInfeasibleError):
        design_amplification_primers(VECTOR[:29])
    with pytest.raises(DesignInfeasibleError):
        design_amplification_primers(())
    # exactly the minimum works
    assert len(design_amplification_primers(VECTOR[:30])) == 2


def test_amplification_respects_parameters():
    params = PrimerDesignParameters(primerLengthUntrimmed=28, defaultTrim=6, primerLengthMin=18)
    fwd, _ = design_amplification_primers(VECTOR, params=params)
    assert len(fwd.sequence_input) == 28
    assert len(fwd.primer) == 22


def test_slic_scenario():
    records = design_slic_fc_primers(VECTOR, INSERT, 25)
    assert len(records) == 4
    ins_fwd, ins_rev, vec_fwd, vec_rev = records

    assert ins_fwd.sequence_input == VECTOR[:25] + INSERT
    assert ins_rev.sequence_input == seq_complement(INSERT + VECTOR[25:])
    assert vec_fwd.sequence_input == VECTOR[25:]
    assert vec_rev.sequence_input == seq_complement(VECTOR[:25])

    for r in (ins_fwd, ins_rev):
        assert r.tunable_5p.is_enabled and r.tunable_3p.is_enabled
    assert vec_fwd.tunable_5p == TuneSetting.disabled()
    assert vec_fwd.tunable_3p.is_enabled
    assert vec_rev.tunable_3p == TuneSetting.disabled()
    assert vec_rev.tunable_5p.is_enabled

    assert [r.primer.direction for r in records] == [
        PrimerDirection.FORWARD,
        PrimerDirection.REVERSE,
        PrimerDirection.FORWARD,
        PrimerDirection.REVERSE,
    ]
    assert all(r.metrics is not None for r in records)


def test_slic_infeasible_inputs():
    with pytest.raises(DesignInfeasibleError):
        design_slic_fc_primers((), INSERT, 1)
    with pytest.raises(DesignInfeasibleError):
        design_slic_fc_primers(VECTOR, (), 25)
    with pytest.raises(DesignInfeasibleError):
        design_slic_fc_primers(VECTOR, INSERT, 0)
    with pytest.raises(DesignInfeasibleError):
        design_slic_fc_primers(VECTOR, INSERT, len(VECTOR))


def test_cloning_product():
    product = cloning_product(VECTOR, INSERT, 25)
    assert seq_to_str(product) == seq_to_str(VECTOR[:25]) + seq_to_str(INSERT) + seq_to_str(VECTOR[25:])
    assert cloning_product(VECTOR, INSERT, 500) == VECTOR + INSERT
