# File: primertune/tests/test_tuning.py
# Version: v0.1.0
"""
Tunable ends: toggle, clamped increment/decrement, effective range fallback,
and how a PrimerRecord re-derives its effective primer.
"""

from __future__ import annotations

from primertune.app.core.primer.parameters import IonConcentrations
from primertune.app.core.primer.record import PrimerRecord
from primertune.app.core.primer.sequence import seq_from_str
from primertune.app.core.primer.tuning import (
    PrimerEnd,
    TuneSetting,
    decrement_offset,
    effective_range,
    increment_offset,
    split_trimmed,
)

IONS = IonConcentrations()
INPUT = seq_from_str("GATCCGTACGTTAGCATGCCTAGGACTTGACC")  # 32 nt


def test_toggle():
    assert TuneSetting.disabled().toggle() == TuneSetting.enabled_at(0)
    assert TuneSetting.enabled_at(7).toggle() == TuneSetting.disabled()
    assert TuneSetting.enabled_at(-3).offset == 0


def test_disabled_end_ignores_steps():
    off = TuneSetting.disabled()
    assert increment_offset(off, TuneSetting.disabled(), 10) == off
    assert decrement_offset(off) == off
    assert off.trim == 0


def test_decrement_stops_at_zero():
    assert decrement_offset(TuneSetting.enabled_at(1)) == TuneSetting.enabled_at(0)
    assert decrement_offset(TuneSetting.enabled_at(0)) == TuneSetting.enabled_at(0)


def test_increment_never_consumes_whole_input():
    for length in range(1, 40):
        for k in range(0, length):
            other = TuneSetting.enabled_at(k)
            s = TuneSetting.enabled_at(0)
            for _ in range(length + 5):
                s = increment_offset(s, other, length)
                assert s.trim + k < length


def test_effective_range_fallback():
    assert effective_range(32, 0, 12) == (0, 20)
    assert effective_range(32, 5, 5) == (5, 27)
    assert effective_range(32, 32, 32) == (0, 32)
    assert effective_range(32, 20, 12) == (0, 32)
    assert effective_range(0, 0, 0) == (0, 0)


def test_split_trimmed():
    r5, eff, r3 = split_trimmed(INPUT, TuneSetting.enabled_at(2), TuneSetting.enabled_at(3))
    assert r5 == INPUT[:2]
    assert eff == INPUT[2:29]
    assert r3 == INPUT[29:]
    assert r5 + eff + r3 == INPUT


def test_record_degenerate_offsets_use_full_input():
    n = len(INPUT)
    record = PrimerRecord(
        sequence_input=INPUT, tunable_5p=TuneSetting.enabled_at(n), tunable_3p=TuneSetting.enabled_at(n)
    )
    record.run_calcs(IONS)
    assert record.primer.sequence == INPUT
    assert record.seq_removed_5p == ()
    assert record.seq_removed_3p == ()
    assert record.metrics is not None


def test_record_tune_recomputes_metrics():
    record = PrimerRecord(sequence_input=INPUT, tunable_3p=TuneSetting.enabled_at(12))
    record.run_calcs(IONS)
    assert len(record.primer) == 20
    before = record.metrics

    assert record.tune(PrimerEnd.THREE_PRIME, -1, IONS) is True
    assert len(record.primer) == 21
    assert record.seq_removed_3p == INPUT[21:]
    assert record.metrics != before

    # 5' is Disabled: a no-op, and nothing is recomputed
    current = record.metrics
    assert record.tune(PrimerEnd.FIVE_PRIME, 1, IONS) is False
    assert record.metrics is current


def test_record_toggle_and_text_edit():
    record = PrimerRecord()
    record.run_calcs(IONS)
    assert record.metrics is None

    record.set_sequence_text("gat ccg tac gtt agc atg cc", IONS)
    assert len(record.primer) == 20
    assert record.metrics is not None

    record.toggle_tune(PrimerEnd.FIVE_PRIME, IONS)
    assert record.tunable_5p == TuneSetting.enabled_at(0)
    assert record.is_tuned
    record.tune(PrimerEnd.FIVE_PRIME, 1, IONS)
    assert record.primer.sequence == seq_from_str("ATCCGTACGTTAGCATGCC")
    assert record.seq_removed_5p == seq_from_str("G")
