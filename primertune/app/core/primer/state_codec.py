# File: primertune/app/core/primer/state_codec.py
# Version: v0.1.0
"""
Conversion between core objects and their pydantic shapes, plus the binary
workspace encoding.

- `record_to_info` / `record_from_info`: PrimerRecord <-> PrimerRecordInfo
  (decoding re-derives everything computed from the input)
- `encode_state` / `decode_state`: WorkspaceState <-> bytes (UTF-8 JSON)
- `save_state_file` / `load_state_file`: the same, on disk

Decoding never returns a half-built state: any structural mismatch raises
`StateDecodeError`, and the caller keeps whatever it had in memory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .binding import PrimerMatch
from .metrics import PrimerMetrics
from .parameters import IonConcentrations, ScoringParameters
from .record import Primer, PrimerRecord
from .schemas import (
    STATE_VERSION,
    PrimerMatchInfo,
    PrimerMetricsInfo,
    PrimerRecordInfo,
    TuneSettingInfo,
    WorkspaceState,
)
from .sequence import seq_from_str, seq_to_str
from .tuning import TuneSetting


class StateDecodeError(ValueError):
    """A persisted blob does not match the expected workspace structure."""


# --- Field-for-field converters ------------------------------------------------------------------

def metrics_to_info(m: PrimerMetrics) -> PrimerMetricsInfo:
    return PrimerMetricsInfo(
        meltingTemp=m.melting_temp,
        gcPortion=m.gc_portion,
        gc3pCount=m.gc_3p_count,
        selfEndDimer=m.self_end_dimer,
        repeats=m.repeats,
        complexity=m.complexity,
        tmScore=m.tm_score,
        gcScore=m.gc_score,
        gc3pScore=m.gc_3p_score,
        dimerScore=m.dimer_score,
        repeatsScore=m.repeats_score,
        complexityScore=m.complexity_score,
        qualityScore=m.quality_score,
        bands=m.bands(),
    )


def match_to_info(m: PrimerMatch) -> PrimerMatchInfo:
    return PrimerMatchInfo(direction=m.direction, start=m.start, end=m.end)


def record_to_info(record: PrimerRecord) -> PrimerRecordInfo:
    return PrimerRecordInfo(
        sequenceInput=seq_to_str(record.sequence_input),
        description=record.description,
        direction=record.primer.direction,
        tunable5p=TuneSettingInfo(offset=record.tunable_5p.offset),
        tunable3p=TuneSettingInfo(offset=record.tunable_3p.offset),
        primerSequence=seq_to_str(record.primer.sequence),
        seqRemoved5p=seq_to_str(record.seq_removed_5p),
        seqRemoved3p=seq_to_str(record.seq_removed_3p),
        metrics=metrics_to_info(record.metrics) if record.metrics else None,
        matches={name: [match_to_info(m) for m in ms] for name, ms in record.matches.items()},
    )


def record_from_info(
    info: PrimerRecordInfo, ions: IonConcentrations, scoring: Optional[ScoringParameters] = None
) -> PrimerRecord:
    """
    Rebuild a record from its stored input and tuning state.

    The effective primer, removed flanks and metrics are recomputed with `ions`
    and `scoring`; whatever derived values `info` carries are ignored. Matches
    start empty: the caller syncs them against its own targets.
    """
    record = PrimerRecord(
        sequence_input=seq_from_str(info.sequenceInput),
        description=info.description,
        tunable_5p=TuneSetting(info.tunable5p.offset),
        tunable_3p=TuneSetting(info.tunable3p.offset),
        primer=Primer((), info.direction),
    )
    record.run_calcs(ions, scoring)
    return record


# --- Binary encoding -----------------------------------------------------------------------------

def encode_state(state: WorkspaceState) -> bytes:
    return state.model_dump_json().encode("utf-8")


def decode_state(blob: bytes) -> WorkspaceState:
    try:
        state = WorkspaceState.model_validate_json(blob)
    except ValidationError as ex:
        raise StateDecodeError(f"Stored workspace does not match the expected format ({ex.error_count()} errors).") from ex
    if state.version > STATE_VERSION:
        raise StateDecodeError(f"Stored workspace version {state.version} is newer than supported ({STATE_VERSION}).")
    return state


def save_state_file(path: Union[str, Path], state: WorkspaceState) -> None:
    """Write atomically (tmp + replace) so a crash never leaves a truncated file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_bytes(encode_state(state))
    os.replace(tmp, path)


def load_state_file(path: Union[str, Path]) -> WorkspaceState:
    path = Path(path)
    try:
        blob = path.read_bytes()
    except OSError as ex:
        raise StateDecodeError(f"Unable to read workspace file {path}: {ex}") from ex
    return decode_state(blob)
