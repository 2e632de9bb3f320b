# File: primertune/app/core/primer/workspace.py
# Version: v0.1.0
"""
PrimerWorkspace: the editable state behind the primer table.

Owns:
- the amplification sequence, the SLIC insert/vector and the insertion locus
- the derived cloning product (vector with the insert placed at the locus)
- ion concentrations and scoring parameters shared by every record
- the ordered list of PrimerRecords and the selected row
- plasmid metadata: literature references and free-text comments

Every mutating call recomputes what it affects before returning: record edits
recompute that record's metrics, then its binding sites (two phases, in that
order); sequence edits re-match every record; ion changes recompute every record
against the same new value.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .designer import (
    DesignInfeasibleError,
    cloning_product,
    design_amplification_primers,
    design_slic_fc_primers,
)
from .parameters import IonConcentrations, PrimerDesignParameters, ScoringParameters
from .record import PrimerRecord
from .schemas import Reference, WorkspaceState
from .sequence import Seq, seq_from_str, seq_to_str
from .state_codec import (
    StateDecodeError,
    decode_state,
    encode_state,
    load_state_file,
    record_from_info,
    record_to_info,
    save_state_file,
)
from .tuning import PrimerEnd

log = logging.getLogger(__name__)

TARGET_SEQUENCE = "sequence"
TARGET_INSERT = "insert"
TARGET_VECTOR = "vector"
TARGET_CLONING_PRODUCT = "cloning_product"


class PrimerWorkspace:
    def __init__(self, params: Optional[PrimerDesignParameters] = None) -> None:
        self.params = params or PrimerDesignParameters()
        self.ion_concentrations: IonConcentrations = self.params.ions
        self.seq: Seq = ()
        self.seq_insert: Seq = ()
        self.seq_vector: Seq = ()
        self.insert_loc: int = 0
        self.seq_cloning_product: Seq = ()
        self.records: List[PrimerRecord] = []
        self.selected: Optional[int] = None
        self.references: List[Reference] = []
        self.comments: List[str] = []

    @property
    def scoring(self) -> ScoringParameters:
        return self.params.scoring

    # --- Sequences -------------------------------------------------------------------------------

    def targets(self) -> Dict[str, Seq]:
        return {
            TARGET_SEQUENCE: self.seq,
            TARGET_INSERT: self.seq_insert,
            TARGET_VECTOR: self.seq_vector,
            TARGET_CLONING_PRODUCT: self.seq_cloning_product,
        }

    def set_sequence_text(self, text: str) -> str:
        """Replace the amplification sequence; returns the normalized text."""
        self.seq = seq_from_str(text)
        self.sync_primer_matches()
        return seq_to_str(self.seq)

    def set_insert_text(self, text: str) -> str:
        self.seq_insert = seq_from_str(text)
        self.sync_cloning_product()
        return seq_to_str(self.seq_insert)

    def set_vector_text(self, text: str) -> str:
        self.seq_vector = seq_from_str(text)
        self.sync_cloning_product()
        return seq_to_str(self.seq_vector)

    def set_insert_loc(self, loc: int) -> None:
        self.insert_loc = max(0, loc)
        self.sync_cloning_product()

    def shift_insert_loc(self, step: int) -> None:
        """Move the locus by one base, staying inside the vector."""
        if step < 0 and self.insert_loc > 0:
            self.insert_loc -= 1
        elif step > 0 and self.insert_loc + 1 < len(self.seq_vector):
            self.insert_loc += 1
        self.sync_cloning_product()

    def sync_cloning_product(self) -> None:
        self.seq_cloning_product = cloning_product(self.seq_vector, self.seq_insert, self.insert_loc)
        self.sync_primer_matches()

    def sync_primer_matches(self, index: Optional[int] = None) -> None:
        """Re-match one record (by index) or all of them."""
        targets = self.targets()
        if index is None:
            for record in self.records:
                record.sync_matches(targets)
        elif 0 <= index < len(self.records):
            self.records[index].sync_matches(targets)
        else:
            log.error("Match sync requested for primer %d, but only %d exist", index, len(self.records))

    # --- Reaction conditions ---------------------------------------------------------------------

    def set_ion_concentrations(self, ions: IonConcentrations) -> None:
        """Apply new ion concentrations to every record in one pass."""
        self.ion_concentrations = ions
        for record in self.records:
            record.run_calcs(ions, self.scoring)

    # --- Designs ---------------------------------------------------------------------------------

    def append_designed(self, records: List[PrimerRecord]) -> List[PrimerRecord]:
        """Append designer output (computed with this workspace's ions); only matches are synced."""
        first = len(self.records)
        self.records.extend(records)
        for i in range(first, len(self.records)):
            self.sync_primer_matches(i)
        return records

    def make_amplification_primers(self) -> List[PrimerRecord]:
        try:
            records = design_amplification_primers(self.seq, self.ion_concentrations, self.params)
        except DesignInfeasibleError as ex:
            log.warning("No amplification primers: %s", ex)
            return []
        return self.append_designed(records)

    def make_cloning_primers(self) -> List[PrimerRecord]:
        try:
            records = design_slic_fc_primers(
                self.seq_vector, self.seq_insert, self.insert_loc, self.ion_concentrations, self.params
            )
        except DesignInfeasibleError as ex:
            log.warning("No cloning primers: %s", ex)
            return []
        return self.append_designed(records)

    # --- Record edits ----------------------------------------------------------------------------

    def _record(self, index: int) -> Optional[PrimerRecord]:
        if 0 <= index < len(self.records):
            return self.records[index]
        log.error("Primer index %d out of range (%d primers)", index, len(self.records))
        return None

    def add_primer(self, record: Optional[PrimerRecord] = None) -> PrimerRecord:
        record = record or PrimerRecord()
        if record.sequence_input:
            record.run_calcs(self.ion_concentrations, self.scoring)
        self.records.append(record)
        self.sync_primer_matches(len(self.records) - 1)
        return record

    def set_primer_text(self, index: int, text: str) -> Optional[str]:
        record = self._record(index)
        if record is None:
            return None
        record.set_sequence_text(text, self.ion_concentrations, self.scoring)
        self.sync_primer_matches(index)
        return seq_to_str(record.sequence_input)

    def set_description(self, index: int, description: str) -> None:
        record = self._record(index)
        if record is not None:
            record.description = description

    def toggle_tune(self, index: int, end: PrimerEnd) -> None:
        record = self._record(index)
        if record is None:
            return
        record.toggle_tune(end, self.ion_concentrations, self.scoring)
        self.sync_primer_matches(index)

    def tune(self, index: int, end: PrimerEnd, step: int) -> bool:
        record = self._record(index)
        if record is None:
            return False
        changed = record.tune(end, step, self.ion_concentrations, self.scoring)
        if changed:
            self.sync_primer_matches(index)
        return changed

    # --- Selection -------------------------------------------------------------------------------

    def select(self, index: int) -> None:
        self.selected = index
        self.selected_record()

    def deselect(self) -> None:
        self.selected = None

    def selected_record(self) -> Optional[PrimerRecord]:
        """The selected record, or None; a stale selection is logged and cleared."""
        if self.selected is None:
            return None
        if not (0 <= self.selected < len(self.records)):
            log.error("Exceeded primer selection len: %d (have %d)", self.selected, len(self.records))
            self.selected = None
            return None
        return self.records[self.selected]

    def move_selected(self, step: int) -> None:
        """Swap the selected row with its neighbour above (step < 0) or below (step > 0)."""
        if self.selected_record() is None:
            return
        i = self.selected
        j = i - 1 if step < 0 else i + 1
        if 0 <= j < len(self.records):
            self.records[i], self.records[j] = self.records[j], self.records[i]
            self.selected = j

    def delete_selected(self) -> Optional[PrimerRecord]:
        if self.selected_record() is None:
            return None
        removed = self.records.pop(self.selected)
        self.selected = None
        return removed

    # --- Plasmid metadata ------------------------------------------------------------------------

    def add_reference(self, **fields) -> Reference:
        """Append a reference; unknown field names raise a ValidationError."""
        ref = Reference(**fields)
        self.references.append(ref)
        return ref

    def update_reference(self, index: int, **fields) -> Optional[Reference]:
        if not (0 <= index < len(self.references)):
            log.error("Reference index %d out of range (%d references)", index, len(self.references))
            return None
        ref = Reference(**{**self.references[index].model_dump(), **fields})
        self.references[index] = ref
        return ref

    def delete_reference(self, index: int) -> Optional[Reference]:
        if 0 <= index < len(self.references):
            return self.references.pop(index)
        return None

    def add_comment(self, text: str = "") -> int:
        self.comments.append(text)
        return len(self.comments) - 1

    def set_comment(self, index: int, text: str) -> None:
        if 0 <= index < len(self.comments):
            self.comments[index] = text
        else:
            log.error("Comment index %d out of range (%d comments)", index, len(self.comments))

    def delete_comment(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.comments):
            return self.comments.pop(index)
        return None

    # --- Persistence -----------------------------------------------------------------------------

    def to_state(self) -> WorkspaceState:
        return WorkspaceState(
            seq=seq_to_str(self.seq),
            seqInsert=seq_to_str(self.seq_insert),
            seqVector=seq_to_str(self.seq_vector),
            insertLoc=self.insert_loc,
            ionConcentrations=self.ion_concentrations,
            scoring=self.scoring,
            records=[record_to_info(r) for r in self.records],
            selected=self.selected,
            references=[r.model_copy() for r in self.references],
            comments=list(self.comments),
        )

    @classmethod
    def from_state(cls, state: WorkspaceState, params: Optional[PrimerDesignParameters] = None) -> "PrimerWorkspace":
        base = params or PrimerDesignParameters()
        ws = cls(base.model_copy(update={"ions": state.ionConcentrations, "scoring": state.scoring}))
        ws.seq = seq_from_str(state.seq)
        ws.seq_insert = seq_from_str(state.seqInsert)
        ws.seq_vector = seq_from_str(state.seqVector)
        ws.insert_loc = state.insertLoc
        ws.seq_cloning_product = cloning_product(ws.seq_vector, ws.seq_insert, ws.insert_loc)
        ws.records = [record_from_info(info, ws.ion_concentrations, ws.scoring) for info in state.records]
        ws.sync_primer_matches()
        ws.selected = state.selected
        ws.references = [r.model_copy() for r in state.references]
        ws.comments = list(state.comments)
        return ws

    def encode(self) -> bytes:
        return encode_workspace(self)

    def _replace_with(self, other: "PrimerWorkspace") -> None:
        self.__dict__.update(other.__dict__)

    def restore(self, blob: bytes) -> bool:
        """Load state from a blob; on failure log it and keep the current state."""
        try:
            other = decode_workspace(blob, self.params)
        except StateDecodeError as ex:
            log.error("Error loading workspace: %s", ex)
            return False
        self._replace_with(other)
        return True

    def save_file(self, path: Union[str, Path]) -> None:
        save_workspace_file(path, self)

    def load_file(self, path: Union[str, Path]) -> bool:
        try:
            other = load_workspace_file(path, self.params)
        except StateDecodeError as ex:
            log.error("Error loading workspace from %s: %s", path, ex)
            return False
        self._replace_with(other)
        return True


# --- Module-level codec ---------------------------------------------------------------------------

def encode_workspace(ws: PrimerWorkspace) -> bytes:
    return encode_state(ws.to_state())


def decode_workspace(blob: bytes, params: Optional[PrimerDesignParameters] = None) -> PrimerWorkspace:
    return PrimerWorkspace.from_state(decode_state(blob), params)


def save_workspace_file(path: Union[str, Path], ws: PrimerWorkspace) -> None:
    save_state_file(path, ws.to_state())


def load_workspace_file(path: Union[str, Path], params: Optional[PrimerDesignParameters] = None) -> PrimerWorkspace:
    return PrimerWorkspace.from_state(load_state_file(path), params)
