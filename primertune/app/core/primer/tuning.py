# File: primertune/app/core/primer/tuning.py
# Version: v0.1.0
"""
Tunable primer ends.

Each end (5' or 3') of a candidate primer is either Disabled, or Enabled with an
offset: the number of bases excluded from that end. Candidates are cut longer
than needed, then shortened from the end(s) that don't define the amplicon or
junction.

Rules
-----
- Toggle: Disabled -> Enabled(0); Enabled(_) -> Disabled.
- Increment: only if at least one nucleotide would remain after both trims.
- Decrement: only while the offset is > 0.
- Requests outside these bounds are silent no-ops.
- Effective range is [trim_5p, L - trim_3p); if that is degenerate, the whole
  input is used instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .sequence import Seq


class PrimerEnd(str, Enum):
    FIVE_PRIME = "5p"
    THREE_PRIME = "3p"


@dataclass(frozen=True)
class TuneSetting:
    """Disabled when `offset` is None; Enabled(offset) otherwise."""
    offset: Optional[int] = None

    @classmethod
    def disabled(cls) -> "TuneSetting":
        return cls(None)

    @classmethod
    def enabled_at(cls, offset: int) -> "TuneSetting":
        return cls(max(0, offset))

    @property
    def is_enabled(self) -> bool:
        return self.offset is not None

    @property
    def trim(self) -> int:
        """Bases excluded from this end (0 when Disabled)."""
        return self.offset or 0

    def toggle(self) -> "TuneSetting":
        return TuneSetting.disabled() if self.is_enabled else TuneSetting.enabled_at(0)


def increment_offset(setting: TuneSetting, other: TuneSetting, length: int) -> TuneSetting:
    """Trim one more base from this end, unless that would consume the whole input."""
    if not setting.is_enabled:
        return setting
    if setting.trim + 1 < length - other.trim:
        return TuneSetting.enabled_at(setting.trim + 1)
    return setting


def decrement_offset(setting: TuneSetting) -> TuneSetting:
    """Give one base back to this end."""
    if setting.is_enabled and setting.trim > 0:
        return TuneSetting.enabled_at(setting.trim - 1)
    return setting


def effective_range(length: int, trim_5p: int, trim_3p: int) -> Tuple[int, int]:
    start = trim_5p
    end = length - trim_3p
    if start >= end or start + 1 > length:
        return 0, length
    return start, end


def split_trimmed(seq: Seq, tune_5p: TuneSetting, tune_3p: TuneSetting) -> Tuple[Seq, Seq, Seq]:
    """Return (removed_5p, effective, removed_3p)."""
    start, end = effective_range(len(seq), tune_5p.trim, tune_3p.trim)
    return seq[:start], seq[start:end], seq[end:]
