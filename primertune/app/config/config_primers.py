# File: primertune/app/config/config_primers.py
# Version: v0.3.0
"""
Primer parameters configuration loader/saver.

- Reads defaults from: settings.PRIMER_PARAMS_DEFAULT_PATH (primers_param_default.json)
- Reads/writes current from: settings.PRIMER_PARAMS_PATH (primers_param.json)
- Validates payloads with PrimerDesignParameters (Pydantic) from core/primer/parameters.py

Usage:
    from primertune.app.config.config_primers import load_current_params, save_current_params

Notes
-----
- JSON schema (camelCase keys), for example:

  {
    "primerLengthUntrimmed": 32,
    "defaultTrim": 12,
    "primerLengthMin": 18,
    "ions": { "monovalent": 50.0, "divalent": 1.5, "dntp": 0.2, "primer": 25.0 },
    "scoring": {
      "tmIdeal": 59.0, "tmTolerance": 10.0,
      "gcMin": 0.4, "gcMax": 0.6, "gcTolerance": 0.2,
      "weights": { "wTm": 1.0, "wGC": 0.5, "w3p": 1.25, "wDimer": 1.0, "wRepeats": 1.0, "wComplexity": 0.5 }
    }
  }

- Missing keys fall back to model defaults.

Thread-safety:
- Uses atomic writes (tmp + replace) to avoid partial/dirty writes.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from primertune.app.core.config import settings
from primertune.app.core.primer.parameters import PrimerDesignParameters

log = logging.getLogger(__name__)


def _default_file() -> Path:
    return Path(settings.PRIMER_PARAMS_DEFAULT_PATH)


def _current_file() -> Path:
    return Path(settings.PRIMER_PARAMS_PATH)


def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _atomic_write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    os.replace(tmp, path)


def load_params_file(path: Path) -> PrimerDesignParameters:
    """Load parameters from an arbitrary JSON file (used by the CLI)."""
    return PrimerDesignParameters.model_validate(_read_json(Path(path)) or {})


def load_default_params() -> PrimerDesignParameters:
    """Load default primer design parameters from primers_param_default.json."""
    payload = _read_json(_default_file())
    return PrimerDesignParameters.model_validate(payload or {})


def load_current_params(fallback_to_default: bool = True) -> PrimerDesignParameters:
    """
    Load current (editable) primer design parameters.
    If the file is missing and fallback is True, return defaults.
    """
    payload = _read_json(_current_file())
    if not payload and fallback_to_default:
        return load_default_params()
    return PrimerDesignParameters.model_validate(payload or {})


def save_current_params(params: PrimerDesignParameters, path: Optional[Path] = None) -> None:
    """Persist current parameters to primers_param.json (atomic write)."""
    target = Path(path) if path else _current_file()
    _atomic_write_json(target, params.model_dump(mode="json"))
    log.info("Saved primer parameters to %s", target)


def ensure_current_exists() -> Tuple[bool, PrimerDesignParameters]:
    """
    Ensure primers_param.json exists; if not, initialize from defaults.
    Returns (created, params).
    """
    if _current_file().exists():
        return False, load_current_params()
    defaults = load_default_params()
    save_current_params(defaults)
    return True, defaults
