# File: primertune/app/api/v1/primers/deps.py
# Version: v0.3.0
"""
Dependency providers for primer endpoints.

`current_params()` resolves the stored primer design parameters once per
request; tests override it to pin parameters without touching the JSON files.
"""

from __future__ import annotations

from primertune.app.config.config_primers import load_current_params
from primertune.app.core.primer.parameters import PrimerDesignParameters


def current_params() -> PrimerDesignParameters:
    """Return the editable parameters (defaults if primers_param.json is missing)."""
    return load_current_params()
