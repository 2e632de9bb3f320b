# File: primertune/tests/test_config_primers.py
# Version: v0.1.0
"""
Primer parameter files: defaults, fallback, atomic save, validation.
"""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from primertune.app.config.config_primers import (
    ensure_current_exists,
    load_current_params,
    load_default_params,
    load_params_file,
    save_current_params,
)
from primertune.app.core.primer.parameters import IonConcentrations, PrimerDesignParameters


def test_shipped_defaults_match_model_defaults(params_paths):
    assert load_default_params() == PrimerDesignParameters()


def test_current_falls_back_to_defaults(params_paths):
    _, current = params_paths
    assert not current.exists()
    assert load_current_params() == load_default_params()


def test_ensure_current_exists(params_paths):
    _, current = params_paths
    created, params = ensure_current_exists()
    assert created is True
    assert current.exists()
    created, again = ensure_current_exists()
    assert created is False
    assert again == params


def test_save_and_reload(params_paths):
    _, current = params_paths
    params = PrimerDesignParameters(defaultTrim=8, ions=IonConcentrations(monovalent=100.0))
    save_current_params(params)
    assert load_current_params() == params
    assert not current.with_suffix(".json.tmp").exists()
    assert json.loads(current.read_text(encoding="utf-8"))["ions"]["monovalent"] == 100.0


def test_partial_and_invalid_files(tmp_path):
    partial = tmp_path / "partial.json"
    partial.write_text(json.dumps({"primerLengthMin": 16}), encoding="utf-8")
    params = load_params_file(partial)
    assert params.primerLengthMin == 16
    assert params.primerLengthUntrimmed == 32

    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"defaultTrim": 20, "primerLengthMin": 18}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_params_file(invalid)
