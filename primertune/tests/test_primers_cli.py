# File: primertune/tests/test_primers_cli.py
# Version: v0.1.0
"""
CLI smoke tests: FASTA in, primers.fasta + primers.json out.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from Bio import SeqIO

from primertune.app.cli.primers_cli import main
from primertune.app.core.primer.parameters import PrimerDesignParameters
from primertune.app.core.primer.workspace import load_workspace_file

VECTOR = "GATCCGTACGTTAGCATGCCTAGGACTTGACCAGTATCGAACGTGCAATG"
INSERT = "ATGAGTAAAGGAGAAGAACT"


def _fasta(path: Path, name: str, seq: str) -> Path:
    path.write_text(f">{name}\n{seq[:30]}\n{seq[30:]}\n", encoding="utf-8")
    return path


@pytest.fixture()
def params_json(tmp_path) -> Path:
    path = tmp_path / "params.json"
    path.write_text(PrimerDesignParameters().model_dump_json(), encoding="utf-8")
    return path


def test_amplification(tmp_path, params_json):
    fasta = _fasta(tmp_path / "target.fasta", "target", VECTOR)
    outdir = tmp_path / "out"
    main(["--mode", "amplification", "--fasta", str(fasta), "--outdir", str(outdir), "--params-json", str(params_json)])

    records = list(SeqIO.parse(str(outdir / "primers.fasta"), "fasta"))
    assert len(records) == 2
    assert str(records[0].seq) == VECTOR[:20]
    assert "Amplification Fwd" in records[0].description

    meta = json.loads((outdir / "primers.json").read_text(encoding="utf-8"))
    assert meta["mode"] == "amplification"
    assert meta["sequence_name"] == "target"
    assert [r["description"] for r in meta["records"]] == ["Amplification Fwd", "Amplification Rev"]


def test_slic_with_workspace(tmp_path, params_json):
    vector = _fasta(tmp_path / "vector.fasta", "vec", VECTOR)
    insert = _fasta(tmp_path / "insert.fasta", "ins", INSERT)
    outdir = tmp_path / "slic"
    ws_path = tmp_path / "slic.ptw"
    main([
        "--mode", "slic",
        "--vector", str(vector),
        "--insert", str(insert),
        "--insert-loc", "25",
        "--outdir", str(outdir),
        "--params-json", str(params_json),
        "--workspace-out", str(ws_path),
    ])
    assert len(list(SeqIO.parse(str(outdir / "primers.fasta"), "fasta"))) == 4
    ws = load_workspace_file(ws_path)
    assert len(ws.records) == 4
    assert ws.insert_loc == 25
    assert all(r.matches["cloning_product"] for r in ws.records)


def test_infeasible_design_exits_1(tmp_path, params_json):
    fasta = _fasta(tmp_path / "short.fasta", "short", VECTOR[:20])
    with pytest.raises(SystemExit) as exc:
        main(["--mode", "amplification", "--fasta", str(fasta), "--outdir", str(tmp_path / "o"),
              "--params-json", str(params_json)])
    assert exc.value.code == 1


def test_bad_input_exits_2(tmp_path, params_json):
    with pytest.raises(SystemExit) as exc:
        main(["--mode", "amplification", "--fasta", str(tmp_path / "missing.fasta"),
              "--outdir", str(tmp_path / "o"), "--params-json", str(params_json)])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        main(["--mode", "slic", "--outdir", str(tmp_path / "o")])
    assert exc.value.code == 2
