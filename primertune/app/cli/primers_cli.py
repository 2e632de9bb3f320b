# File: primertune/app/cli/primers_cli.py
# Version: v2.0.0
"""
CLI for PrimerTune primer design.

Modes
-----
- amplification: forward/reverse candidates at the two ends of --fasta.
- slic:          insert/vector SLIC/FastCloning candidates for placing --insert
                 into --vector at --insert-loc (0-based index into the vector).

Writes primers.fasta (effective, trimmed sequences) and primers.json (records
with metrics and tuning state). With --workspace-out, also writes an encoded
workspace that the API or a later session can restore.

Usage:
    python -m primertune.app.cli.primers_cli --mode amplification \
        --fasta target.fasta --outdir out/primers

    python -m primertune.app.cli.primers_cli --mode slic \
        --vector pUC19.fasta --insert gfp.fasta --insert-loc 396 \
        --outdir out/slic [--params-json primers_param.json] [--log-level DEBUG]

Exit codes: 0 ok, 1 design infeasible, 2 bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from Bio import SeqIO
from Bio.Seq import Seq as BioSeq
from Bio.SeqRecord import SeqRecord

from primertune.app.config.config_primers import load_current_params, load_params_file
from primertune.app.core.primer.designer import (
    DesignInfeasibleError,
    design_amplification_primers,
    design_slic_fc_primers,
)
from primertune.app.core.primer.record import PrimerRecord
from primertune.app.core.primer.sequence import Seq, seq_from_str, seq_to_str
from primertune.app.core.primer.state_codec import record_to_info
from primertune.app.core.primer.workspace import PrimerWorkspace, save_workspace_file

log = logging.getLogger("primers_cli")


# ---------- IO helpers ----------

def read_single_fasta(path: Path) -> Tuple[str, Seq]:
    """Return (id, sequence). Enforces exactly one FASTA record."""
    rec = SeqIO.read(str(path), "fasta")
    seq = seq_from_str(str(rec.seq))
    if not seq:
        raise ValueError(f"{path} contains no A/C/G/T bases.")
    return rec.id or "sequence", seq


def write_fasta(out: Path, records: List[PrimerRecord]) -> int:
    entries = []
    for i, r in enumerate(records, start=1):
        seq = seq_to_str(r.primer.sequence)
        tm = r.metrics.melting_temp if r.metrics else 0.0
        q = r.metrics.quality_score if r.metrics else 0.0
        entries.append(
            SeqRecord(
                BioSeq(seq),
                id=f"primer_{i}",
                description=f"{r.description} len={len(seq)} tm={tm:.1f} quality={q:.2f}",
            )
        )
    return SeqIO.write(entries, str(out), "fasta")


# ---------- Main ----------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Tunable primer design (amplification or SLIC/FastCloning)")
    p.add_argument("--mode", required=True, choices=["amplification", "slic"])
    p.add_argument("--fasta", type=Path, help="Amplification target (single-record FASTA)")
    p.add_argument("--vector", type=Path, help="SLIC vector (single-record FASTA)")
    p.add_argument("--insert", type=Path, help="SLIC insert (single-record FASTA)")
    p.add_argument("--insert-loc", type=int, help="Insertion locus, 0-based index into the vector")
    p.add_argument("--outdir", required=True, type=Path)
    p.add_argument("--params-json", type=Path, help="PrimerDesignParameters JSON (defaults to the stored parameters)")
    p.add_argument("--workspace-out", type=Path, help="Also write an encoded workspace file here")
    p.add_argument("--log-level", dest="log_level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        params = load_params_file(args.params_json) if args.params_json else load_current_params()
        ws = PrimerWorkspace(params)

        if args.mode == "amplification":
            if args.fasta is None:
                p.error("--fasta is required for --mode amplification")
            name, seq = read_single_fasta(args.fasta)
            ws.seq = seq
            records = design_amplification_primers(seq, params.ions, params)
            meta = {"mode": "amplification", "sequence_name": name, "length": len(seq)}
        else:
            if args.vector is None or args.insert is None or args.insert_loc is None:
                p.error("--vector, --insert and --insert-loc are required for --mode slic")
            v_name, vector = read_single_fasta(args.vector)
            i_name, insert = read_single_fasta(args.insert)
            ws.seq_vector, ws.seq_insert = vector, insert
            ws.set_insert_loc(args.insert_loc)
            records = design_slic_fc_primers(vector, insert, args.insert_loc, params.ions, params)
            meta = {
                "mode": "slic",
                "vector_name": v_name,
                "vector_length": len(vector),
                "insert_name": i_name,
                "insert_length": len(insert),
                "insert_loc": args.insert_loc,
            }

        ws.append_designed(records)

        args.outdir.mkdir(parents=True, exist_ok=True)
        out_fa = args.outdir / "primers.fasta"
        write_fasta(out_fa, ws.records)

        meta["params_source"] = str(args.params_json) if args.params_json else "stored"
        meta["records"] = [record_to_info(r).model_dump(mode="json") for r in ws.records]
        (args.outdir / "primers.json").write_text(json.dumps(meta, indent=2), encoding="utf-8")

        if args.workspace_out:
            save_workspace_file(args.workspace_out, ws)
            log.info("Workspace written to %s", args.workspace_out)

        log.info("Wrote %s (%d primers, %s)", out_fa, len(ws.records), args.mode)
        print(f"[OK] Wrote {out_fa} ({len(ws.records)} primers)")

    except DesignInfeasibleError as ex:
        log.error("Design infeasible: %s", ex)
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, OSError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
