#!/usr/bin/env python3

# Golden model runner:
# beta exponents -> coefficients -> alpha_0 table -> FSR-A x64 -> report

# examples:
#   python -m kfsr.model.pipeline
#   python -m kfsr.model.pipeline --show-coefficients --no-table
#   python -m kfsr.model.pipeline --quiet --json fsr_a.json

# Notes:
# - polynomial, exponents, initial state and loop count are fixed constants
# - flags only change what gets reported/exported, never the computed states


from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from kfsr.model.alpha_table import ALPHA_PRESETS, FSR_A_PRESET, build_alpha_table, derive_coefficients
from kfsr.model.fsr_a import FSR_A_INIT, LOOP_A, FsrSnapshot, run_fsr_a
from kfsr.model.report import Reporter


def run_model(reporter: Optional[Reporter] = None) -> List[FsrSnapshot]:
    reporter = reporter if reporter is not None else Reporter(enabled=False)
    params = ALPHA_PRESETS[FSR_A_PRESET]

    coefficients = derive_coefficients(params.exponents, params.poly)
    reporter.coefficients(params.exponents, coefficients, name=params.name)

    alpha_0 = build_alpha_table(coefficients, params.poly)
    reporter.table(alpha_0, name="alpha_0")

    snapshots = run_fsr_a(alpha_0, LOOP_A, FSR_A_INIT, on_snapshot=reporter.snapshot)
    reporter.close()
    return snapshots


def snapshots_to_json(snapshots: List[FsrSnapshot]) -> dict:
    return {
        "steps": len(snapshots) - 1,
        "snapshots": [{"loop": s.step, "fsr_a": list(s.words)} for s in snapshots],
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run the FSR-A golden model and print its register states")
    p.add_argument("--quiet", action="store_true", help="Suppress all register/table output")
    p.add_argument("--show-coefficients", action="store_true", help="Print the derived beta^e coefficients")
    p.add_argument("--no-table", action="store_true", help="Do not print the alpha_0 table")
    p.add_argument("--json", dest="json_path", help="Also write every snapshot to this JSON file")
    return p


def main(argv: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    reporter = Reporter(
        stream=sys.stdout,
        enabled=not args.quiet,
        show_coefficients=args.show_coefficients,
        show_table=not args.no_table,
    )
    snapshots = run_model(reporter)

    if args.json_path:
        path = Path(args.json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(snapshots_to_json(snapshots), f, indent=2)
        print(f"[OK] {len(snapshots)} snapshots written to {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
