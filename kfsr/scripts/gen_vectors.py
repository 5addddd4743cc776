#!/usr/bin/env python3
"""Generate reference vectors from the FSR-A golden model.

These vectors seed reimplementations (RTL, firmware, other languages) with
the exact alpha tables and FSR-A register sequence. For every requested
preset we export the lookup table as hex and raw little-endian words, and
for FSR-A the full state sequence from the fixed initial state.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, Sequence

from kfsr.model.alpha_table import ALPHA_PRESETS, FSR_A_PRESET, alpha_table_array, build_alpha_table, derive_coefficients
from kfsr.model.fsr_a import FSR_A_INIT, LOOP_A, run_fsr_a, snapshots_array
from kfsr.model.helpers import hex_words, pack_words_le_bytes


def _write_word_hex_file(path: Path, rows: Iterable[Sequence[int]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for row in rows:
            f.write(hex_words(row))
            f.write("\n")


def _write_json(path: Path, meta: dict) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)


def _emit_table(out_dir: Path, preset: str) -> dict:
    params = ALPHA_PRESETS[preset]
    coefficients = derive_coefficients(params.exponents, params.poly)
    table = build_alpha_table(coefficients, params.poly)

    table_dir = out_dir / preset
    _write_word_hex_file(table_dir / "alpha_table.hex", ([w] for w in table))
    (table_dir / "alpha_table.bin").write_bytes(pack_words_le_bytes(alpha_table_array(table)))
    meta = {
        "preset": preset,
        "poly": f"0x{params.poly:03X}",
        "exponents": list(params.exponents),
        "coefficients": [f"0x{c:02X}" for c in coefficients],
        "entries": len(table),
        "format": "uint32 little-endian, lane 0 = least significant byte",
    }
    _write_json(table_dir / "metadata.json", meta)
    return meta


def _emit_fsr_a(out_dir: Path) -> dict:
    params = ALPHA_PRESETS[FSR_A_PRESET]
    table = build_alpha_table(derive_coefficients(params.exponents, params.poly), params.poly)
    snapshots = run_fsr_a(table, LOOP_A, FSR_A_INIT)

    fsr_dir = out_dir / "fsr_a"
    _write_word_hex_file(fsr_dir / "states.hex", (s.words for s in snapshots))
    (fsr_dir / "states.bin").write_bytes(pack_words_le_bytes(snapshots_array(snapshots).ravel()))
    meta = {
        "table": FSR_A_PRESET,
        "steps": LOOP_A,
        "rows": len(snapshots),
        "initial_state": [f"0x{w:08X}" for w in FSR_A_INIT],
        "final_state": [f"0x{w:08X}" for w in snapshots[-1].words],
        "format": "row n = register words s0..s4 after n updates, uint32 little-endian",
    }
    _write_json(fsr_dir / "metadata.json", meta)
    return meta


def generate_vectors(args: argparse.Namespace) -> int:
    out_dir = Path(args.out_dir)
    presets = list(dict.fromkeys(args.preset or [FSR_A_PRESET]))

    out_dir.mkdir(parents=True, exist_ok=True)
    tables = {}
    for preset in presets:
        tables[preset] = _emit_table(out_dir, preset)
        print(f"[OK] Wrote {preset} alpha table to {out_dir / preset}")

    fsr = None
    if not args.no_fsr:
        fsr = _emit_fsr_a(out_dir)
        print(f"[OK] Wrote FSR-A states to {out_dir / 'fsr_a'}")

    summary = {
        "presets": presets,
        "tables": tables,
        "fsr_a": fsr,
    }
    _write_json(out_dir / "vector_summary.json", summary)
    print(f"[OK] Summary written to {out_dir / 'vector_summary.json'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate reference vectors from the FSR-A golden model")
    p.add_argument("--preset", action="append", choices=sorted(ALPHA_PRESETS),
                   help="Which alpha table(s) to emit (may be specified multiple times). Default: beta")
    p.add_argument("--no-fsr", action="store_true", help="Skip the FSR-A state sequence")
    p.add_argument("--out-dir", default="vectors", help="Destination directory for generated files")
    return p


def main(argv: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return generate_vectors(args)


if __name__ == "__main__":
    raise SystemExit(main())
