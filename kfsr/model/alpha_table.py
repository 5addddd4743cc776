# kfsr/model/alpha_table.py
# coefficient derivation + alpha lookup table for the FSR-A feedback
# for each exponent e_j (lane j), c_j = x^e_j mod beta(x)
# alpha[i] = sum_j (c_j * i) << 8j, computed in GF(2^8)
# i.e. each table word holds i multiplied by 4 field constants, one per byte lane
#
# lane 0 is the least significant byte. beta gives the FSR-A table (alpha_0);
# gamma/delta/zeta give the sibling tables of the same cipher family

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from kfsr.model.gf256 import BETA_POLY, GF_SIZE, gf_mul, gf_pow_x
from kfsr.model.helpers import word_from_lanes

# table parameters
ALPHA_SIZE = 4                      # num of coefficients / byte lanes per word
TABLE_SIZE = GF_SIZE                # one word per field element
BETA_EXPONENTS = (71, 12, 3, 24)    # lane order matters


@dataclass(frozen=True)
class AlphaParams:
    name: str
    poly: int
    exponents: Tuple[int, int, int, int]


ALPHA_PRESETS: Dict[str, AlphaParams] = {
    "beta": AlphaParams("beta", BETA_POLY, BETA_EXPONENTS),
    "gamma": AlphaParams("gamma", 0x12D, (29, 93, 156, 230)),
    "delta": AlphaParams("delta", 0x14D, (248, 199, 16, 34)),
    "zeta": AlphaParams("zeta", 0x165, (16, 56, 253, 157)),
}
FSR_A_PRESET = "beta"


def derive_coefficients(exponents: Sequence[int] = BETA_EXPONENTS, poly: int = BETA_POLY) -> Tuple[int, ...]:
    if len(exponents) != ALPHA_SIZE:
        raise ValueError(f"Expected {ALPHA_SIZE} exponents, got {len(exponents)}")
    for e in exponents:
        if e < 0:
            raise ValueError(f"Exponents must be non-negative, got {e}")
    return tuple(gf_pow_x(e, poly) for e in exponents)


def build_alpha_table(coefficients: Sequence[int], poly: int = BETA_POLY) -> Tuple[int, ...]:
    if len(coefficients) != ALPHA_SIZE:
        raise ValueError(f"Expected {ALPHA_SIZE} coefficients, got {len(coefficients)}")
    for c in coefficients:
        if not 0 <= c < GF_SIZE:
            raise ValueError(f"Coefficient {c!r} is not a field element")

    table: List[int] = []
    for i in range(TABLE_SIZE):
        table.append(word_from_lanes([gf_mul(c, i, poly) for c in coefficients]))
    return tuple(table)


def alpha_table_for(preset: str = FSR_A_PRESET) -> Tuple[int, ...]:
    try:
        params = ALPHA_PRESETS[preset]
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'. Choices: {sorted(ALPHA_PRESETS)}") from None
    return build_alpha_table(derive_coefficients(params.exponents, params.poly), params.poly)


def alpha_table_array(table: Sequence[int]) -> np.ndarray:
    # uint32 view of a table for export / vectorised checks
    arr = np.asarray(table, dtype=np.uint32)
    if arr.shape != (TABLE_SIZE,):
        raise ValueError(f"Table must have {TABLE_SIZE} entries, got shape {arr.shape}")
    return arr


if __name__ == "__main__":
    import galois  # pip install galois
    from kfsr.model.helpers import lanes_from_word

    for name, params in ALPHA_PRESETS.items():
        coeffs = derive_coefficients(params.exponents, params.poly)
        table = alpha_table_for(name)
        print(f"[info] {name}: poly=0x{params.poly:03X} coeffs=" + " ".join(f"{c:02X}" for c in coeffs))

        GF = galois.GF(2**8, irreducible_poly=params.poly)
        bad = 0
        for i, word in enumerate(table):
            want = [int(GF(c) * GF(i)) for c in coeffs]
            if lanes_from_word(word) != want:
                bad += 1
        print(f"[{'PASS' if bad == 0 else 'FAIL'}] {name} table vs galois, mismatches: {bad}")
