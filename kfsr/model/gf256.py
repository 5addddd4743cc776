# kfsr/model/gf256.py
# GF(2^8) arithmetic for the FSR-A golden model
# Field: beta(x) = x^8 + x^7 + x^6 + x + 1 -> 0x1C3
# elements are ints 0..255, bit i = coefficient of x^i
# addition is XOR, multiplication is shift-and-add with reduction on x^8

# 0b1_1100_0011 = 0x1C3

# field parameters
GF_DEGREE = 8                   # num of bits per element
GF_SIZE = 1 << GF_DEGREE        # 256 elements
GF_MASK = GF_SIZE - 1
BETA_POLY = 0x1C3               # x^8 + x^7 + x^6 + x + 1

PICK1 = 0x001                   # parity bit
PICK8 = 1 << GF_DEGREE          # detects the x^8 term


def parity8(x: int) -> int:
    # 1 if an odd number of bits is set in the low byte of x
    p = x & 0xFF
    p ^= p >> 4
    p ^= p >> 2
    p ^= p >> 1
    return p & PICK1


def parity32(x: int) -> int:
    p = x & 0xFFFFFFFF
    p ^= p >> 16
    p ^= p >> 8
    p ^= p >> 4
    p ^= p >> 2
    p ^= p >> 1
    return p & PICK1


def gf_mul(a: int, b: int, poly: int = BETA_POLY) -> int:
    # scan b from its most significant set bit down to bit 0:
    # t = t*x + (b_i ? a : 0), reduce as soon as x^8 shows up
    # only bits 7..0 of either operand take part
    a, b = int(a) & GF_MASK, int(b) & GF_MASK
    if b == 0:
        return 0
    t = 0
    for i in range(b.bit_length() - 1, -1, -1):
        t = (t << 1) ^ (a if (b >> i) & 1 else 0)
        if t & PICK8:
            t ^= poly
    return t & GF_MASK


def gf_pow_x(exponent: int, poly: int = BETA_POLY) -> int:
    # x^exponent mod poly, by doubling the element 1 'exponent' times.
    # reduce with poly | 1 when v ^ poly has even parity, poly otherwise;
    # only matters for even polys, for 0x1C3 it is a no-op
    v = 1
    for _ in range(exponent):
        v <<= 1
        if v & PICK8:
            v ^= poly | (0 if parity8(v ^ poly) else PICK1)
    return v & GF_MASK


if __name__ == "__main__":
    import galois  # pip install galois
    import numpy as np

    GF = galois.GF(2**GF_DEGREE, irreducible_poly=BETA_POLY)
    print("[info] galois oracle configured (irreducible_poly=0x%X)" % BETA_POLY)

    elems = np.arange(GF_SIZE)
    ref = (GF(elems)[:, None] * GF(elems)[None, :]).view(np.ndarray)

    bad = 0
    for a in range(GF_SIZE):
        for b in range(GF_SIZE):
            if gf_mul(a, b) != ref[a, b]:
                bad += 1
                if bad < 10:
                    print(f"[FAIL] {a:02X} * {b:02X}: ours={gf_mul(a, b):02X}, ref={int(ref[a, b]):02X}")
    print(f"[{'PASS' if bad == 0 else 'FAIL'}] gf_mul vs galois, mismatches: {bad}")

    alpha = GF(2)
    for e in (71, 12, 3, 24):
        ours = gf_pow_x(e)
        want = int(alpha ** e)
        print(f"[{'PASS' if ours == want else 'FAIL'}] x^{e} = {ours:02X} (ref {want:02X})")
