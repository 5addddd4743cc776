# kfsr/model/helpers.py
# common helper functions used across multiple modules of the model
# provides 32-bit word / byte lane utilities and export packing

from typing import Iterable, List, Sequence

import numpy as np

WORD_MASK = 0xFFFFFFFF
BYTE_MASK = 0xFF


def top_byte(word: int) -> int:
    # bits 31..24, never sign-extended
    return (word & WORD_MASK) >> 24


def byte_lane(word: int, lane: int) -> int:
    # lane 0 = least significant byte
    return (word >> (8 * lane)) & BYTE_MASK


def word_from_lanes(lanes: Sequence[int]) -> int:
    word = 0
    for j, b in enumerate(lanes):
        word |= (b & BYTE_MASK) << (8 * j)
    return word


def lanes_from_word(word: int, count: int = 4) -> List[int]:
    return [byte_lane(word, j) for j in range(count)]


def check_word(word: int, name: str = "word") -> int:
    if not isinstance(word, (int, np.integer)) or not 0 <= int(word) <= WORD_MASK:
        raise ValueError(f"{name} must be a 32-bit unsigned value, got {word!r}")
    return int(word)


def pack_words_le_bytes(words: Iterable[int]) -> bytes:
    # pack 32-bit words to little-endian bytes for file/ROM init
    arr = np.asarray(list(words), dtype=np.uint32)
    return arr.astype('<u4', copy=False).tobytes()



def hex_words(words: Iterable[int], sep: str = " ") -> str:
    return sep.join(f"{w:08X}" for w in words)
