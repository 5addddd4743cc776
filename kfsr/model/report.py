# kfsr/model/report.py
# text rendering of the FSR-A model state
# the model itself never prints; everything user-visible goes through Reporter

import sys
from typing import Optional, Sequence, TextIO

from kfsr.model.fsr_a import FsrSnapshot

HORIZONTAL_LINE = "*" * 50
TABLE_WORDS_PER_LINE = 7


class Reporter:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        enabled: bool = True,
        show_coefficients: bool = False,
        show_table: bool = True,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.enabled = enabled
        self.show_coefficients = show_coefficients and enabled
        self.show_table = show_table and enabled

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")

    def coefficients(self, exponents: Sequence[int], coefficients: Sequence[int], name: str = "beta") -> None:
        if not self.show_coefficients:
            return
        for e, c in zip(exponents, coefficients):
            self._write(f"{name}^{e} = {c:02X}")

    def table(self, table: Sequence[int], name: str = "alpha_0") -> None:
        if not self.show_table:
            return
        self._write(f"{name}[{len(table)}]={{")
        last = len(table) - 1
        line = ""
        for i, word in enumerate(table):
            line += f"0x{word:08X}" + ("," if i < last else "")
            if (i + 1) % TABLE_WORDS_PER_LINE == 0:
                self._write(line)
                line = ""
        self._write(line + "};")

    def snapshot(self, snap: FsrSnapshot) -> None:
        if not self.enabled:
            return
        self._write(HORIZONTAL_LINE)
        self._write(f"loop:{snap.step:2d}")
        for i, w in enumerate(snap.words):
            self._write(f"FSR-A[{i}]:{w:08X}")

    def close(self) -> None:
        if self.enabled:
            self._write(HORIZONTAL_LINE)
