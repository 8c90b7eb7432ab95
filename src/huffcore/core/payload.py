from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from huffcore.core.bitpacking import lastbits


@dataclass(frozen=True)
class HuffmanPayload:
    n: int                             # numero di simboli originali
    freq_used: List[Tuple[int, int]]   # (sym, freq) solo per freq > 0
    nbits: int                         # bit significativi nel bitstream
    bitstream: bytes                   # MSB-first, ultimo byte con padding a zero

    @property
    def lastbits(self) -> int:
        return lastbits(self.nbits)
