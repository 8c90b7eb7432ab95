from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final, List, Tuple

from huffcore.errors import UsageError

NUM_SYMBOLS: Final = 256
FILE_CHUNK_SIZE: Final = 256 * 1024


def build_freq_table(data: Iterable[int]) -> List[int]:
    """
    Conta le occorrenze di ogni byte: freq[b] = numero di volte che b compare.
    Accetta bytes, bytearray o qualunque iterabile di int 0..255.
    """
    freq = [0] * NUM_SYMBOLS
    if isinstance(data, (bytes, bytearray, memoryview)):
        for b in data:
            freq[b] += 1
        return freq

    for b in data:
        if b < 0 or b >= NUM_SYMBOLS:
            raise UsageError(f"symbol out of range: {b}")
        freq[b] += 1
    return freq


def build_freq_table_from_file(path: str | Path, *, chunk_size: int = FILE_CHUNK_SIZE) -> List[int]:
    freq = [0] * NUM_SYMBOLS
    with Path(path).open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            for b in chunk:
                freq[b] += 1
    return freq


def used_symbols(freq: List[int]) -> List[int]:
    return [sym for sym, f in enumerate(freq) if f > 0]


def freq_to_used(freq: List[int]) -> List[Tuple[int, int]]:
    return [(i, f) for i, f in enumerate(freq) if f > 0]


def used_to_freq(used: Iterable[Tuple[int, int]]) -> List[int]:
    freq = [0] * NUM_SYMBOLS
    for sym, f in used:
        if sym < 0 or sym >= NUM_SYMBOLS:
            raise UsageError(f"freq_used contains out-of-range symbol: {sym}")
        if f < 0:
            raise UsageError(f"negative frequency for symbol {sym}: {f}")
        freq[sym] = f
    return freq
