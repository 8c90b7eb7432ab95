from __future__ import annotations

from pathlib import Path

import pytest

from huffcore.core.freqtable import (
    NUM_SYMBOLS,
    build_freq_table,
    build_freq_table_from_file,
    freq_to_used,
    used_symbols,
    used_to_freq,
)
from huffcore.errors import UsageError

pytestmark = pytest.mark.p0


def test_freq_table_is_dense_and_counts_bytes() -> None:
    freq = build_freq_table(b"abracadabra")
    assert len(freq) == NUM_SYMBOLS == 256
    assert freq[ord("a")] == 5
    assert freq[ord("b")] == 2
    assert freq[ord("r")] == 2
    assert freq[ord("c")] == 1
    assert freq[ord("d")] == 1
    assert sum(freq) == 11
    assert used_symbols(freq) == [ord(c) for c in "abcdr"]


def test_freq_table_empty_input() -> None:
    assert build_freq_table(b"") == [0] * 256
    assert used_symbols(build_freq_table(b"")) == []


def test_freq_table_accepts_int_iterables_and_checks_range() -> None:
    assert build_freq_table([0, 255, 255]) == build_freq_table(b"\x00\xff\xff")
    assert build_freq_table(iter([7, 7]))[7] == 2

    with pytest.raises(UsageError, match="out of range"):
        build_freq_table([1, 256])
    with pytest.raises(UsageError, match="out of range"):
        build_freq_table([-1])


def test_freq_table_from_file_matches_in_memory(tmp_path: Path) -> None:
    data = bytes(range(256)) * 3 + b"\x00" * 1000
    p = tmp_path / "in.bin"
    p.write_bytes(data)

    assert build_freq_table_from_file(p) == build_freq_table(data)
    # chunk piccoli: stesso risultato
    assert build_freq_table_from_file(str(p), chunk_size=7) == build_freq_table(data)


def test_used_pairs_roundtrip_and_validation() -> None:
    freq = build_freq_table(b"hello")
    used = freq_to_used(freq)
    assert used == [(ord("e"), 1), (ord("h"), 1), (ord("l"), 2), (ord("o"), 1)]
    assert used_to_freq(used) == freq

    with pytest.raises(UsageError, match="out-of-range"):
        used_to_freq([(300, 1)])
    with pytest.raises(UsageError, match="negative"):
        used_to_freq([(1, -2)])
