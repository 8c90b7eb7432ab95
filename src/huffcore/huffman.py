"""huffcore public facade.

Thin, stable names over the low-level modules in ``huffcore.core``:

    bytes -> build_frequency_table -> build_tree -> build_code_table
          -> encode (bit-string) -> pack (bytes)
    bytes -> unpack (bit-string) -> decode (walks the tree) -> symbols

``compress``/``decompress`` run the whole chain and keep the symbol count
out-of-band in a ``HuffmanPayload``, so zero padding never decodes into
spurious trailing symbols.

Low-level modules must never import this one (see tests/test_arch_boundaries.py).
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import List, Optional, Tuple

from huffcore.core import bitpacking
from huffcore.core.codec_huffman import CodecHuffman, decode_src, encode_src
from huffcore.core.codetable import CodeTable
from huffcore.core.codetable import build_code_table as _build_code_table
from huffcore.core.freqtable import build_freq_table, build_freq_table_from_file
from huffcore.core.htree import HuffmanNode, build_huffman_tree
from huffcore.core.payload import HuffmanPayload

__all__ = [
    "CodeTable",
    "HuffmanNode",
    "HuffmanPayload",
    "build_frequency_table",
    "build_frequency_table_from_file",
    "build_tree",
    "build_code_table",
    "encode",
    "decode",
    "pack",
    "unpack",
    "compress",
    "decompress",
]


def build_frequency_table(data: Iterable[int]) -> List[int]:
    return build_freq_table(data)


def build_frequency_table_from_file(path: str | Path) -> List[int]:
    return build_freq_table_from_file(path)


def build_tree(freq: List[int]) -> HuffmanNode:
    """Raises InsufficientSymbols with fewer than two non-zero entries."""
    return build_huffman_tree(freq)


def build_code_table(tree: HuffmanNode) -> CodeTable:
    return _build_code_table(tree)


def encode(table: CodeTable, symbols: Iterable[int]) -> str:
    return encode_src(table, symbols)


def decode(tree: HuffmanNode, bits: str, n_symbols: Optional[int] = None) -> Tuple[bytes, int]:
    """Return (symbols, count). Incomplete trailing bits are dropped."""
    return decode_src(tree, bits, n_symbols)


def pack(bits: str) -> bytes:
    return bitpacking.pack(bits)


def unpack(data: bytes, byte_count: int) -> str:
    return bitpacking.unpack(data, byte_count)


def compress(data: bytes) -> HuffmanPayload:
    return CodecHuffman().compress_bytes(data)


def decompress(payload: HuffmanPayload) -> bytes:
    return CodecHuffman().decompress_bytes(payload)
