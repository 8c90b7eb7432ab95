from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Tuple

from huffcore.core.bitpacking import pack, packed_size, unpack
from huffcore.core.codec_base import Codec
from huffcore.core.codetable import CodeTable, build_code_table
from huffcore.core.freqtable import NUM_SYMBOLS, build_freq_table, freq_to_used, used_to_freq
from huffcore.core.htree import HuffmanNode, build_huffman_tree, require_htree
from huffcore.core.payload import HuffmanPayload
from huffcore.errors import CorruptPayload, SymbolNotInTable, UsageError


def encode_src(table: CodeTable, symbols: Iterable[int]) -> str:
    """
    symbols -> bit-string: concatenazione, nell'ordine d'ingresso, dei codici.
    """
    parts: list[str] = []
    for pos, sym in enumerate(symbols):
        code = table[sym] if 0 <= sym < NUM_SYMBOLS else None
        if code is None:
            raise SymbolNotInTable(sym, pos)
        parts.append(code)
    return "".join(parts)


def decode_src(root: HuffmanNode, bits: str, n_symbols: Optional[int] = None) -> Tuple[bytes, int]:
    """
    Decodifica bits camminando l'albero: '0' sinistra, '1' destra, a ogni
    foglia emette il simbolo e riparte dalla radice.

    Se bits finisce su un nodo interno, i bit residui (padding di pack) sono
    scartati. Con n_symbols la decodifica si ferma dopo esattamente n_symbols
    simboli; se non ce ne sono abbastanza -> CorruptPayload.
    """
    require_htree(root)
    if n_symbols is not None and n_symbols < 0:
        raise UsageError(f"n_symbols must be non-negative, got {n_symbols}")

    out = bytearray()
    if n_symbols == 0:
        return b"", 0

    node = root
    for i, ch in enumerate(bits):
        if ch == "0":
            node = node.left
        elif ch == "1":
            node = node.right
        else:
            raise CorruptPayload(f"invalid bit character {ch!r} at position {i}")
        if node.is_leaf:
            out.append(node.symbol)
            node = root
            if n_symbols is not None and len(out) == n_symbols:
                break

    if n_symbols is not None and len(out) != n_symbols:
        raise CorruptPayload(f"expected {n_symbols} symbols, decoded {len(out)}")

    return bytes(out), len(out)


def huffman_compress_core(data: bytes) -> HuffmanPayload:
    """
    Core riusabile: data -> (freq, bit-string, bitstream impaccato).
    """
    freq = build_freq_table(data)
    root = build_huffman_tree(freq)
    table = build_code_table(root)
    bits = encode_src(table, data)
    return HuffmanPayload(
        n=len(data),
        freq_used=freq_to_used(freq),
        nbits=len(bits),
        bitstream=pack(bits),
    )


def huffman_decompress_core(payload: HuffmanPayload) -> bytes:
    """
    Core riusabile: payload -> data. L'albero viene ricostruito dalle frequenze.
    """
    if len(payload.bitstream) != packed_size(payload.nbits):
        raise CorruptPayload(
            f"bitstream length {len(payload.bitstream)} does not match nbits={payload.nbits}"
        )
    freq = used_to_freq(payload.freq_used)
    if sum(freq) != payload.n:
        raise CorruptPayload(f"frequencies sum to {sum(freq)}, expected n={payload.n}")

    root = build_huffman_tree(freq)
    bits = unpack(payload.bitstream, len(payload.bitstream))[: payload.nbits]
    data, _ = decode_src(root, bits, payload.n)
    return data


class CodecHuffman(Codec):
    codec_id = "huffman"

    def compress_bytes(self, data: bytes) -> HuffmanPayload:
        return huffman_compress_core(bytes(data))

    def decompress_bytes(self, payload: HuffmanPayload) -> bytes:
        return huffman_decompress_core(payload)
