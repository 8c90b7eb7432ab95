from __future__ import annotations

import dataclasses
import random

import pytest

from huffcore.core.bitpacking import pack, unpack
from huffcore.core.codec_huffman import CodecHuffman, decode_src, encode_src
from huffcore.core.codetable import build_code_table
from huffcore.core.freqtable import build_freq_table
from huffcore.core.htree import HuffmanNode, build_huffman_tree
from huffcore.errors import CorruptPayload, InsufficientSymbols, InvalidTree, SymbolNotInTable, UsageError

pytestmark = pytest.mark.p0

ABRA = b"abracadabra"
ABRA_BITS = "01101110100010101101110"
ABRA_PACKED_HEX = "6e8adc"


def _setup(data: bytes) -> tuple[HuffmanNode, list[str | None]]:
    tree = build_huffman_tree(build_freq_table(data))
    return tree, build_code_table(tree)


# -------------------
# Encoder
# -------------------
def test_encode_golden_vector() -> None:
    _, table = _setup(ABRA)
    bits = encode_src(table, ABRA)
    assert bits == ABRA_BITS
    assert len(bits) == sum(len(table[b]) for b in ABRA)
    assert pack(bits).hex() == ABRA_PACKED_HEX


def test_encode_empty_sequence() -> None:
    _, table = _setup(ABRA)
    assert encode_src(table, b"") == ""


def test_encode_symbol_not_in_table() -> None:
    _, table = _setup(ABRA)
    with pytest.raises(SymbolNotInTable) as ei:
        encode_src(table, b"abz")
    assert ei.value.symbol == ord("z")
    assert ei.value.position == 2

    with pytest.raises(SymbolNotInTable):
        encode_src(table, [-1])
    with pytest.raises(SymbolNotInTable):
        encode_src(table, [999])


# -------------------
# Decoder
# -------------------
def test_decode_golden_vector() -> None:
    tree, _ = _setup(ABRA)
    assert decode_src(tree, ABRA_BITS) == (ABRA, 11)


def test_decode_drops_incomplete_trailing_bits() -> None:
    tree, _ = _setup(ABRA)
    # "0" -> a, poi "11" si ferma su un nodo interno
    assert decode_src(tree, "011") == (b"a", 1)
    assert decode_src(tree, "") == (b"", 0)
    assert decode_src(tree, "1") == (b"", 0)


def test_decode_after_unpack_sees_padding() -> None:
    tree, _ = _setup(ABRA)
    bits = unpack(bytes.fromhex(ABRA_PACKED_HEX), 3)
    # il bit di padding '0' coincide con il codice di 'a'
    assert decode_src(tree, bits) == (ABRA + b"a", 12)
    assert decode_src(tree, bits, n_symbols=11) == (ABRA, 11)


def test_decode_n_symbols_limits() -> None:
    tree, _ = _setup(ABRA)
    assert decode_src(tree, ABRA_BITS, n_symbols=0) == (b"", 0)
    assert decode_src(tree, ABRA_BITS, n_symbols=4) == (b"abra", 4)
    with pytest.raises(CorruptPayload, match="expected 12 symbols, decoded 11"):
        decode_src(tree, ABRA_BITS, n_symbols=12)
    with pytest.raises(UsageError):
        decode_src(tree, ABRA_BITS, n_symbols=-1)


def test_decode_rejects_bad_input() -> None:
    tree, _ = _setup(ABRA)
    with pytest.raises(CorruptPayload, match="invalid bit character"):
        decode_src(tree, "01 1")
    with pytest.raises(InvalidTree):
        decode_src(HuffmanNode(freq=2, left=HuffmanNode(freq=2, symbol=1)), "0")


def test_decode_is_repeatable_against_same_tree() -> None:
    tree, table = _setup(b"mississippi")
    bits = encode_src(table, b"mississippi")
    assert decode_src(tree, bits) == decode_src(tree, bits) == (b"mississippi", 11)


def test_symbol_roundtrip_random() -> None:
    rng = random.Random(122)
    for _ in range(40):
        k = rng.randint(2, 256)
        data = bytes(rng.randrange(k) for _ in range(rng.randint(2, 5000)))
        if len(set(data)) < 2:
            continue
        tree, table = _setup(data)
        assert decode_src(tree, encode_src(table, data)) == (data, len(data))


# -------------------
# CodecHuffman
# -------------------
def test_codec_payload_fields() -> None:
    payload = CodecHuffman().compress_bytes(ABRA)
    assert payload.n == 11
    assert payload.nbits == 23
    assert payload.lastbits == 7
    assert payload.bitstream.hex() == ABRA_PACKED_HEX
    assert payload.freq_used == [(97, 5), (98, 2), (99, 1), (100, 1), (114, 2)]


def test_codec_roundtrip_exact_length() -> None:
    codec = CodecHuffman()
    rng = random.Random(99)
    samples = [ABRA, b"AABABBB", bytes(range(256)) * 4, b"\x00\xff" * 1000]
    samples += [rng.randbytes(rng.randint(2, 3000)) for _ in range(10)]
    for data in samples:
        assert codec.decompress_bytes(codec.compress_bytes(data)) == data


def test_codec_needs_two_symbols() -> None:
    with pytest.raises(InsufficientSymbols):
        CodecHuffman().compress_bytes(b"aaaa")
    with pytest.raises(InsufficientSymbols):
        CodecHuffman().compress_bytes(b"")


def test_codec_detects_inconsistent_payload() -> None:
    codec = CodecHuffman()
    payload = codec.compress_bytes(ABRA)

    with pytest.raises(CorruptPayload, match="bitstream length"):
        codec.decompress_bytes(dataclasses.replace(payload, bitstream=payload.bitstream[:-1]))
    with pytest.raises(CorruptPayload, match="frequencies sum"):
        codec.decompress_bytes(dataclasses.replace(payload, n=12))
    with pytest.raises(CorruptPayload, match="expected 11 symbols"):
        codec.decompress_bytes(dataclasses.replace(payload, nbits=16, bitstream=payload.bitstream[:2]))
