from __future__ import annotations

from typing import Final

from huffcore.errors import CorruptPayload, UsageError

BITS_PER_BYTE: Final = 8


def packed_size(nbits: int) -> int:
    return (nbits + BITS_PER_BYTE - 1) // BITS_PER_BYTE


def lastbits(nbits: int) -> int:
    """
    Numero di bit validi nell'ultimo byte (1..8), oppure 0 se non ci sono bit.
    """
    if nbits == 0:
        return 0
    rem = nbits % BITS_PER_BYTE
    return rem if rem else BITS_PER_BYTE


def pack(bits: str) -> bytes:
    """
    Bit-string ASCII ('0'/'1') -> bytes, MSB-first.
    L'ultimo byte parziale viene allineato a sinistra e riempito di zeri.
    """
    out_bytes = bytearray()
    current_byte = 0
    bit_count = 0

    for i, ch in enumerate(bits):
        if ch == "1":
            current_byte = (current_byte << 1) | 1
        elif ch == "0":
            current_byte <<= 1
        else:
            raise CorruptPayload(f"invalid bit character {ch!r} at position {i}")
        bit_count += 1
        if bit_count == BITS_PER_BYTE:
            out_bytes.append(current_byte)
            current_byte = 0
            bit_count = 0

    if bit_count > 0:
        current_byte <<= BITS_PER_BYTE - bit_count
        out_bytes.append(current_byte)

    return bytes(out_bytes)


def unpack(data: bytes, byte_count: int) -> str:
    """
    Espande i primi byte_count byte in byte_count * 8 caratteri '0'/'1'.
    La lunghezza originale (senza padding) va tracciata dal chiamante.
    """
    if byte_count < 0:
        raise UsageError(f"byte_count must be non-negative, got {byte_count}")
    if byte_count > len(data):
        raise CorruptPayload(f"bytes truncated: need {byte_count}, got {len(data)}")
    return "".join(f"{b:08b}" for b in data[:byte_count])
