from __future__ import annotations

from abc import ABC, abstractmethod

from huffcore.core.payload import HuffmanPayload


class Codec(ABC):
    """
    Interfaccia minima per codec di entropia su byte.

    compress_bytes produce un HuffmanPayload in memoria (nessun formato su
    disco); decompress_bytes ne è l'inversa esatta.
    """

    codec_id: str

    @abstractmethod
    def compress_bytes(self, data: bytes) -> HuffmanPayload:
        raise NotImplementedError

    @abstractmethod
    def decompress_bytes(self, payload: HuffmanPayload) -> bytes:
        raise NotImplementedError
