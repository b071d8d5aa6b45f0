"""Dispatched message envelope.

Wire layout (big-endian, packed):

    version     uint8     1 byte
    nonce       uint32    4 bytes
    origin      uint32    4 bytes
    sender      bytes32  32 bytes
    destination uint32    4 bytes
    recipient   bytes32  32 bytes
    body        bytes     remainder

The message id is keccak256 over the re-encoded envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import keccak

from mailboxlogs.core.errors import DecodeError

HEADER_LEN = 77


@dataclass(slots=True, frozen=True)
class HyperlaneMessage:
    version: int
    nonce: int
    origin: int
    sender: bytes  # 32 bytes
    destination: int
    recipient: bytes  # 32 bytes
    body: bytes

    @classmethod
    def from_bytes(cls, raw: bytes) -> HyperlaneMessage:
        """Parse a packed envelope; raise DecodeError if the header is truncated."""
        if len(raw) < HEADER_LEN:
            raise DecodeError(f"message envelope too short: {len(raw)} < {HEADER_LEN} bytes")
        return cls(
            version=raw[0],
            nonce=int.from_bytes(raw[1:5], "big"),
            origin=int.from_bytes(raw[5:9], "big"),
            sender=raw[9:41],
            destination=int.from_bytes(raw[41:45], "big"),
            recipient=raw[45:77],
            body=raw[77:],
        )

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                self.version.to_bytes(1, "big"),
                self.nonce.to_bytes(4, "big"),
                self.origin.to_bytes(4, "big"),
                self.sender,
                self.destination.to_bytes(4, "big"),
                self.recipient,
                self.body,
            )
        )

    @property
    def id(self) -> str:
        """0x-prefixed keccak256 of the encoded envelope."""
        return "0x" + keccak(self.to_bytes()).hex()

