"""Decoding utilities: ABI word access and typed parsers.

Unlike a lenient scanner, every helper here is strict: a topic or payload that
is too short raises `DecodeError` instead of being zero-padded.
"""

from __future__ import annotations

from typing import Any

from mailboxlogs.core.errors import DecodeError

from .specs import TopicFieldSpec

WORD = 32


def word_at(data: bytes, i: int) -> bytes:
    """Return the i-th 32-byte ABI word; raise DecodeError if out of range."""
    start = WORD * i
    end = start + WORD
    if end > len(data):
        raise DecodeError(f"data too short for word {i}: {len(data)} bytes")
    return data[start:end]


def topic_bytes(topic_hex: str) -> bytes:
    """Return the 32 raw bytes of a 0x-prefixed topic."""
    h = topic_hex[2:] if topic_hex[:2].lower() == "0x" else topic_hex
    try:
        raw = bytes.fromhex(h)
    except ValueError as e:
        raise DecodeError(f"invalid topic hex: {topic_hex!r}") from e
    if len(raw) != WORD:
        raise DecodeError(f"topic must be {WORD} bytes, got {len(raw)}")
    return raw


def _parse_word(word: bytes, typ: str) -> Any:
    if typ == "address":
        return "0x" + word[-20:].hex()
    if typ.startswith("uint"):
        return int.from_bytes(word, "big", signed=False)
    if typ.startswith("int"):
        v = int.from_bytes(word, "big", signed=False)
        bits = int(typ[3:]) if typ != "int" else 256
        if v >= 2 ** (bits - 1):
            v -= 2**bits
        return v
    return "0x" + word.hex()


def parse_topic_field(topic_hex: str, spec: TopicFieldSpec) -> Any:
    """Parse one indexed topic according to the declared type."""
    return _parse_word(topic_bytes(topic_hex), spec.type)


def parse_data_word(word: bytes, typ: str) -> Any:
    """Parse one static ABI word from data according to the declared type."""
    return _parse_word(word, typ)


def read_dynamic_bytes(data: bytes, head_index: int) -> bytes:
    """Read an ABI-encoded `bytes` value whose offset sits in head word `head_index`."""
    offset = int.from_bytes(word_at(data, head_index), "big")
    if offset % WORD:
        raise DecodeError(f"misaligned dynamic offset {offset}")
    length_word = offset // WORD
    length = int.from_bytes(word_at(data, length_word), "big")
    start = offset + WORD
    if start + length > len(data):
        raise DecodeError(f"dynamic bytes truncated: need {length} bytes at {start}, have {len(data) - start}")
    return data[start : start + length]
