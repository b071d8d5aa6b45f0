"""Core data models.

This module defines:
- `RawLogRecord`: one on-chain log entry as handed to the query engine.
- `BlockRange`: an absolute, inclusive, head-clamped block window.

Design notes
------------
- Hex strings are stored lowercased with a 0x prefix.
- `block_number`, `tx_hash` and `log_index` are optional: a log that is not yet
  part of a finalized block may lack them.
"""

from __future__ import annotations

from dataclasses import dataclass

# === RPC record ===


@dataclass(slots=True, frozen=True)
class RawLogRecord:
    """Raw log as fetched from RPC, minimally normalized."""

    topics: tuple[str, ...]  # lowercased 0x...; topics[0] is the event signature
    data_hex: str = "0x"
    block_number: int | None = None
    tx_hash: str | None = None  # lowercased 0x...
    log_index: int | None = None
    address: str | None = None  # emitter, lowercased 0x...

    @property
    def data(self) -> bytes:
        """Payload bytes decoded from `data_hex`; ValueError on malformed hex."""
        h = self.data_hex[2:] if self.data_hex[:2].lower() == "0x" else self.data_hex
        return bytes.fromhex(h)


# === Block window ===


@dataclass(slots=True, frozen=True)
class BlockRange:
    """Inclusive block interval with `start <= end`."""

    start: int
    end: int

    def span(self) -> int:
        return self.end - self.start + 1
