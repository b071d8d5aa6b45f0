"""Per-log view that hides the layout differences between mailbox events.

`MailboxLogItem` wraps one `RawLogRecord` and derives everything on demand:
no field is decoded until an accessor asks for it, and nothing is cached.

Decode-backed accessors return `None` when the log is not of a kind that
carries the value and raise `DecodeError` when it is of such a kind but the
record is malformed.

Items compare equal when their transaction hashes are equal, and order by
(block number, log index, transaction hash) with present values before absent
ones, so not-yet-mined logs sort last.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from eth_utils import to_checksum_address

from mailboxlogs.core.errors import DecodeError
from mailboxlogs.core.message import HyperlaneMessage
from mailboxlogs.core.models import RawLogRecord
from mailboxlogs.decoding.decoder import decode_log
from mailboxlogs.decoding.events import (
    DispatchEvent,
    DispatchIdEvent,
    E,
    GasPaymentEvent,
    MailboxEvent,
    ProcessEvent,
    ProcessIdEvent,
)
from mailboxlogs.decoding.registry import kind_for_topic0
from mailboxlogs.decoding.specs import EventKind

T = TypeVar("T")


def _address(hex_value: str) -> str:
    """Checksummed address from the last 20 bytes of an address or bytes32 value."""
    return to_checksum_address("0x" + hex_value[-40:])


def cmp_some_lt_none(a: Any, b: Any) -> int:
    """Three-way compare where any present value sorts before None.

    Two None values compare equal.
    """
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return -1
    return (a > b) - (a < b)


@dataclass(frozen=True, slots=True, eq=False)
class MailboxLogItem:
    """Read-only view over one mailbox log record."""

    log: RawLogRecord

    # ---------- identification ----------

    def event_signature(self) -> str:
        """First topic of the log."""
        if not self.log.topics:
            raise DecodeError("log has no topics")
        return self.log.topics[0]

    def event_kind(self) -> EventKind | None:
        return kind_for_topic0(self.event_signature())

    def event_name(self) -> str:
        """Readable event name, or the raw signature for unknown events."""
        kind = self.event_kind()
        return self.event_signature() if kind is None else kind.label

    # ---------- typed decoding ----------

    def decode_as(self, event_cls: type[E]) -> E | None:
        return decode_log(self.log, event_cls)

    def to_dispatch_event(self) -> DispatchEvent | None:
        return self.decode_as(DispatchEvent)

    def to_dispatch_id_event(self) -> DispatchIdEvent | None:
        return self.decode_as(DispatchIdEvent)

    def to_process_event(self) -> ProcessEvent | None:
        return self.decode_as(ProcessEvent)

    def to_process_id_event(self) -> ProcessIdEvent | None:
        return self.decode_as(ProcessIdEvent)

    def to_gas_pay_event(self) -> GasPaymentEvent | None:
        return self.decode_as(GasPaymentEvent)

    def _first_decoded(self, *attempts: tuple[type[MailboxEvent], Callable[[Any], T]]) -> T | None:
        """Try each (kind, extractor) in order; return the first match."""
        for event_cls, extract in attempts:
            event = self.decode_as(event_cls)
            if event is not None:
                return extract(event)
        return None

    # ---------- derived fields ----------

    def sender(self) -> str | None:
        return self._first_decoded(
            (DispatchEvent, lambda e: _address(e.sender)),
            (ProcessEvent, lambda e: _address(e.sender)),
        )

    def recipient(self) -> str | None:
        return self._first_decoded(
            (DispatchEvent, lambda e: _address(e.recipient)),
            (ProcessEvent, lambda e: _address(e.recipient)),
        )

    def destination_domain(self) -> int | None:
        return self._first_decoded((DispatchEvent, lambda e: e.destination))

    def origin_domain(self) -> int | None:
        return self._first_decoded((ProcessEvent, lambda e: e.origin))

    def hyperlane_message(self) -> HyperlaneMessage | None:
        return self._first_decoded((DispatchEvent, lambda e: HyperlaneMessage.from_bytes(e.message)))

    def message_id(self) -> str | None:
        """Dispatch: hash of the message envelope. DispatchId / ProcessId: the indexed id."""
        return self._first_decoded(
            (DispatchEvent, lambda e: HyperlaneMessage.from_bytes(e.message).id),
            (DispatchIdEvent, lambda e: e.message_id),
            (ProcessIdEvent, lambda e: e.message_id),
        )

    # ---------- pass-through ----------

    def block_number(self) -> int | None:
        return self.log.block_number

    def transaction_hash(self) -> str | None:
        return self.log.tx_hash

    def log_index(self) -> int | None:
        return self.log.log_index

    def data(self) -> bytes:
        return self.log.data

    # ---------- identity & ordering ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MailboxLogItem):
            return NotImplemented
        return self.transaction_hash() == other.transaction_hash()

    def __hash__(self) -> int:
        return hash(self.transaction_hash())

    def compare(self, other: MailboxLogItem) -> int:
        """Chain order: block number, then log index, then transaction hash."""
        c = cmp_some_lt_none(self.block_number(), other.block_number())
        if c == 0:
            c = cmp_some_lt_none(self.log_index(), other.log_index())
        if c == 0:
            c = cmp_some_lt_none(self.transaction_hash(), other.transaction_hash())
        return c

    def __lt__(self, other: MailboxLogItem) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: MailboxLogItem) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: MailboxLogItem) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: MailboxLogItem) -> bool:
        return self.compare(other) >= 0

    def __repr__(self) -> str:
        fields = {
            "event": self.event_name,
            "sender": self.sender,
            "recipient": self.recipient,
            "destination_domain": self.destination_domain,
            "block_number": self.block_number,
            "transaction_hash": self.transaction_hash,
            "log_index": self.log_index,
        }
        parts = [f"{name}={_debug(fn)}" for name, fn in fields.items()]
        parts.append(f"data={self.log.data_hex}")
        return f"MailboxLogItem({', '.join(parts)})"


def _debug(fn: Callable[[], Any]) -> str:
    try:
        return repr(fn())
    except DecodeError as e:
        return f"<DecodeError: {e}>"
