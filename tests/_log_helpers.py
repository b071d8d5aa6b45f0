"""Builders for synthetic mailbox log records."""

from __future__ import annotations

from mailboxlogs.core.message import HyperlaneMessage
from mailboxlogs.core.models import RawLogRecord
from mailboxlogs.decoding.registry import spec_for_kind
from mailboxlogs.decoding.specs import EventKind
from mailboxlogs.orchestration.utils import address_topic, uint_topic

SENDER = "0x05047e42f75eaff3f6c7a347930f778fb41c5dd0"
RECIPIENT = "0x36fda966cffff8a9cdc814f546db0e6378bfef35"
TX_A = "0x" + "aa" * 32
TX_B = "0x" + "bb" * 32
UNKNOWN_T0 = "0x" + "12" * 32


def topic0(kind: EventKind) -> str:
    return spec_for_kind(kind).topic0


def abi_bytes(payload: bytes) -> bytes:
    """ABI-encode a single dynamic `bytes` argument."""
    padded = payload + b"\x00" * (-len(payload) % 32)
    return (32).to_bytes(32, "big") + len(payload).to_bytes(32, "big") + padded


def make_message(origin: int = 11155111, destination: int = 80001, body: bytes = b"hello") -> HyperlaneMessage:
    return HyperlaneMessage(
        version=3,
        nonce=7,
        origin=origin,
        sender=bytes.fromhex(address_topic(SENDER)[2:]),
        destination=destination,
        recipient=bytes.fromhex(address_topic(RECIPIENT)[2:]),
        body=body,
    )


def dispatch_log(
    *,
    message: HyperlaneMessage | None = None,
    block_number: int | None = 10,
    log_index: int | None = 0,
    tx_hash: str | None = TX_A,
) -> RawLogRecord:
    message = message or make_message()
    return RawLogRecord(
        topics=(
            topic0(EventKind.DISPATCH),
            address_topic(SENDER),
            uint_topic(message.destination),
            address_topic(RECIPIENT),
        ),
        data_hex="0x" + abi_bytes(message.to_bytes()).hex(),
        block_number=block_number,
        tx_hash=tx_hash,
        log_index=log_index,
    )


def process_log(
    *,
    origin: int = 11155111,
    block_number: int | None = 10,
    log_index: int | None = 1,
    tx_hash: str | None = TX_A,
) -> RawLogRecord:
    return RawLogRecord(
        topics=(
            topic0(EventKind.PROCESS),
            uint_topic(origin),
            address_topic(SENDER),
            address_topic(RECIPIENT),
        ),
        block_number=block_number,
        tx_hash=tx_hash,
        log_index=log_index,
    )


def id_log(kind: EventKind, message_id: str, **kw) -> RawLogRecord:
    return RawLogRecord(topics=(topic0(kind), message_id), **kw)


def unknown_log(
    *,
    block_number: int | None = None,
    log_index: int | None = None,
    tx_hash: str | None = TX_B,
) -> RawLogRecord:
    return RawLogRecord(
        topics=(UNKNOWN_T0,),
        data_hex="0x" + "00" * 32,
        block_number=block_number,
        tx_hash=tx_hash,
        log_index=log_index,
    )
