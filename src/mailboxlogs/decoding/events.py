"""Typed mailbox and paymaster events.

Each class is bound to one `EventKind` and built from the decoded field values
of its event signature (camelCase ABI names map to snake_case attributes).
Addresses are lowercased 0x hex; bytes32 values are 0x hex of 32 bytes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from mailboxlogs.decoding.specs import EventKind

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL.sub("_", name).lower()


E = TypeVar("E", bound="MailboxEvent")


@dataclass(slots=True, frozen=True)
class MailboxEvent:
    kind: ClassVar[EventKind]

    @classmethod
    def from_values(cls: type[E], values: dict[str, Any]) -> E:
        return cls(**{_snake(k): v for k, v in values.items()})


@dataclass(slots=True, frozen=True)
class DispatchEvent(MailboxEvent):
    kind: ClassVar[EventKind] = EventKind.DISPATCH

    sender: str  # address
    destination: int
    recipient: str  # bytes32
    message: bytes


@dataclass(slots=True, frozen=True)
class DispatchIdEvent(MailboxEvent):
    kind: ClassVar[EventKind] = EventKind.DISPATCH_ID

    message_id: str


@dataclass(slots=True, frozen=True)
class ProcessEvent(MailboxEvent):
    kind: ClassVar[EventKind] = EventKind.PROCESS

    origin: int
    sender: str  # bytes32
    recipient: str  # address


@dataclass(slots=True, frozen=True)
class ProcessIdEvent(MailboxEvent):
    kind: ClassVar[EventKind] = EventKind.PROCESS_ID

    message_id: str


@dataclass(slots=True, frozen=True)
class GasPaymentEvent(MailboxEvent):
    kind: ClassVar[EventKind] = EventKind.GAS_PAYMENT

    message_id: str
    gas_amount: int
    payment: int
