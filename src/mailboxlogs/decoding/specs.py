"""Event specification primitives and the mailbox event kinds.

Defines lightweight dataclasses to describe how to decode events:
- `TopicFieldSpec` / `DataFieldSpec`: typed sources for indexed topics / data words
- `EventSpec`: one event rule (topic0, name, fields)
- `EventRegistry`: mapping from topic0 → EventSpec
- `EventKind`: the closed set of events emitted by the mailbox and paymaster
- `TOPIC_LAYOUTS`: per-kind topic slot of sender, recipient and domain
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class EventKind(Enum):
    DISPATCH = "Dispatch"
    DISPATCH_ID = "DispatchId"
    PROCESS = "Process"
    PROCESS_ID = "ProcessId"
    GAS_PAYMENT = "GasPayment"

    @property
    def signature(self) -> str:
        """Solidity event signature (with `indexed` markers)."""
        return EVENT_SIGNATURES[self]

    @property
    def label(self) -> str:
        """Human-readable name used in output."""
        return EVENT_LABELS[self]


EVENT_SIGNATURES: dict[EventKind, str] = {
    EventKind.DISPATCH: "Dispatch(address indexed sender, uint32 indexed destination, bytes32 indexed recipient, bytes message)",
    EventKind.DISPATCH_ID: "DispatchId(bytes32 indexed messageId)",
    EventKind.PROCESS: "Process(uint32 indexed origin, bytes32 indexed sender, address indexed recipient)",
    EventKind.PROCESS_ID: "ProcessId(bytes32 indexed messageId)",
    EventKind.GAS_PAYMENT: "GasPayment(bytes32 indexed messageId, uint256 gasAmount, uint256 payment)",
}

EVENT_LABELS: dict[EventKind, str] = {
    EventKind.DISPATCH: "Dispatch",
    EventKind.DISPATCH_ID: "Dispatch ID",
    EventKind.PROCESS: "Process",
    EventKind.PROCESS_ID: "Process ID",
    EventKind.GAS_PAYMENT: "Gas Payment",
}

# Events emitted by the mailbox contract itself (GasPayment comes from the paymaster).
MAILBOX_KINDS: tuple[EventKind, ...] = (
    EventKind.DISPATCH,
    EventKind.DISPATCH_ID,
    EventKind.PROCESS,
    EventKind.PROCESS_ID,
)


# ---- Topic slot table ----


@dataclass(frozen=True)
class TopicLayout:
    """Topic slots of the sender, recipient and domain for one event kind.

    `domain_role` says which side of the message the domain slot describes:
    Dispatch carries the destination, Process carries the origin.
    """

    sender: int
    recipient: int
    domain: int
    domain_role: Literal["origin", "destination"]


TOPIC_LAYOUTS: dict[EventKind, TopicLayout] = {
    EventKind.DISPATCH: TopicLayout(sender=1, recipient=3, domain=2, domain_role="destination"),
    EventKind.PROCESS: TopicLayout(sender=2, recipient=3, domain=1, domain_role="origin"),
}


# ---- Field specs ----


@dataclass(frozen=True)
class TopicFieldSpec:
    """Describe one indexed topic field (by 0-based topic index and ABI type)."""

    name: str
    index: int
    type: str  # e.g., "address", "uint32", "bytes32"


@dataclass(frozen=True)
class DataFieldSpec:
    """Describe one head word in the data section (0-based word index).

    For dynamic types (`bytes`) the head word holds the offset of the tail.
    """

    name: str
    word_index: int
    type: str  # e.g., "uint256", "bytes"


@dataclass(frozen=True)
class EventSpec:
    """One event decoding rule."""

    topic0: str
    name: str
    topic_fields: list[TopicFieldSpec]
    data_fields: list[DataFieldSpec]

    @property
    def kind(self) -> EventKind:
        return EventKind(self.name)

    @property
    def topic_count(self) -> int:
        """Number of topics a well-formed log of this event carries."""
        return 1 + len(self.topic_fields)


# The full registry keyed by topic0 (lowercased 0x-hex).
EventRegistry = dict[str, EventSpec]

