"""Event decoding for mailbox logs.

This package provides:
- Event specification system (EventSpec, TopicFieldSpec, DataFieldSpec, EventKind)
- The mailbox registry built from event signatures
- Typed event classes and a strict decoder
"""

from mailboxlogs.decoding.decoder import decode_log, decode_values
from mailboxlogs.decoding.events import (
    DispatchEvent,
    DispatchIdEvent,
    GasPaymentEvent,
    MailboxEvent,
    ProcessEvent,
    ProcessIdEvent,
)
from mailboxlogs.decoding.registry import MAILBOX_REGISTRY, kind_for_topic0, spec_for_kind
from mailboxlogs.decoding.specs import (
    MAILBOX_KINDS,
    TOPIC_LAYOUTS,
    DataFieldSpec,
    EventKind,
    EventRegistry,
    EventSpec,
    TopicFieldSpec,
    TopicLayout,
)

__all__ = [
    "decode_log",
    "decode_values",
    "DispatchEvent",
    "DispatchIdEvent",
    "GasPaymentEvent",
    "MailboxEvent",
    "ProcessEvent",
    "ProcessIdEvent",
    "MAILBOX_REGISTRY",
    "kind_for_topic0",
    "spec_for_kind",
    "MAILBOX_KINDS",
    "TOPIC_LAYOUTS",
    "DataFieldSpec",
    "EventKind",
    "EventRegistry",
    "EventSpec",
    "TopicFieldSpec",
    "TopicLayout",
]
