"""Mailbox event registry.

This module exposes:
- `MAILBOX_REGISTRY` → EventRegistry covering every `EventKind`
- `spec_for_kind(kind)` / `kind_for_topic0(topic0)` lookups
"""

from __future__ import annotations

from mailboxlogs.decoding.registry_builder import make_registry
from mailboxlogs.decoding.specs import EventKind, EventRegistry, EventSpec

MAILBOX_REGISTRY: EventRegistry = make_registry([kind.signature for kind in EventKind])

_SPEC_BY_KIND: dict[EventKind, EventSpec] = {spec.kind: spec for spec in MAILBOX_REGISTRY.values()}


def spec_for_kind(kind: EventKind) -> EventSpec:
    return _SPEC_BY_KIND[kind]


def kind_for_topic0(topic0: str) -> EventKind | None:
    """Resolve the event kind from a signature hash; None when unknown."""
    spec = MAILBOX_REGISTRY.get(topic0.lower())
    return None if spec is None else spec.kind


def topic0s_for_kinds(kinds: tuple[EventKind, ...]) -> list[str]:
    return [spec_for_kind(k).topic0 for k in kinds]
