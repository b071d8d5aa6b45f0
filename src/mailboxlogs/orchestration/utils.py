"""Helpers for building server-side topic filters.

The filter is only ever a superset of the predicate: callers always apply the
full predicate to the returned logs.
"""

from __future__ import annotations

from typing import Any

from mailboxlogs.core.interfaces import IMatchPredicate
from mailboxlogs.decoding.registry import topic0s_for_kinds
from mailboxlogs.decoding.specs import TOPIC_LAYOUTS, EventKind
from mailboxlogs.matching import MatchingList


def uint_topic(value: int) -> str:
    """Left-pad an unsigned integer into a 32-byte topic."""
    return "0x" + value.to_bytes(32, "big").hex()


def address_topic(address: str) -> str:
    """Left-pad a 20-byte address into a 32-byte topic."""
    h = address.lower().removeprefix("0x")
    return "0x" + h.rjust(64, "0")


def build_topic_filter(
    kinds: tuple[EventKind, ...],
    predicate: IMatchPredicate | None = None,
) -> list[list[str] | None]:
    """Build an `eth_getLogs` topic filter for `kinds`.

    topic0 always ORs the requested kinds. Slot-level narrowing is only done
    for a single kind with a known topic layout: the same slot means different
    things for Dispatch and Process, so it cannot be shared across kinds.
    """
    topics: list[list[str] | None] = [topic0s_for_kinds(kinds)]
    if len(kinds) != 1 or kinds[0] not in TOPIC_LAYOUTS:
        return topics
    if not isinstance(predicate, MatchingList) or predicate.is_wildcard:
        return topics

    layout = TOPIC_LAYOUTS[kinds[0]]
    domain_field = "origin_domain" if layout.domain_role == "origin" else "destination_domain"
    slots: dict[int, list[str] | None] = {
        layout.sender: _encode(predicate.enumerated("sender_address"), address_topic),
        layout.recipient: _encode(predicate.enumerated("recipient_address"), address_topic),
        layout.domain: _encode(predicate.enumerated(domain_field), uint_topic),
    }
    topics.extend(slots.get(i) for i in range(1, 4))
    while topics[-1] is None:
        topics.pop()
    return topics


def _encode(values: list[Any] | None, encoder: Any) -> list[str] | None:
    return None if values is None else [encoder(v) for v in values]
