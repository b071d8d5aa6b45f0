"""Resolve relative block markers against the chain head.

A non-negative marker is an absolute block number. A negative marker `-n`
means `n - 1` blocks before the head, so `-1` is the head itself and `-1000`
covers the last 1000 blocks including the head.

Out-of-range markers never raise: the end is clamped to the head and the start
to the end, so the result always satisfies `start <= end <= head`.
"""

from __future__ import annotations

from mailboxlogs.core.models import BlockRange


def resolve_negative_block_number(head: int, raw: int) -> int:
    """Turn one raw marker into an absolute (unclamped) block number."""
    if raw < 0:
        return max(0, head + 1 + raw)
    return raw


def resolve_block_range(head: int, start_raw: int, end_raw: int) -> BlockRange:
    end = min(head, resolve_negative_block_number(head, end_raw))
    start = min(end, resolve_negative_block_number(head, start_raw))
    return BlockRange(start=start, end=end)
