"""Query orchestrator: head lookup → window → fetch → lazy, filtered view.

This module provides two layers:

1) `run_query_use_case(...)`:
   - Pure application-layer use case.
   - Depends ONLY on interfaces (ILogsProvider, IMatchPredicate).
   - Does NOT instantiate the RPC client or manage its lifecycle.

2) `query(...)` (convenience wrapper):
   - Wires the httpx `RPC` client from a `QueryConfig`.
   - Calls `run_query_use_case(...)` and closes the client.

Items are presented in fetch order. A well-behaved provider already returns
logs in ascending chain order; out-of-order input is not re-sorted here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from mailboxlogs.clients.rpc import RPC
from mailboxlogs.core.config import QueryConfig
from mailboxlogs.core.interfaces import ILogsProvider, IMatchPredicate
from mailboxlogs.core.models import BlockRange
from mailboxlogs.decoding.specs import EventKind
from mailboxlogs.orchestration.utils import build_topic_filter
from mailboxlogs.query.block_range import resolve_block_range
from mailboxlogs.query.log_item import MailboxLogItem
from mailboxlogs.query.mailbox import MailboxLog

logger = logging.getLogger(__name__)

# Called with the resolved window and chain id before the logs are fetched.
WindowCallback = Callable[[BlockRange, int], None]


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def item_matches(item: MailboxLogItem, predicate: IMatchPredicate, chain_id: int) -> bool:
    """Apply `predicate` to one item.

    The local chain is the origin of a Dispatch and the destination of a
    Process; other kinds carry neither domain nor addresses.
    """
    kind = item.event_kind()
    if kind is EventKind.DISPATCH:
        origin, destination = chain_id, item.destination_domain()
    elif kind is EventKind.PROCESS:
        origin, destination = item.origin_domain(), chain_id
    else:
        origin = destination = None
    return predicate.matches(
        origin_domain=origin,
        destination_domain=destination,
        sender=item.sender(),
        recipient=item.recipient(),
    )


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class QueryOutput:
    """Result of one query: the resolved window and a lazy view of the logs."""

    block_range: BlockRange
    chain_id: int
    logs: MailboxLog
    predicate: IMatchPredicate

    @property
    def fetched(self) -> int:
        return len(self.logs)

    def items(self) -> Iterator[MailboxLogItem]:
        """Yield matching items in fetch order; restartable."""
        if self.predicate.is_wildcard:
            yield from self.logs
            return
        for item in self.logs:
            if item_matches(item, self.predicate, self.chain_id):
                yield item


# ---------------------------------------------------------------------------
# Use case
# ---------------------------------------------------------------------------


async def run_query_use_case(
    provider: ILogsProvider,
    config: QueryConfig,
    predicate: IMatchPredicate,
    on_window: WindowCallback | None = None,
) -> QueryOutput:
    """Resolve the window, fetch the logs once and wrap them for presentation.

    `on_window` sees the resolved window before the fetch starts. Provider
    failures propagate unchanged; nothing is retried.
    """
    head = await provider.latest_block()
    block_range = resolve_block_range(head, config.start_block, config.end_block)
    chain_id = config.chain_id if config.chain_id is not None else await provider.chain_id()

    logger.debug("Resolved window %d-%d (head %d)", block_range.start, block_range.end, head)
    if on_window is not None:
        on_window(block_range, chain_id)

    records = await provider.get_logs(
        address=config.mailbox_address,
        topics=build_topic_filter(config.kinds, predicate),
        from_block=block_range.start,
        to_block=block_range.end,
    )
    logger.info("Fetched %d logs from %s", len(records), config.mailbox_address)

    return QueryOutput(
        block_range=block_range,
        chain_id=chain_id,
        logs=MailboxLog(records),
        predicate=predicate,
    )


async def query(
    config: QueryConfig,
    predicate: IMatchPredicate,
    on_window: WindowCallback | None = None,
) -> QueryOutput:
    """Run a query against the RPC endpoint in `config`."""
    rpc = RPC(config.rpc_url, timeout_s=config.timeout_s)
    try:
        return await run_query_use_case(rpc, config, predicate, on_window)
    finally:
        await rpc.aclose()
