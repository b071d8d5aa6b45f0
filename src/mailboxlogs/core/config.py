from __future__ import annotations

from dataclasses import dataclass, field

from mailboxlogs.decoding.specs import MAILBOX_KINDS, EventKind


@dataclass(frozen=True)
class QueryConfig:
    """Configuration for one mailbox log query."""

    rpc_url: str
    mailbox_address: str
    # Negative values are relative to the head: -1 is the head itself.
    start_block: int = -1000
    end_block: int = -1
    kinds: tuple[EventKind, ...] = field(default=MAILBOX_KINDS)
    verbose: bool = False
    timeout_s: int = 20
    chain_id: int | None = None  # looked up with eth_chainId when None
