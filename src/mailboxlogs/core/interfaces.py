from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from mailboxlogs.core.models import RawLogRecord

# A topic filter position is either a list of accepted values (OR) or None (any).
TopicFilter = Sequence[Sequence[str] | None]


# ---------------------------------------------------------------------------
# ILogsProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogsProvider(Protocol):
    """
    Abstract provider of chain state and logs.

    Domain expectations:
    - It returns RawLogRecord objects already mapped into internal models.
    - Failures surface as ConnectivityError (or RpcError) naming the call.
    - It never retries; retry is a caller concern.
    """

    async def latest_block(self) -> int:
        """Return the current chain head height."""
        ...

    async def chain_id(self) -> int:
        """Return the chain identifier, used as the local domain id."""
        ...

    async def get_logs(
        self,
        *,
        address: str,
        topics: TopicFilter,
        from_block: int,
        to_block: int,
    ) -> list[RawLogRecord]:
        """
        Return logs emitted by `address` over the inclusive block range.

        The topic filter may be a superset of what the caller wants; callers
        still apply their own predicate to the result.
        """
        ...


# ---------------------------------------------------------------------------
# IMatchPredicate
# ---------------------------------------------------------------------------

@runtime_checkable
class IMatchPredicate(Protocol):
    """
    Opaque match criteria for message logs.

    Any field may be None when the log does not carry it.
    """

    @property
    def is_wildcard(self) -> bool:
        """True when every log matches, so filtering can be skipped."""
        ...

    def matches(
        self,
        *,
        origin_domain: int | None,
        destination_domain: int | None,
        sender: str | None,
        recipient: str | None,
    ) -> bool:
        ...
