from __future__ import annotations

from .core.config import QueryConfig
from .core.errors import ConnectivityError, DecodeError, MailboxLogsError, RpcError
from .core.models import BlockRange, RawLogRecord
from .decoding.specs import EventKind
from .matching import MatchingList, MatchItem
from .orchestration.orchestrator import QueryOutput, query, run_query_use_case
from .query.block_range import resolve_block_range
from .query.log_item import MailboxLogItem
from .query.mailbox import MailboxLog

__all__ = [
    "QueryConfig",
    "ConnectivityError",
    "DecodeError",
    "MailboxLogsError",
    "RpcError",
    "BlockRange",
    "RawLogRecord",
    "EventKind",
    "MatchingList",
    "MatchItem",
    "QueryOutput",
    "query",
    "run_query_use_case",
    "resolve_block_range",
    "MailboxLogItem",
    "MailboxLog",
]
