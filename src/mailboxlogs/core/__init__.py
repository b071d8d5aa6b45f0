"""Core data models, configuration, errors and interfaces.

This package provides:
- Data models (RawLogRecord, BlockRange, HyperlaneMessage)
- Configuration (QueryConfig)
- Error taxonomy (ConnectivityError, RpcError, DecodeError)
"""

from mailboxlogs.core.errors import ConnectivityError, DecodeError, MailboxLogsError, RpcError
from mailboxlogs.core.message import HyperlaneMessage
from mailboxlogs.core.models import BlockRange, RawLogRecord
from mailboxlogs.core.config import QueryConfig

__all__ = [
    "ConnectivityError",
    "DecodeError",
    "MailboxLogsError",
    "RpcError",
    "HyperlaneMessage",
    "BlockRange",
    "RawLogRecord",
    "QueryConfig",
]
