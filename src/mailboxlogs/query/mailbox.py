"""Ordered, replayable collection of mailbox logs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mailboxlogs.core.models import RawLogRecord
from mailboxlogs.query.log_item import MailboxLogItem


class MailboxLog:
    """Owns raw log records in received order and yields views over them.

    Every call to `iter()` returns a fresh generator; nothing is filtered,
    deduplicated or reordered here.
    """

    def __init__(self, logs: Iterable[RawLogRecord]) -> None:
        self.logs: tuple[RawLogRecord, ...] = tuple(logs)

    def iter(self) -> Iterator[MailboxLogItem]:
        return (MailboxLogItem(log) for log in self.logs)

    def __iter__(self) -> Iterator[MailboxLogItem]:
        return self.iter()

    def __len__(self) -> int:
        return len(self.logs)
