"""Query building blocks: block window resolution, log views and collections."""

from mailboxlogs.query.block_range import resolve_block_range, resolve_negative_block_number
from mailboxlogs.query.log_item import MailboxLogItem, cmp_some_lt_none
from mailboxlogs.query.mailbox import MailboxLog

__all__ = [
    "resolve_block_range",
    "resolve_negative_block_number",
    "MailboxLogItem",
    "cmp_some_lt_none",
    "MailboxLog",
]
