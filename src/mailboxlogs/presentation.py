"""Text rendering of mailbox log items."""

from __future__ import annotations

from typing import Any

from mailboxlogs.core.domains import describe_domain
from mailboxlogs.query.log_item import MailboxLogItem


def option_display(value: Any) -> str:
    return "None" if value is None else str(value)


def first_line(item: MailboxLogItem) -> str:
    """E.g. `Dispatch in block 10 to: 80001 Mumbai`."""
    head = f"{item.event_name()} in block {option_display(item.block_number())}"
    destination = item.destination_domain()
    if destination is not None:
        return head + describe_domain(" to", destination)
    origin = item.origin_domain()
    if origin is not None:
        return head + describe_domain(" from", origin)
    return head + ":"


def format_log_item(item: MailboxLogItem, verbose: bool = False) -> list[str]:
    """Descriptive lines for one item; the raw record first when verbose."""
    lines: list[str] = []
    if verbose:
        lines.append(repr(item.log))
    lines.append(first_line(item))
    lines.append(f"  Tx hash  : {option_display(item.transaction_hash())}")
    sender = item.sender()
    if sender is not None:
        lines.append(f"  Sender   : {sender}")
    recipient = item.recipient()
    if recipient is not None:
        lines.append(f"  Recipient: {recipient}")
    message_id = item.message_id()
    if message_id is not None:
        lines.append(f"  ID       : {message_id}")
    return lines
