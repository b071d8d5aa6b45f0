"""Error taxonomy for mailbox log queries.

- `ConnectivityError`: a chain call (head lookup, log fetch) failed or returned
  a malformed response. Fatal to the current query, never retried here.
- `RpcError`: the node answered with a JSON-RPC error object.
- `DecodeError`: a log carries the right event signature but its topics or
  payload are malformed. A log of a *different* kind is not an error; decoders
  return None for it.
"""

from __future__ import annotations


class MailboxLogsError(Exception):
    """Base class for all errors raised by this package."""


class ConnectivityError(MailboxLogsError):
    """A chain call failed; `operation` names which one."""

    def __init__(self, operation: str, cause: BaseException | str) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")


class RpcError(ConnectivityError):
    """JSON-RPC error object returned by the node."""

    def __init__(self, operation: str, code: int | None, message: str | None) -> None:
        self.code = code
        self.message = message
        super().__init__(operation, f"RPC error: {code} {message}")


class DecodeError(MailboxLogsError):
    """Right event kind, structurally invalid record."""
