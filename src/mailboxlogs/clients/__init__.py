"""Chain clients."""

from mailboxlogs.clients.rpc import RPC, RpcLog

__all__ = ["RPC", "RpcLog"]
