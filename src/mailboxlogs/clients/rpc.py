"""Lightweight JSON-RPC client for Ethereum-compatible nodes.

This module provides:
- `RPC`: an async client with sane timeouts/connection limits
- `RpcLog`: pydantic model of one `eth_getLogs` result entry

It returns `RawLogRecord` records ready for the query engine. Transport
failures and malformed responses are raised as `ConnectivityError`, node error
objects as `RpcError`; neither is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mailboxlogs.core.errors import ConnectivityError, RpcError
from mailboxlogs.core.interfaces import TopicFilter
from mailboxlogs.core.models import RawLogRecord

logger = logging.getLogger(__name__)


def to_hex_block(x: int) -> str:
    """Return a 0x-prefixed hex block number."""
    return hex(x)


def _quantity(v: Any) -> int | None:
    if v is None:
        return None
    if isinstance(v, int):
        return v
    s = str(v)
    return int(s, 16) if s.startswith("0x") else int(s)


def _hex_result(operation: str, result: Any) -> int:
    try:
        return int(result, 16)
    except (TypeError, ValueError) as e:
        raise ConnectivityError(operation, f"invalid quantity in response: {result!r}") from e


class RpcLog(BaseModel):
    """One log entry as returned by `eth_getLogs` (pending fields may be null)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    address: str | None = None
    topics: list[str] = Field(default_factory=list)
    data: str = "0x"
    block_number: int | None = Field(default=None, alias="blockNumber")
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    log_index: int | None = Field(default=None, alias="logIndex")

    @field_validator("block_number", "log_index", mode="before")
    @classmethod
    def _hex_quantity(cls, v: Any) -> int | None:
        return _quantity(v)

    def to_record(self) -> RawLogRecord:
        return RawLogRecord(
            topics=tuple(t.lower() for t in self.topics),
            data_hex=self.data or "0x",
            block_number=self.block_number,
            tx_hash=None if self.transaction_hash is None else self.transaction_hash.lower(),
            log_index=self.log_index,
            address=None if self.address is None else self.address.lower(),
        )


class RPC:
    """Minimal async RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (e.g. `httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: int = 20,
        max_connections: int = 8,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=transport is None,
            transport=transport,
        )

    async def _call(self, operation: str, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        logger.debug("%s %s", method, params)
        try:
            r = await self.client.post(self.url, json=payload)
            r.raise_for_status()
            data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ConnectivityError(operation, e) from e
        if not isinstance(data, dict):
            raise ConnectivityError(operation, f"unexpected response body: {data!r}")
        if "error" in data:
            e = data["error"]
            if isinstance(e, dict):
                raise RpcError(operation, e.get("code"), e.get("message"))
            raise RpcError(operation, None, str(e))
        return data.get("result")

    async def latest_block(self) -> int:
        """Return the latest block number as an int."""
        operation = "Failed to retrieve block number"
        return _hex_result(operation, await self._call(operation, "eth_blockNumber", []))

    async def chain_id(self) -> int:
        operation = f"Failed to retrieve chain id for {self.url}"
        return _hex_result(operation, await self._call(operation, "eth_chainId", []))

    async def get_logs(
        self,
        *,
        address: str,
        topics: TopicFilter,
        from_block: int,
        to_block: int,
    ) -> list[RawLogRecord]:
        """Fetch logs for an address and topic filter within an inclusive block range."""
        params = [
            {
                "address": address.lower(),
                "fromBlock": to_hex_block(from_block),
                "toBlock": to_hex_block(to_block),
                "topics": [None if t is None else [x.lower() for x in t] for t in topics],
            }
        ]
        operation = f"Failed to retrieve logs for blocks {from_block}-{to_block}"
        result = await self._call(operation, "eth_getLogs", params)
        try:
            return [RpcLog.model_validate(rl).to_record() for rl in result or []]
        except (ValidationError, TypeError) as e:
            raise ConnectivityError(operation, f"malformed log entry: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
