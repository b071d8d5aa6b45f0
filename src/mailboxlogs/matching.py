"""Structured match criteria for message logs.

A `MatchingList` holds `MatchItem`s and matches a log when any item does. An
item matches when every field is either a wildcard (None) or lists the log's
value. An empty or absent list matches everything.

JSON form (outer list optional, scalars accepted for single values):

    [{"origin_domain": [11155111, 80001], "sender_address": "0x5047...",
      "destination_domain": 80001, "recipient_address": "0x36fd..."}]
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, field_validator


def _as_list(v: Any) -> Any:
    if v is None or v == "*":
        return None
    return v if isinstance(v, list) else [v]


class MatchItem(BaseModel):
    origin_domain: list[int] | None = None
    sender_address: list[str] | None = None
    destination_domain: list[int] | None = None
    recipient_address: list[str] | None = None

    @field_validator("origin_domain", "destination_domain", mode="before")
    @classmethod
    def _domains(cls, v: Any) -> Any:
        return _as_list(v)

    @field_validator("sender_address", "recipient_address", mode="before")
    @classmethod
    def _addresses(cls, v: Any) -> Any:
        v = _as_list(v)
        return None if v is None else [str(a).lower() for a in v]

    @property
    def is_wildcard(self) -> bool:
        return all(
            f is None
            for f in (self.origin_domain, self.sender_address, self.destination_domain, self.recipient_address)
        )

    def matches(
        self,
        *,
        origin_domain: int | None,
        destination_domain: int | None,
        sender: str | None,
        recipient: str | None,
    ) -> bool:
        return (
            _field_matches(self.origin_domain, origin_domain)
            and _field_matches(self.destination_domain, destination_domain)
            and _field_matches(self.sender_address, None if sender is None else sender.lower())
            and _field_matches(self.recipient_address, None if recipient is None else recipient.lower())
        )


def _field_matches(allowed: list[Any] | None, value: Any) -> bool:
    # A log that lacks the value only passes a wildcard.
    if allowed is None:
        return True
    return value is not None and value in allowed


class MatchingList(BaseModel):
    items: list[MatchItem] | None = None

    @classmethod
    def from_json(cls, text: str) -> MatchingList:
        """Parse a single JSON match item or a JSON array of items."""
        data = json.loads(text)
        if isinstance(data, dict):
            data = [data]
        return cls.model_validate({"items": data})

    @property
    def is_wildcard(self) -> bool:
        return not self.items or any(item.is_wildcard for item in self.items)

    def matches(
        self,
        *,
        origin_domain: int | None,
        destination_domain: int | None,
        sender: str | None,
        recipient: str | None,
    ) -> bool:
        if self.is_wildcard:
            return True
        return any(
            item.matches(
                origin_domain=origin_domain,
                destination_domain=destination_domain,
                sender=sender,
                recipient=recipient,
            )
            for item in self.items or ()
        )

    def enumerated(self, field: str) -> list[Any] | None:
        """Union of the values listed for `field`; None if any item leaves it open."""
        if not self.items:
            return None
        out: list[Any] = []
        for item in self.items:
            values = getattr(item, field)
            if values is None:
                return None
            out.extend(v for v in values if v not in out)
        return out
