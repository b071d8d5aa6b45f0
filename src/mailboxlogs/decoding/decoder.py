"""Generic event decoder.

This module translates a `RawLogRecord` into a typed event using the
`EventSpec` registered for the event's kind.

Failure handling
----------------
- Signature of a different event → `None` (not an error). Callers rely on this
  to try several kinds in sequence.
- Right signature, malformed topics or payload → `DecodeError`.
"""

from __future__ import annotations

from typing import Any

from mailboxlogs.core.errors import DecodeError
from mailboxlogs.core.models import RawLogRecord
from mailboxlogs.decoding.events import E
from mailboxlogs.decoding.registry import spec_for_kind
from mailboxlogs.decoding.specs import EventSpec
from mailboxlogs.decoding.utils import parse_data_word, parse_topic_field, read_dynamic_bytes, word_at


def decode_values(spec: EventSpec, topics: tuple[str, ...], data: bytes) -> dict[str, Any]:
    """Decode every topic and data field of `spec`; raise DecodeError on malformed input."""
    if len(topics) != spec.topic_count:
        raise DecodeError(f"{spec.name}: expected {spec.topic_count} topics, got {len(topics)}")

    values: dict[str, Any] = {}
    for tf in spec.topic_fields:
        values[tf.name] = parse_topic_field(topics[tf.index], tf)

    for df in spec.data_fields:
        if df.type == "bytes":
            values[df.name] = read_dynamic_bytes(data, df.word_index)
        else:
            values[df.name] = parse_data_word(word_at(data, df.word_index), df.type)

    return values


def decode_log(log: RawLogRecord, event_cls: type[E]) -> E | None:
    """Decode `log` as `event_cls`, or return None if it is another event."""
    spec = spec_for_kind(event_cls.kind)
    if not log.topics or log.topics[0].lower() != spec.topic0:
        return None
    try:
        data = log.data
    except ValueError as e:
        raise DecodeError(f"{spec.name}: invalid data hex") from e
    return event_cls.from_values(decode_values(spec, log.topics, data))
