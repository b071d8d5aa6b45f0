"""Registry builder utilities for creating event registries from signatures.

This module provides the core tools for building EventRegistry instances:
- `event_spec_from_signature()` converts a Solidity event signature to an EventSpec
  (flat parameter lists; tuple types are not needed by any mailbox event)
- `make_registry()` builds a registry from one or multiple signatures
"""

from __future__ import annotations

from eth_utils import keccak

from .specs import DataFieldSpec, EventRegistry, EventSpec, TopicFieldSpec


def _parse_param(fragment: str, position: int) -> tuple[str, str, bool]:
    """`"uint32 indexed origin"` -> (name, abi_type, indexed); unnamed params get `arg<i>`."""
    tokens = fragment.split()
    indexed = "indexed" in tokens
    tokens = [t for t in tokens if t != "indexed"]
    name = tokens[1] if len(tokens) > 1 else f"arg{position}"
    return name, tokens[0], indexed


def event_spec_from_signature(signature: str) -> EventSpec:
    """Build an EventSpec from a Solidity event signature string.

    Example input:
      "Process(uint32 indexed origin, bytes32 indexed sender, address indexed recipient)"
    """
    name, paren, rest = signature.strip().partition("(")
    if not paren or not rest.endswith(")"):
        raise ValueError(f"Invalid event signature: {signature}")
    name = name.strip()
    fragments = [p for p in rest[:-1].split(",") if p.strip()]
    params = [_parse_param(p, i) for i, p in enumerate(fragments)]

    # topic0 hashes the bare type list
    canonical_types = ",".join(abi_type for _, abi_type, _ in params)
    topic0 = "0x" + keccak(text=f"{name}({canonical_types})").hex()

    indexed_params = [(n, t) for n, t, indexed in params if indexed]
    data_params = [(n, t) for n, t, indexed in params if not indexed]
    return EventSpec(
        topic0=topic0,
        name=name,
        topic_fields=[TopicFieldSpec(n, idx + 1, t) for idx, (n, t) in enumerate(indexed_params)],
        data_fields=[DataFieldSpec(n, idx, t) for idx, (n, t) in enumerate(data_params)],
    )


def make_registry(signatures: str | list[str]) -> EventRegistry:
    """Create a registry from one or multiple event signatures."""
    reg: EventRegistry = {}
    sig_list = [signatures] if isinstance(signatures, str) else signatures
    for signature in sig_list:
        spec = event_spec_from_signature(signature)
        reg[spec.topic0] = spec
    return reg
