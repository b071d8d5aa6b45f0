"""Query orchestration.

This package provides:
- `run_query_use_case`: interface-only use case
- `query`: convenience wrapper wiring the RPC client
- `build_topic_filter`: superset `eth_getLogs` topic filter
"""

from mailboxlogs.orchestration.orchestrator import QueryOutput, item_matches, query, run_query_use_case
from mailboxlogs.orchestration.utils import build_topic_filter

__all__ = [
    "QueryOutput",
    "item_matches",
    "query",
    "run_query_use_case",
    "build_topic_filter",
]
