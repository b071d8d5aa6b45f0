"""Well-known domain identifiers.

A domain id is the numeric chain identifier used by the messaging protocol.
Unknown ids are still valid; they are just reported as "Unknown".
"""

from __future__ import annotations

KNOWN_DOMAINS: dict[int, str] = {
    1: "Ethereum",
    5: "Goerli",
    10: "Optimism",
    56: "BinanceSmartChain",
    97: "BinanceSmartChainTestnet",
    100: "Gnosis",
    137: "Polygon",
    420: "OptimismGoerli",
    1284: "Moonbeam",
    1287: "MoonbaseAlpha",
    8453: "Base",
    42161: "Arbitrum",
    42220: "Celo",
    43113: "Fuji",
    43114: "Avalanche",
    44787: "Alfajores",
    80001: "Mumbai",
    421613: "ArbitrumGoerli",
    11155111: "Sepolia",
}


def domain_name(domain_id: int) -> str:
    return KNOWN_DOMAINS.get(domain_id, "Unknown")


def describe_domain(context: str, domain_id: int) -> str:
    """Format e.g. `" to: 80001 Mumbai"` for presentation."""
    return f"{context}: {domain_id} {domain_name(domain_id)}"
