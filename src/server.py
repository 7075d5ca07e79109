"""Protean Engine runner for ShopFlow domains.

Starts Engine workers that process events asynchronously:
- OutboxProcessor: publishes recorded events to the configured broker
- StreamSubscriptions: reads event streams, invokes event handlers

The event handlers are what drive the fulfillment saga forward after
checkout: payments mark orders paid, delivered deliveries complete them,
and notifications are stored for users.

Usage:
    python src/server.py                      # Run all domain engines
    python src/server.py --domain ordering    # Run only the ordering engine
"""

import argparse
import asyncio
import importlib

from protean.server.engine import Engine
from shared.logging import configure_logging

DOMAINS = ["shopping", "ordering", "fulfillment", "payments", "notifications"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name not in DOMAINS:
        raise ValueError(f"Unknown domain: {name}")
    domain = getattr(importlib.import_module(f"{name}.domain"), name)
    domain.init()
    return domain


async def run(domain_names):
    engines = []
    for name in domain_names:
        domain = _get_domain(name)
        engines.append(Engine(domain))

    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="ShopFlow Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAINS,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else DOMAINS
    configure_logging(service="engine" if not args.domain else f"engine-{args.domain}")

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
