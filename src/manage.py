"""ShopFlow database management CLI.

Provides commands to create and drop database schemas for all domains.

Usage:
    python src/manage.py setup-db                      # Create all tables
    python src/manage.py drop-db --domain ordering     # Drop one domain's tables
"""

import argparse
import importlib
import sys

from shared.db import drop_db, setup_db
from shared.logging import configure_logging

DOMAINS = ["shopping", "ordering", "fulfillment", "payments", "notifications"]


def _load(name):
    return getattr(importlib.import_module(f"{name}.domain"), name)


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name in domains or DOMAINS:
        domain = _load(name)
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name in domains or DOMAINS:
        domain = _load(name)
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def main():
    configure_logging(service="manage")
    parser = argparse.ArgumentParser(description="ShopFlow database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAINS,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAINS,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
