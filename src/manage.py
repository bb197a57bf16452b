"""Coffee Shops database management CLI.

Creates and drops the shops schema on SQL providers (see domain.toml; the
default memory provider needs neither).

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop tables
"""

import argparse
import sys


def setup_database():
    from shops.domain import shops
    from shops.utils.db import setup_db

    print("Initializing shops domain...")
    shops.init()
    print("Creating shops database schema...")
    setup_db(shops)
    print("Done.")


def drop_database():
    from shops.domain import shops
    from shops.utils.db import drop_db

    print("Initializing shops domain...")
    shops.init()
    print("Dropping shops database schema...")
    drop_db(shops)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Coffee Shops database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
