"""Shiptrack database management CLI.

Creates and drops the relational schema for the tracking domain. Only needed
when PROTEAN_ENV selects a relational database provider.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from tracking.domain import tracking
    from tracking.utils.db import setup_db

    print("Initializing tracking domain...")
    tracking.init()
    print("Creating tracking database schema...")
    setup_db(tracking)
    print("Done.")


def drop_database():
    from tracking.domain import tracking
    from tracking.utils.db import drop_db

    print("Initializing tracking domain...")
    tracking.init()
    print("Dropping tracking database schema...")
    drop_db(tracking)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Shiptrack database management")
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
