#!/usr/bin/env python
"""
Database initialization script for FilmTrack.

Usage:
    # Create tables (keeps existing data)
    python scripts/init_database.py

    # Drop and recreate tables
    python scripts/init_database.py --reset
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from filmtrack.api.config import get_database_path
from filmtrack.database import init_database, verify_schema
from filmtrack.utils.logging_config import setup_logging


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize the FilmTrack database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=get_database_path(),
        help='Path to SQLite database file (default: DATABASE_URL or data/filmtrack.db)'
    )
    args = parser.parse_args()

    setup_logging(level="INFO")
    db_manager = init_database(db_path=args.db_path, reset=args.reset)

    if verify_schema(db_manager):
        print("\n✅ Database initialization successful!")
        return 0
    print("\n❌ Database initialization failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
