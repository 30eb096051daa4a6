#!/usr/bin/env python3
"""Seed a demo database and print its statistics.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database
2. Loads transaction.json into it if it is empty
3. Prints every statistic computed from the stored transactions
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from ledgerstats.db.session import init_db, session_scope  # noqa: E402
from ledgerstats.seed import seed_if_empty  # noqa: E402
from ledgerstats.service import RepositorySource, TransactionStatsService  # noqa: E402

DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
SEED_FILE = PROJECT_ROOT / "transaction.json"


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.WARNING)

    print("=" * 60)
    print("Ledgerstats Demo Seeding Script")
    print("=" * 60)

    print("\n[1/2] Seeding database...")
    init_db(DEMO_DB_PATH)
    with session_scope(DEMO_DB_PATH) as session:
        inserted = seed_if_empty(session, SEED_FILE)
        print(f"  Inserted {inserted} transactions")

        print("\n[2/2] Computing statistics...")
        summary = TransactionStatsService(RepositorySource(session)).get_summary()

    print(f"  Total credit:        {summary.total_credit}")
    print(f"  Total debit:         {summary.total_debit}")
    print(f"  Highest amount date: {summary.highest_amount_date}")
    print(f"  Average per day:     {summary.average_amount_per_day}")
    print(f"  Top dates:           {', '.join(d.isoformat() for d in summary.top_dates)}")

    print("\n" + "=" * 60)
    print(f"Database: {DEMO_DB_PATH}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
