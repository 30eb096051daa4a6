"""Console entry point and interactive statistics menu."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from ledgerstats.config import Settings, get_settings
from ledgerstats.db.session import init_db, session_scope
from ledgerstats.seed import seed_if_empty
from ledgerstats.service import RepositorySource, TransactionStatsService

logger = logging.getLogger(__name__)

MENU = """Select an option:
1. Total Credit Amount
2. Total Debit Amount
3. Transaction with Highest Amount DateTime
4. Average Amount Per Day
5. Top 5 Dates with Highest Total Amount
6. Exit"""

DATE_FORMAT = "%d-%m-%Y"


def run_menu(
    service: TransactionStatsService,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Loop over the numbered menu until the user exits.

    A failing command is logged and reported, then the menu is shown again.
    End of input is treated as Exit.
    """
    logger.info("Starting interaction with the user.")
    while True:
        write(MENU)
        try:
            choice = read().strip()
        except EOFError:
            choice = "6"

        try:
            if choice == "1":
                write(f"Total Credit Amount: {service.get_total_credit()}")
            elif choice == "2":
                write(f"Total Debit Amount: {service.get_total_debit()}")
            elif choice == "3":
                highest = service.get_highest_amount_date()
                write(f"Transaction with Highest Amount DateTime: {highest or ''}")
            elif choice == "4":
                write(f"Average Amount Per Day: {service.get_average_amount_per_day()}")
            elif choice == "5":
                top_dates = service.get_top_dates()
                write("Top 5 Dates with Highest Total Amount:")
                for day in top_dates:
                    write(day.strftime(DATE_FORMAT))
            elif choice == "6":
                write("Exiting...")
                logger.info("Exiting the application.")
                return
            else:
                write("Invalid option, please try again.")
                logger.info("User selected an invalid menu option.")
        except Exception as e:
            logger.error(f"Error during user interaction: {e}")
            write(f"Error: {e}")


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Send log records to stderr and, optionally, a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledgerstats",
        description="Interactive statistics over stored financial transactions.",
    )
    parser.add_argument("--db", type=Path, default=settings.db_path, help="SQLite database path")
    parser.add_argument(
        "--seed-file",
        type=Path,
        default=settings.seed_file,
        help="JSON file loaded into an empty database",
    )
    parser.add_argument("--no-seed", action="store_true", help="Skip seeding")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--log-file", type=Path, default=settings.log_file, help="Also write logs to this file"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser(get_settings()).parse_args(argv)
    configure_logging(args.log_level.upper(), args.log_file)

    try:
        logger.info("Application Starting...")
        init_db(args.db)
        with session_scope(args.db) as session:
            if not args.no_seed:
                seed_if_empty(session, args.seed_file)
            run_menu(TransactionStatsService(RepositorySource(session)))
    except Exception as e:
        logger.error(f"Application encountered an error: {e}", exc_info=e)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
