import argparse
import os
import sys
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError

from jalali_convert.logging_setup import setup_logging
from jalali_convert.sql_functions import (
    EXTENSION_NAME,
    execute_query,
    extension_version,
    register_jalali_functions,
)
from jalali_convert.utils.datetime_format import (
    FormatError,
    format_gregorian_as_jalali,
    parse_gregorian_timestamp,
    parse_jalali_datetime,
)

DEFAULT_DB_URL = "sqlite://"


def convert_value(value: str, to: str = "gregorian", end_of_day: bool = False, strict: bool = False) -> str:
    """Jalali text → 'YYYY-MM-DD HH:MM:SS' when `to` is gregorian, else Gregorian ISO → Jalali text."""
    if to == "gregorian":
        return parse_jalali_datetime(value, end_of_day, strict=strict).isoformat(sep=" ")
    return format_gregorian_as_jalali(parse_gregorian_timestamp(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert dates between the Jalali and Gregorian calendars")
    parser.add_argument("values", nargs="*", help="Dates to convert; omit for an interactive prompt")
    parser.add_argument(
        "--to",
        choices=("gregorian", "jalali"),
        default="gregorian",
        help="Target calendar (default: gregorian, i.e. input is Jalali text)",
    )
    parser.add_argument("--end-of-day", action="store_true", help="Force 23:59:59 on Jalali input")
    parser.add_argument("--strict", action="store_true", help="Reject out-of-range month/day/time values")
    parser.add_argument("--sql", help="Run a query with the jalali functions registered and print the result")
    parser.add_argument(
        "--db-url",
        default=os.getenv("JALALI_DB_URL", DEFAULT_DB_URL),
        help="SQLAlchemy URL used by --sql (default: $JALALI_DB_URL or in-memory SQLite)",
    )
    return parser


def run_sql(query: str, db_url: str) -> int:
    engine = create_engine(db_url)
    try:
        register_jalali_functions(engine)
        df = execute_query(engine, query)
    except DBAPIError as exc:
        print(f"💥 Query failed: {exc.orig}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"💥 Query failed: {exc}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()
    print(df.to_string(index=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(
            level=os.getenv("JALALI_LOG_LEVEL", "WARNING"),
            console=True,
            console_truncate_len=1000,
            log_file=None,
        )
    except ValueError as exc:
        print(f"💥 JALALI_LOG_LEVEL: {exc}", file=sys.stderr)
        return 2

    if args.sql:
        return run_sql(args.sql, args.db_url)

    if args.values:
        status = 0
        for value in args.values:
            try:
                print(convert_value(value, args.to, args.end_of_day, args.strict))
            except FormatError as exc:
                print(f"💥 {exc}", file=sys.stderr)
                status = 1
        return status

    print(f"{EXTENSION_NAME} {extension_version() or '(dev)'}: converting to {args.to} (empty line or Ctrl-D quits)")
    while True:
        try:
            value = input("\nConvert> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break
        if not value:
            break

        try:
            print(convert_value(value, args.to, args.end_of_day, args.strict))
        except FormatError as exc:
            print(f"💥 Failed to convert: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
