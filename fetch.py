#!/usr/bin/env python3
"""CLI entry point for importing a flight dataset into SQLite.

Usage:
    python fetch.py                               # import data/*.csv
    python fetch.py --data-dir ~/aed-dataset       # import CSV files from elsewhere
    python fetch.py --source openflights           # download OpenFlights data
    python fetch.py --summary                      # only print what is stored
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

from flightnet.config import DB_PATH, setup_logging
from flightnet.dataset import get_source, list_sources
from flightnet.db import airline_summary, connect, dataset_source, table_counts
from flightnet.errors import UnknownSource

log = setup_logging()


def print_summary(conn, db_path, top=10):
    counts = table_counts(conn)
    log.info("=" * 50)
    log.info("DATASET SUMMARY (%s)", dataset_source(conn) or "empty")
    log.info("=" * 50)
    for t, c in counts.items():
        log.info("  %-15s %6d rows", t, c)

    al_summary = airline_summary(conn)
    busiest = sorted(al_summary.items(), key=lambda kv: kv[1], reverse=True)[:top]
    for code, cnt in busiest:
        log.info("  %-15s %6d flights", f"airline:{code}", cnt)

    origins = conn.execute("SELECT COUNT(DISTINCT source) FROM flights").fetchone()[0]
    dests = conn.execute("SELECT COUNT(DISTINCT target) FROM flights").fetchone()[0]
    log.info("  %-15s %6d origins, %d destinations", "directed", origins, dests)

    if db_path.exists():
        size_mb = db_path.stat().st_size / (1024 * 1024)
        log.info("  Database file:  %.2f MB", size_mb)
    log.info("  Location:       %s", db_path.resolve())
    log.info("=" * 50)


def main(argv=None):
    available = ", ".join(f"{n} ({d})" for n, d in list_sources())
    parser = argparse.ArgumentParser(description="Import a flight dataset into SQLite.")
    parser.add_argument("--source", type=str, default="csv",
                        help=f"Dataset source. Available: {available}.")
    parser.add_argument("--data-dir", type=str, default=None,
                        help="CSV directory (csv) or base URL (openflights)")
    parser.add_argument("--summary", action="store_true",
                        help="Print the stored dataset summary without importing")
    parser.add_argument("--db", type=str, default=None, help="Path to SQLite database")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        source = get_source(args.source)
    except UnknownSource as exc:
        log.error("%s", exc)
        sys.exit(2)

    db_path = Path(args.db) if args.db else DB_PATH
    conn = connect(db_path)
    log.info("Database: %s", db_path.resolve())

    try:
        if not args.summary:
            log.info("Importing: %s", source["name"])
            source["import_dataset"](conn, args.data_dir)
        print_summary(conn, db_path)
    except FileNotFoundError as exc:
        log.error("Dataset file not found: %s", exc.filename)
        sys.exit(1)
    except ValueError as exc:
        log.error("Malformed dataset: %s", exc)
        sys.exit(1)
    except requests.RequestException as exc:
        log.error("Download failed: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        log.info("Interrupted. Saving progress ...")
        conn.commit()
        print_summary(conn, db_path)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
