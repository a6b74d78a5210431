"""Database initialisation and helper utilities for the flight dataset."""

import sqlite3
from pathlib import Path

from flightnet.config import DB_PATH

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS airports (
    code            TEXT PRIMARY KEY,
    name            TEXT,
    city            TEXT,
    country         TEXT,
    latitude        REAL,
    longitude       REAL
);

CREATE TABLE IF NOT EXISTS airlines (
    code            TEXT PRIMARY KEY,
    name            TEXT,
    callsign        TEXT,
    country         TEXT
);

CREATE TABLE IF NOT EXISTS flights (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    source          TEXT NOT NULL,
    target          TEXT NOT NULL,
    airline         TEXT NOT NULL,
    FOREIGN KEY (source)  REFERENCES airports(code),
    FOREIGN KEY (target)  REFERENCES airports(code),
    FOREIGN KEY (airline) REFERENCES airlines(code)
);

CREATE TABLE IF NOT EXISTS dataset_info (
    key             TEXT PRIMARY KEY,
    value           TEXT
);

CREATE INDEX IF NOT EXISTS idx_flights_source ON flights(source);
CREATE INDEX IF NOT EXISTS idx_flights_target ON flights(target);
CREATE INDEX IF NOT EXISTS idx_flights_airline ON flights(airline);
"""


def connect(db_path=None):
    db_path = Path(db_path) if db_path else DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), timeout=60)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA busy_timeout=30000")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.executescript(SCHEMA_SQL)
    conn.commit()
    return conn


def reset_dataset(conn, source):
    """Drop every dataset row before an import; the dataset is replaced wholesale."""
    conn.execute("DELETE FROM flights")
    conn.execute("DELETE FROM airports")
    conn.execute("DELETE FROM airlines")
    conn.execute("DELETE FROM sqlite_sequence WHERE name = 'flights'")
    conn.execute(
        "INSERT OR REPLACE INTO dataset_info (key, value) VALUES ('source', ?)",
        (source,),
    )
    conn.commit()


def insert_airport(conn, code, name, city, country, lat, lon):
    """Insert one airport; returns False when the code is already taken."""
    try:
        conn.execute(
            """INSERT INTO airports (code, name, city, country, latitude, longitude)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (code, name, city, country, lat, lon),
        )
    except sqlite3.IntegrityError:
        return False
    return True


def insert_airline(conn, code, name, callsign, country):
    try:
        conn.execute(
            "INSERT INTO airlines (code, name, callsign, country) VALUES (?, ?, ?, ?)",
            (code, name, callsign, country),
        )
    except sqlite3.IntegrityError:
        return False
    return True


def insert_flight(conn, source, target, airline):
    """Insert one flight; returns False when an endpoint or the airline is unknown."""
    try:
        conn.execute(
            "INSERT INTO flights (source, target, airline) VALUES (?, ?, ?)",
            (source, target, airline),
        )
    except sqlite3.IntegrityError:
        return False
    return True


def load_airports(conn):
    """Return airport rows in dataset order."""
    return conn.execute(
        "SELECT code, name, city, country, latitude, longitude "
        "FROM airports ORDER BY rowid"
    ).fetchall()


def load_airlines(conn):
    return conn.execute(
        "SELECT code, name, callsign, country FROM airlines ORDER BY rowid"
    ).fetchall()


def load_flights(conn):
    return conn.execute(
        "SELECT source, target, airline FROM flights ORDER BY id"
    ).fetchall()


def dataset_source(conn):
    row = conn.execute(
        "SELECT value FROM dataset_info WHERE key = 'source'"
    ).fetchone()
    return row[0] if row else None


def table_counts(conn):
    tables = ["airports", "airlines", "flights"]
    counts = {}
    for t in tables:
        counts[t] = conn.execute(f"SELECT COUNT(*) FROM {t}").fetchone()[0]
    return counts


def airline_summary(conn):
    """Return dict of airline code -> flight count."""
    rows = conn.execute(
        "SELECT airline, COUNT(*) FROM flights GROUP BY airline"
    ).fetchall()
    return {code: cnt for code, cnt in rows}
