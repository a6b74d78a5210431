"""Import the project CSV dataset (airports.csv, airlines.csv, flights.csv)."""

import logging
from pathlib import Path

import pandas as pd

from flightnet import db
from flightnet.config import DATA_DIR

log = logging.getLogger("flightnet")

SOURCE = "csv"

AIRPORT_COLS = ["Code", "Name", "City", "Country", "Latitude", "Longitude"]
AIRLINE_COLS = ["Code", "Name", "Callsign", "Country"]
FLIGHT_COLS = ["Source", "Target", "Airline"]


def _read(path, columns):
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    # Some copies of the dataset call the airport name column "AirportName".
    df = df.rename(columns={"AirportName": "Name"})
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name}: missing columns {', '.join(missing)}")
    return df[columns].apply(lambda col: col.str.strip())


def import_dataset(conn, location=None):
    """Load the three CSV files from ``location`` into the database.

    Returns the number of flights stored.
    """
    data_dir = Path(location) if location else DATA_DIR
    log.info("[%s] Reading dataset from %s ...", SOURCE, data_dir)
    airports = _read(data_dir / "airports.csv", AIRPORT_COLS)
    airlines = _read(data_dir / "airlines.csv", AIRLINE_COLS)
    flights = _read(data_dir / "flights.csv", FLIGHT_COLS)

    db.reset_dataset(conn, SOURCE)

    stored = 0
    for row in airports.itertuples(index=False):
        try:
            lat, lon = float(row.Latitude), float(row.Longitude)
        except ValueError:
            log.debug("[%s] Airport %s has no usable position", SOURCE, row.Code)
            continue
        if db.insert_airport(conn, row.Code, row.Name, row.City, row.Country, lat, lon):
            stored += 1
    log.info("[%s] Stored %d/%d airports.", SOURCE, stored, len(airports))

    stored = 0
    for row in airlines.itertuples(index=False):
        if db.insert_airline(conn, row.Code, row.Name, row.Callsign, row.Country):
            stored += 1
    log.info("[%s] Stored %d/%d airlines.", SOURCE, stored, len(airlines))

    stored = 0
    for i, row in enumerate(flights.itertuples(index=False), 1):
        if db.insert_flight(conn, row.Source, row.Target, row.Airline):
            stored += 1
        if i % 20000 == 0:
            conn.commit()
            log.info("[%s]   ... flights: %d/%d rows", SOURCE, i, len(flights))
    conn.commit()
    skipped = len(flights) - stored
    if skipped:
        log.warning("[%s] Skipped %d flights with unknown airports or airlines.", SOURCE, skipped)
    log.info("[%s] Stored %d flights.", SOURCE, stored)
    return stored
