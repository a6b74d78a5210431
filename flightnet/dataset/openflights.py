"""Download and import the OpenFlights airports / airlines / routes data.

The .dat files are headerless CSV with ``\\N`` for missing values. Airports
are keyed by IATA code (ICAO when there is none), airlines by ICAO code
(IATA when there is none). Routes reference both by numeric id, falling
back to the code columns when an id is missing.
"""

import io
import logging

import pandas as pd

from flightnet import db
from flightnet.api import fetch_text
from flightnet.config import OPENFLIGHTS_URL

log = logging.getLogger("flightnet")

SOURCE = "openflights"

AIRPORT_COLS = ["Airport_ID", "Name", "City", "Country", "IATA", "ICAO",
                "Latitude", "Longitude", "Altitude", "Timezone", "DST", "Tz", "Type", "Source"]
AIRLINE_COLS = ["Airline_ID", "Name", "Alias", "IATA", "ICAO", "Callsign", "Country", "Active"]
ROUTE_COLS = ["Airline", "Airline_ID", "Source_airport", "Source_ID",
              "Dest_airport", "Dest_ID", "Codeshare", "Stops", "Equipment"]


def _download(name, columns, base_url):
    url = f"{base_url.rstrip('/')}/{name}"
    log.info("[%s] Downloading %s ...", SOURCE, url)
    raw = fetch_text(url)
    return pd.read_csv(io.StringIO(raw), header=None, names=columns,
                       na_values="\\N", keep_default_na=False, dtype=str)


def _pick(*values):
    """First value that is a real code (not missing, not a placeholder)."""
    for value in values:
        if isinstance(value, str):
            value = value.strip()
            if value and value not in ("-", "N/A"):
                return value
    return None


def import_dataset(conn, location=None):
    """Fetch the three .dat files and store them. Returns the number of flights stored."""
    base_url = location or OPENFLIGHTS_URL
    airports = _download("airports.dat", AIRPORT_COLS, base_url)
    airlines = _download("airlines.dat", AIRLINE_COLS, base_url)
    routes = _download("routes.dat", ROUTE_COLS, base_url)

    db.reset_dataset(conn, SOURCE)

    airport_ids = {}
    for row in airports.itertuples(index=False):
        code = _pick(row.IATA, row.ICAO)
        if not code:
            continue
        try:
            lat, lon = float(row.Latitude), float(row.Longitude)
        except (TypeError, ValueError):
            continue
        if db.insert_airport(conn, code, _pick(row.Name) or "", _pick(row.City) or "",
                             _pick(row.Country) or "", lat, lon):
            airport_ids[row.Airport_ID] = code
    log.info("[%s] Stored %d airports.", SOURCE, len(airport_ids))

    airline_ids = {}
    # Routes name airlines by IATA code; map both codes to the stored one.
    airline_codes = {}
    for row in airlines.itertuples(index=False):
        code = _pick(row.ICAO, row.IATA)
        if not code:
            continue
        if db.insert_airline(conn, code, _pick(row.Name) or "", _pick(row.Callsign),
                            _pick(row.Country)):
            airline_ids[row.Airline_ID] = code
            for alias in (_pick(row.IATA), _pick(row.ICAO)):
                if alias:
                    airline_codes.setdefault(alias, code)
    log.info("[%s] Stored %d airlines.", SOURCE, len(airline_ids))

    stored = 0
    for i, row in enumerate(routes.itertuples(index=False), 1):
        source = airport_ids.get(row.Source_ID) or _pick(row.Source_airport)
        target = airport_ids.get(row.Dest_ID) or _pick(row.Dest_airport)
        airline = airline_ids.get(row.Airline_ID) or airline_codes.get(_pick(row.Airline))
        if source and target and airline and db.insert_flight(conn, source, target, airline):
            stored += 1
        if i % 20000 == 0:
            conn.commit()
            log.info("[%s]   ... routes: %d/%d rows", SOURCE, i, len(routes))
    conn.commit()
    skipped = len(routes) - stored
    if skipped:
        log.warning("[%s] Skipped %d routes with unknown airports or airlines.", SOURCE, skipped)
    log.info("[%s] Stored %d flights.", SOURCE, stored)
    return stored
