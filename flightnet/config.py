"""Shared configuration: paths, constants, logging setup."""

import logging
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Where the dataset files and the flights database live.
# By default this is the local "data" directory inside the repo, but it can be
# overridden so that a prepared dataset folder can live anywhere on disk.
#
# Env vars:
# - FLIGHTNET_DATA_DIR        -> directory with airports.csv, airlines.csv, flights.csv
# - FLIGHTNET_DB_PATH         -> full path to flights.db (overrides FLIGHTNET_DATA_DIR)
# - FLIGHTNET_OPENFLIGHTS_URL -> base URL the OpenFlights .dat files are fetched from
_default_data_dir = PROJECT_ROOT / "data"
DATA_DIR = Path(os.getenv("FLIGHTNET_DATA_DIR", _default_data_dir))

_default_db_path = DATA_DIR / "flights.db"
DB_PATH = Path(os.getenv("FLIGHTNET_DB_PATH", _default_db_path))

OPENFLIGHTS_URL = os.getenv(
    "FLIGHTNET_OPENFLIGHTS_URL",
    "https://raw.githubusercontent.com/jpatokal/openflights/master/data",
)

REQUEST_DELAY = 0.5
MAX_RETRIES = 3
RETRY_BACKOFF = 5

HEADERS = {
    "User-Agent": "flightnet/0.1 (+dataset import)",
    "Accept": "text/plain, text/csv, */*",
}

LOGGER_NAME = "flightnet"


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger(LOGGER_NAME)
