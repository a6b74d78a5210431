"""Dataset registry -- maps source names to their import modules."""

from flightnet.dataset import csv_files
from flightnet.dataset import openflights
from flightnet.errors import UnknownSource

SOURCES = {
    "csv": {
        "name": "Local CSV files (airports.csv, airlines.csv, flights.csv)",
        "module": csv_files,
        "import_dataset": csv_files.import_dataset,
    },
    "openflights": {
        "name": "OpenFlights airports/airlines/routes download",
        "module": openflights,
        "import_dataset": openflights.import_dataset,
    },
}


def get_source(name):
    """Return source dict by name, or raise UnknownSource."""
    name = name.lower()
    if name not in SOURCES:
        available = ", ".join(SOURCES)
        raise UnknownSource(f"Unknown dataset source '{name}'. Available: {available}")
    return SOURCES[name]


def list_sources():
    """Return list of (name, description) tuples for all registered sources."""
    return [(k, v["name"]) for k, v in SOURCES.items()]
