"""Shared fixtures and helpers for the flight network tests."""

import pytest

from flightnet import db
from flightnet.network.graph import Graph
from flightnet.system import FlightSystem


def make_graph(edges, vertices=None):
    """Graph from (source, target, airline) triples; vertices default to edge order."""
    graph = Graph()
    for code in vertices or []:
        graph.add_vertex(code)
    for source, target, _airline in edges:
        graph.add_vertex(source)
        graph.add_vertex(target)
    for source, target, airline in edges:
        graph.add_edge(source, target, airline, 100.0)
    return graph


def both_ways(pairs, airline="XX"):
    """Flights in both directions for every (a, b) pair."""
    edges = []
    for a, b in pairs:
        edges.append((a, b, airline))
        edges.append((b, a, airline))
    return edges


AIRPORT_ROWS = [
    ("OPO", "Francisco Sa Carneiro", "Porto", "Portugal", 41.2481, -8.6814),
    ("LIS", "Humberto Delgado", "Lisbon", "Portugal", 38.7813, -9.1359),
    ("MAD", "Barajas", "Madrid", "Spain", 40.4719, -3.5626),
    ("CDG", "Charles de Gaulle", "Paris", "France", 49.0128, 2.55),
    ("ORY", "Orly", "Paris", "France", 48.7253, 2.3594),
    ("JFK", "John F Kennedy Intl", "New York", "United States", 40.6398, -73.7789),
    ("NRT", "Narita Intl", "Tokyo", "Japan", 35.7647, 140.3864),
    ("FNC", "Madeira", "Funchal", "Portugal", 32.6979, -16.7745),
]

AIRLINE_ROWS = [
    ("TAP", "TAP Portugal", "AIR PORTUGAL", "Portugal"),
    ("IBE", "Iberia Airlines", "IBERIA", "Spain"),
    ("AFR", "Air France", "AIRFRANS", "France"),
    ("UAL", "United Airlines", "UNITED", "United States"),
    ("JAL", "Japan Airlines", "JAPANAIR", "Japan"),
]

FLIGHT_ROWS = [
    ("OPO", "LIS", "TAP"),
    ("LIS", "OPO", "TAP"),
    ("OPO", "MAD", "IBE"),
    ("MAD", "OPO", "IBE"),
    ("LIS", "MAD", "TAP"),
    ("LIS", "MAD", "IBE"),
    ("MAD", "LIS", "IBE"),
    ("LIS", "CDG", "TAP"),
    ("LIS", "CDG", "AFR"),
    ("CDG", "LIS", "AFR"),
    ("MAD", "CDG", "IBE"),
    ("CDG", "MAD", "AFR"),
    ("CDG", "JFK", "AFR"),
    ("JFK", "CDG", "UAL"),
    ("LIS", "JFK", "TAP"),
    ("LIS", "JFK", "UAL"),
    ("JFK", "LIS", "TAP"),
    ("CDG", "NRT", "JAL"),
    ("NRT", "CDG", "JAL"),
    ("ORY", "LIS", "TAP"),
    ("LIS", "ORY", "TAP"),
    ("LIS", "FNC", "TAP"),
    ("FNC", "LIS", "TAP"),
]


@pytest.fixture
def system():
    return FlightSystem.build(AIRPORT_ROWS, AIRLINE_ROWS, FLIGHT_ROWS)


@pytest.fixture
def csv_dir(tmp_path):
    """A directory holding the sample dataset in the project CSV format."""
    data = tmp_path / "dataset"
    data.mkdir()
    with open(data / "airports.csv", "w", encoding="utf-8") as f:
        f.write("Code,Name,City,Country,Latitude,Longitude\n")
        for row in AIRPORT_ROWS:
            f.write(",".join(str(v) for v in row) + "\n")
    with open(data / "airlines.csv", "w", encoding="utf-8") as f:
        f.write("Code,Name,Callsign,Country\n")
        for row in AIRLINE_ROWS:
            f.write(",".join(row) + "\n")
    with open(data / "flights.csv", "w", encoding="utf-8") as f:
        f.write("Source,Target,Airline\n")
        for row in FLIGHT_ROWS:
            f.write(",".join(row) + "\n")
    return data


@pytest.fixture
def conn(tmp_path):
    connection = db.connect(tmp_path / "flights.db")
    yield connection
    connection.close()
