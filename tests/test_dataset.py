"""Tests for dataset import into SQLite and rebuilding the network from it."""

from unittest.mock import patch

import pytest

from conftest import AIRLINE_ROWS, AIRPORT_ROWS, FLIGHT_ROWS
from flightnet import db
from flightnet.dataset import csv_files, get_source, list_sources, openflights
from flightnet.errors import UnknownSource
from flightnet.system import FlightSystem

OPENFLIGHTS_FILES = {
    "airports.dat": (
        '1,"Francisco Sa Carneiro Airport","Porto","Portugal","OPO","LPPR",41.2481,-8.6814,228,0,"E","Europe/Lisbon","airport","OurAirports"\n'
        '2,"Humberto Delgado Airport","Lisbon","Portugal","LIS","LPPT",38.7813,-9.1359,374,0,"E","Europe/Lisbon","airport","OurAirports"\n'
        '3,"Some Strip","Nowhere","Portugal",\\N,"LPXX",40.0,-8.0,100,0,"E","Europe/Lisbon","airport","OurAirports"\n'
        '4,"No Code Field","Somewhere","Portugal",\\N,\\N,39.0,-8.0,100,0,"E","Europe/Lisbon","airport","OurAirports"\n'
    ),
    "airlines.dat": (
        '1,"TAP Portugal",\\N,"TP","TAP","AIR PORTUGAL","Portugal","Y"\n'
        '2,"Ryanair",\\N,"FR","RYR","RYANAIR","Ireland","Y"\n'
        '3,"Private flight",\\N,"-",\\N,\\N,\\N,"Y"\n'
    ),
    "routes.dat": (
        "TP,1,OPO,1,LIS,2,,0,320\n"
        "TP,1,LIS,2,OPO,1,,0,320\n"
        "FR,2,LIS,2,LPXX,3,,0,738\n"
        "FR,\\N,OPO,\\N,LIS,\\N,,0,738\n"
        "ZZ,999,OPO,1,MAD,\\N,,0,320\n"
    ),
}


def fake_fetch(url, params=None):
    return OPENFLIGHTS_FILES[url.rsplit("/", 1)[-1]]


class TestRegistry:

    def test_sources(self):
        assert [name for name, _ in list_sources()] == ["csv", "openflights"]
        assert get_source("CSV")["module"] is csv_files

    def test_unknown_source(self):
        with pytest.raises(UnknownSource):
            get_source("scraper")


class TestDatabase:

    def test_empty_database(self, conn):
        assert db.table_counts(conn) == {"airports": 0, "airlines": 0, "flights": 0}
        assert db.dataset_source(conn) is None

    def test_dangling_flight_is_refused(self, conn):
        assert db.insert_airport(conn, "OPO", "Porto", "Porto", "Portugal", 41.0, -8.0)
        assert not db.insert_airport(conn, "OPO", "Porto", "Porto", "Portugal", 41.0, -8.0)
        assert db.insert_airline(conn, "TAP", "TAP Portugal", "AIR PORTUGAL", "Portugal")
        assert not db.insert_flight(conn, "OPO", "LIS", "TAP")
        assert db.table_counts(conn)["flights"] == 0


class TestCsvImport:

    def test_import_and_rebuild(self, conn, csv_dir):
        stored = csv_files.import_dataset(conn, csv_dir)
        assert stored == len(FLIGHT_ROWS)
        assert db.table_counts(conn) == {
            "airports": len(AIRPORT_ROWS),
            "airlines": len(AIRLINE_ROWS),
            "flights": len(FLIGHT_ROWS),
        }
        assert db.dataset_source(conn) == "csv"
        assert db.airline_summary(conn)["TAP"] == 10

        system = FlightSystem.from_db(conn)
        assert system.graph.codes() == [row[0] for row in AIRPORT_ROWS]
        assert system.flight_count() == len(FLIGHT_ROWS)
        assert system.airports["OPO"].latitude == pytest.approx(41.2481)
        assert system.airlines["AFR"].callsign == "AIRFRANS"

    def test_reimport_replaces_dataset(self, conn, csv_dir):
        csv_files.import_dataset(conn, csv_dir)
        csv_files.import_dataset(conn, csv_dir)
        assert db.table_counts(conn)["flights"] == len(FLIGHT_ROWS)
        first_id = conn.execute("SELECT MIN(id) FROM flights").fetchone()[0]
        assert first_id == 1

    def test_unknown_flight_rows_are_skipped(self, conn, csv_dir):
        with open(csv_dir / "flights.csv", "a", encoding="utf-8") as f:
            f.write("OPO,XXX,TAP\n")
            f.write("OPO,LIS,ZZZ\n")
        stored = csv_files.import_dataset(conn, csv_dir)
        assert stored == len(FLIGHT_ROWS)

    def test_airport_name_header_variant(self, conn, csv_dir):
        path = csv_dir / "airports.csv"
        text = path.read_text(encoding="utf-8").replace("Code,Name,", "Code,AirportName,", 1)
        path.write_text(text, encoding="utf-8")
        csv_files.import_dataset(conn, csv_dir)
        assert db.table_counts(conn)["airports"] == len(AIRPORT_ROWS)

    def test_missing_columns(self, conn, csv_dir):
        (csv_dir / "airlines.csv").write_text("Code,Name\nTAP,TAP\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Callsign"):
            csv_files.import_dataset(conn, csv_dir)

    def test_missing_file(self, conn, tmp_path):
        with pytest.raises(FileNotFoundError):
            csv_files.import_dataset(conn, tmp_path / "nowhere")


class TestOpenFlightsImport:

    @patch("flightnet.dataset.openflights.fetch_text", side_effect=fake_fetch)
    def test_import(self, mock_fetch, conn):
        stored = openflights.import_dataset(conn, "https://example.test/data/")
        assert stored == 4
        assert mock_fetch.call_count == 3
        mock_fetch.assert_any_call("https://example.test/data/routes.dat")

        airports = [row[0] for row in db.load_airports(conn)]
        assert airports == ["OPO", "LIS", "LPXX"]
        airlines = {row[0]: row for row in db.load_airlines(conn)}
        assert set(airlines) == {"TAP", "RYR"}
        assert airlines["RYR"][2] == "RYANAIR"
        assert db.load_flights(conn) == [
            ("OPO", "LIS", "TAP"), ("LIS", "OPO", "TAP"), ("LIS", "LPXX", "RYR"),
            ("OPO", "LIS", "RYR"),
        ]
        assert db.dataset_source(conn) == "openflights"

    @patch("flightnet.dataset.openflights.fetch_text")
    def test_route_without_airline_id_uses_iata_code(self, mock_fetch, conn):
        files = dict(OPENFLIGHTS_FILES, **{"routes.dat": "FR,\\N,OPO,\\N,LIS,\\N,,0,738\n"})
        mock_fetch.side_effect = lambda url, params=None: files[url.rsplit("/", 1)[-1]]
        assert openflights.import_dataset(conn, "https://example.test/data") == 1
        assert db.load_flights(conn) == [("OPO", "LIS", "RYR")]
