"""End-to-end tests for the fetch and query command line entry points."""

from unittest.mock import patch

import pytest
import requests

import fetch
import query
from flightnet import db
from flightnet.dataset import csv_files


@pytest.fixture
def db_path(conn, csv_dir, tmp_path):
    csv_files.import_dataset(conn, csv_dir)
    return tmp_path / "flights.db"


def run(db_path, *args):
    return query.main(["--db", str(db_path), *args])


class TestQuery:

    def test_missing_database(self, tmp_path):
        assert run(tmp_path / "absent.db", "stats") == 1

    def test_stats(self, db_path, capsys):
        assert run(db_path, "stats", "--per-airline") == 0
        out = capsys.readouterr().out
        assert "Airports: 8" in out
        assert "Flights:  23" in out
        assert "Airline: TAP (TAP Portugal) -- 10 flights" in out

    def test_route(self, db_path, capsys):
        assert run(db_path, "route", "OPO", "JFK") == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "OPO (Francisco Sa Carneiro) --> LIS (Humberto Delgado) - (TAP)",
            "LIS (Humberto Delgado) --> JFK (John F Kennedy Intl) - (TAP, UAL)",
        ]

    def test_route_by_city(self, db_path, capsys):
        assert run(db_path, "route", "FNC", "city:Paris,France") == 0
        out = capsys.readouterr().out
        assert "Option 1: FNC -> CDG" in out
        assert "Option 2: FNC -> ORY" in out

    def test_shortest_distance(self, db_path, capsys):
        assert run(db_path, "route", "OPO", "CDG", "--shortest-distance") == 0
        out = capsys.readouterr().out
        assert "MAD (Barajas)" in out
        assert "Total distance:" in out

    def test_route_modes_are_exclusive(self, db_path):
        with pytest.raises(SystemExit):
            run(db_path, "route", "OPO", "JFK", "--fewest-airlines", "--shortest-distance")

    def test_unknown_airport(self, db_path, capsys):
        assert run(db_path, "route", "OPO", "ZZZ") == 1
        assert "Unknown airport 'ZZZ'" in capsys.readouterr().err

    def test_reach(self, db_path, capsys):
        assert run(db_path, "reach", "OPO", "--stops", "0") == 0
        out = capsys.readouterr().out
        assert "Airports reachable with at most 0 stops from OPO: 2" in out

    def test_city_countries(self, db_path, capsys):
        assert run(db_path, "city", "Paris", "France") == 0
        assert capsys.readouterr().out.strip() == (
            "Countries served directly from Paris (France): 4"
        )
        assert run(db_path, "city", "Atlantis", "Nowhere") == 1

    def test_top(self, db_path, capsys):
        assert run(db_path, "top", "1") == 0
        assert capsys.readouterr().out.strip() == "1 -> LIS (Humberto Delgado) -- 15 flights"
        assert run(db_path, "top", "100") == 0
        assert "k must be between 1 and 8." in capsys.readouterr().out

    def test_max_trip_and_essential(self, db_path, capsys):
        assert run(db_path, "max-trip") == 0
        assert "Maximum trips have 2 stops (3 flights):" in capsys.readouterr().out
        assert run(db_path, "essential") == 0
        assert capsys.readouterr().out.splitlines()[0] == "2 essential airports:"


class TestFetch:

    def test_imports_csv_dataset(self, csv_dir, tmp_path):
        target = tmp_path / "fetched.db"
        fetch.main(["--data-dir", str(csv_dir), "--db", str(target)])
        conn = db.connect(target)
        try:
            assert db.table_counts(conn) == {"airports": 8, "airlines": 5, "flights": 23}
            assert db.dataset_source(conn) == "csv"
        finally:
            conn.close()

    def test_unknown_source(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            fetch.main(["--source", "scraper", "--db", str(tmp_path / "x.db")])
        assert exc_info.value.code == 2

    def test_missing_dataset(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            fetch.main(["--data-dir", str(tmp_path / "nowhere"), "--db", str(tmp_path / "x.db")])
        assert exc_info.value.code == 1

    @patch("flightnet.dataset.openflights.fetch_text",
           side_effect=requests.ConnectionError("unreachable"))
    def test_failed_download(self, _fetch, tmp_path, caplog):
        with pytest.raises(SystemExit) as exc_info:
            fetch.main(["--source", "openflights", "--db", str(tmp_path / "x.db")])
        assert exc_info.value.code == 1
        assert "Download failed: unreachable" in caplog.text
