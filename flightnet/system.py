"""FlightSystem: airport/airline metadata plus the flight graph built from them.

Every method that takes an airport code validates it first and raises
UnknownAirport, so the graph algorithms never see a code they do not know.
"""

import logging

from flightnet import db
from flightnet.errors import UnknownAirline, UnknownAirport
from flightnet.geo import airport_distance
from flightnet.models import Airline, Airport
from flightnet.network import analysis, routes, stats
from flightnet.network.graph import Graph
from flightnet.resolver import resolve

log = logging.getLogger("flightnet")


class FlightSystem:
    def __init__(self, airports, airlines, graph):
        self.airports = airports
        self.airlines = airlines
        self.graph = graph

    @classmethod
    def build(cls, airport_rows, airline_rows, flight_rows):
        """Build the system from plain rows, in dataset order."""
        airports = {}
        for row in airport_rows:
            airport = Airport(*row)
            if airport.code in airports:
                log.debug("Duplicate airport %s ignored", airport.code)
                continue
            airports[airport.code] = airport

        airlines = {}
        for row in airline_rows:
            airline = Airline(*row)
            airlines.setdefault(airline.code, airline)

        graph = Graph()
        for code in airports:
            graph.add_vertex(code)

        rejected = 0
        for source, target, airline in flight_rows:
            if source not in airports or target not in airports:
                rejected += 1
                continue
            km = airport_distance(airports[source], airports[target])
            graph.add_edge(source, target, airline, km)
        if rejected:
            log.warning("Skipped %d flights with unknown airports", rejected)

        log.info("Flight network: %d airports, %d airlines, %d flights",
                 len(graph), len(airlines), graph.edge_count())
        return cls(airports, airlines, graph)

    @classmethod
    def from_db(cls, conn):
        return cls.build(db.load_airports(conn), db.load_airlines(conn), db.load_flights(conn))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def airport(self, code):
        airport = self.airports.get(code.upper())
        if airport is None:
            raise UnknownAirport(code)
        return airport

    def resolve(self, query):
        return resolve(self.airports, query)

    def check_airlines(self, codes):
        """Validate an airline filter; returns the upper-cased codes."""
        checked = []
        for code in codes:
            code = code.upper()
            if code not in self.airlines:
                raise UnknownAirline(code)
            checked.append(code)
        return checked

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def airport_count(self):
        return len(self.graph)

    def flight_count(self):
        return stats.flight_count(self.graph)

    def airport_stats(self, code):
        """Direct-connection figures for one airport."""
        code = self.airport(code).code
        return {
            "flights": stats.flights_from(self.graph, code),
            "airlines": stats.airlines_from(self.graph, code),
            "countries": stats.destination_countries(self.graph, self.airports, [code]),
        }

    def city_countries(self, city, country):
        """Countries served directly from any airport of a city."""
        codes = resolve(self.airports, f"city:{city},{country}")
        return stats.destination_countries(self.graph, self.airports, codes)

    def flights_per_city(self):
        return stats.flights_per_city(self.graph, self.airports)

    def flights_per_airline(self):
        return stats.flights_per_airline(self.graph)

    def component_count(self):
        return analysis.component_count(self.graph)

    # ------------------------------------------------------------------
    # Reachability and network shape
    # ------------------------------------------------------------------

    def reachable(self, code, stops=None):
        """Reach summary from an airport, unbounded or with at most ``stops`` stops."""
        code = self.airport(code).code
        if stops is None:
            return analysis.reachable(self.graph, self.airports, code)
        return analysis.reachable_within(self.graph, self.airports, code, stops)

    def max_trip(self):
        return analysis.max_trip(self.graph)

    def top_traffic(self, k):
        return analysis.top_traffic(self.graph, k)

    def essential_airports(self):
        return analysis.articulation_points(self.graph)

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------

    def best_routes(self, source, destination, airlines=None, fewest_airlines=False):
        source = self.airport(source).code
        destination = self.airport(destination).code
        if airlines is not None:
            airlines = self.check_airlines(airlines)
        if fewest_airlines:
            return routes.fewest_airline_routes(self.graph, source, destination, airlines)
        return routes.best_routes(self.graph, source, destination, airlines)

    def shortest_distance_route(self, source, destination, airlines=None):
        source = self.airport(source).code
        destination = self.airport(destination).code
        if airlines is not None:
            airlines = self.check_airlines(airlines)
        return routes.shortest_distance_route(self.graph, source, destination, airlines)

    def best_options(self, source_query, destination_query, airlines=None, fewest_airlines=False):
        """Routes between every resolved source and destination airport.

        Returns a list of ``(source, destination, options)`` for each pair.
        """
        sources = self.resolve(source_query)
        destinations = self.resolve(destination_query)
        results = []
        for source in sources:
            for destination in destinations:
                options = self.best_routes(source, destination, airlines, fewest_airlines)
                results.append((source, destination, options))
        return results
