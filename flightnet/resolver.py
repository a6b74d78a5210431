"""Turn a location query into the airport codes it denotes.

Accepted forms:

    OPO                         airport code
    name:Francisco Sa Carneiro  airport display name
    city:Porto,Portugal         every airport of a city
    coord:41.24,-8.68           nearest airport(s) to a position
"""

from flightnet.errors import UnknownAirport
from flightnet.geo import haversine


def nearest_airports(airports, lat, lon):
    """Every airport tied for the minimum whole-kilometre distance to (lat, lon)."""
    best = None
    found = []
    for code, airport in airports.items():
        km = int(haversine(lat, lon, airport.latitude, airport.longitude))
        if best is None or km < best:
            best = km
            found = [code]
        elif km == best:
            found.append(code)
    return found


def airports_named(airports, name):
    return [code for code, a in airports.items() if a.name == name]


def airports_in_city(airports, city, country):
    return [
        code for code, a in airports.items()
        if a.city == city and a.country == country
    ]


def _split_pair(text):
    first, sep, second = text.partition(",")
    if not sep:
        raise UnknownAirport(text)
    return first.strip(), second.strip()


def resolve(airports, query):
    """Codes matching ``query``, in dataset order. Raises UnknownAirport if none."""
    query = query.strip()
    kind, sep, value = query.partition(":")
    kind = kind.lower() if sep else ""
    value = value.strip()

    if kind == "name":
        codes = airports_named(airports, value)
    elif kind == "city":
        city, country = _split_pair(value)
        codes = airports_in_city(airports, city, country)
    elif kind in ("coord", "coords"):
        lat, lon = _split_pair(value)
        try:
            codes = nearest_airports(airports, float(lat), float(lon))
        except ValueError:
            raise UnknownAirport(query) from None
    else:
        code = query.upper()
        codes = [code] if code in airports else []

    if not codes:
        raise UnknownAirport(query)
    return codes
