"""Lookup errors reported to callers of the query layer."""


class UnknownAirport(LookupError):
    """No airport matches the given code, name, city or position."""

    def __init__(self, query):
        super().__init__(f"Unknown airport '{query}'")
        self.query = query


class UnknownAirline(LookupError):
    def __init__(self, code):
        super().__init__(f"Unknown airline '{code}'")
        self.code = code


class UnknownSource(ValueError):
    """Raised for a dataset source name that is not registered."""
