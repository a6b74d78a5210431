"""Immutable metadata records loaded from the dataset."""

from collections import namedtuple

Airport = namedtuple("Airport", "code name city country latitude longitude")
Airline = namedtuple("Airline", "code name callsign country")
