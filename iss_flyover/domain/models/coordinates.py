from typing import NamedTuple


class Coordinates(NamedTuple):
    latitude: float
    longitude: float
