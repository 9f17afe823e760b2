"""
noesis: Geodesy formulas on latitude/longitude coordinates.

Great-circle and rhumb-line distances, rhumb-line bearings and
destinations, coordinate normalization and bounding boxes on a
spherical earth. Everything is a pure function over immutable values.

Basic usage:
    from noesis import Bounds, Coordinates, distance, rhumb_bearing_to

    berlin = Coordinates(52.52, 13.405)
    paris = Coordinates(48.857, 2.352)

    distance(berlin, paris)          # great-circle kilometres
    rhumb_bearing_to(berlin, paris)  # constant bearing in degrees

    box = Bounds(north_east=Coordinates(55, 15), south_west=Coordinates(47, 2))
    contains_point(box, berlin)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Exceptions
from .exceptions import DivisionByZeroError, NoesisError

# Geodesy
from .geometry import (
    EARTH_RADIUS_KM,
    Bounds,
    Coordinates,
    bounds_from_points,
    center,
    contains_point,
    crosses_antimeridian,
    deg2rad,
    deg2rad_coordinates,
    distance,
    extend,
    lat,
    lng,
    lng_span,
    normalize_bearing,
    normalize_lat,
    normalize_lng,
    north_east,
    rad2deg,
    rad2deg_coordinates,
    rhumb_bearing_to,
    rhumb_destination_point,
    rhumb_distance,
    south_west,
)

# Modular arithmetic
from .numeric import ceiling, floor, fmod

# Batch queries
from .spatial import SpatialResult, distance_series, distances, nearest

__all__ = [
    "EARTH_RADIUS_KM",
    "Bounds",
    "Coordinates",
    "DivisionByZeroError",
    "NoesisError",
    "SpatialResult",
    "__version__",
    "bounds_from_points",
    "ceiling",
    "center",
    "contains_point",
    "crosses_antimeridian",
    "deg2rad",
    "deg2rad_coordinates",
    "distance",
    "distance_series",
    "distances",
    "extend",
    "floor",
    "fmod",
    "lat",
    "lng",
    "lng_span",
    "nearest",
    "normalize_bearing",
    "normalize_lat",
    "normalize_lng",
    "north_east",
    "rad2deg",
    "rad2deg_coordinates",
    "rhumb_bearing_to",
    "rhumb_destination_point",
    "rhumb_distance",
    "south_west",
]
