"""
Geodesy on a spherical earth.

Great-circle and rhumb-line calculations, coordinate normalization and
axis-aligned bounding boxes on latitude/longitude coordinates.

Coordinates are always latitude first. Values are in degrees unless a
function says otherwise.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .numeric import fmod

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6372.8
"""Mean earth radius used for all distance calculations, in kilometres."""

RHUMB_EPSILON = 1e-12
"""Isometric-latitude differences below this are treated as an east-west line."""

PI = math.pi
PI_HALF = math.pi / 2
PI_FOURTH = math.pi / 4


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    Immutable latitude/longitude pair.

    Examples:
        >>> c = Coordinates(52.52, 13.405)
        >>> c.lat, c.lng
        (52.52, 13.405)
        >>> Coordinates.from_tuple((48.85, 2.35))
        Coordinates(lat=48.85, lng=2.35)
    """

    lat: float
    lng: float

    def as_tuple(self) -> tuple[float, float]:
        """Return as ``(lat, lng)`` tuple."""
        return (self.lat, self.lng)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Coordinates:
        """Create from a ``(lat, lng)`` tuple or list."""
        return cls(float(t[0]), float(t[1]))


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Axis-aligned box given by its north-east and south-west corners.

    A south-west longitude greater than the north-east longitude means the
    box crosses the antimeridian.

    Examples:
        >>> box = Bounds(Coordinates(10, 10), Coordinates(-10, -10))
        >>> box.north_east
        Coordinates(lat=10, lng=10)
    """

    north_east: Coordinates
    south_west: Coordinates


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def lat(coordinates: Coordinates) -> float:
    """Return the latitude of *coordinates*."""
    return coordinates.lat


def lng(coordinates: Coordinates) -> float:
    """Return the longitude of *coordinates*."""
    return coordinates.lng


def north_east(bounds: Bounds) -> Coordinates:
    """Return the north-east corner of *bounds*."""
    return bounds.north_east


def south_west(bounds: Bounds) -> Coordinates:
    """Return the south-west corner of *bounds*."""
    return bounds.south_west


# ---------------------------------------------------------------------------
# Conversion and normalization
# ---------------------------------------------------------------------------


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.radians(degrees)


def rad2deg(radians: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(radians)


def deg2rad_coordinates(coordinates: Coordinates) -> Coordinates:
    """Convert both fields of *coordinates* from degrees to radians."""
    return Coordinates(deg2rad(coordinates.lat), deg2rad(coordinates.lng))


def rad2deg_coordinates(coordinates: Coordinates) -> Coordinates:
    """Convert both fields of *coordinates* from radians to degrees."""
    return Coordinates(rad2deg(coordinates.lat), rad2deg(coordinates.lng))


def normalize_lat(latitude: float) -> float:
    """Cap a latitude to ``[-90, 90]``. Out-of-range values are clamped, not wrapped.

    Examples:
        >>> normalize_lat(100), normalize_lat(-100), normalize_lat(45)
        (90.0, -90.0, 45.0)
    """
    return float(max(-90, min(90, latitude)))


def normalize_lng(longitude: float) -> float:
    """Wrap a longitude to ``[-180, 180]``.

    Examples:
        >>> normalize_lng(190), normalize_lng(-190), normalize_lng(180)
        (-170.0, 170.0, 180.0)
    """
    wrapped = fmod(longitude, 360)
    if wrapped == 180:
        return 180.0
    if wrapped < -180:
        return wrapped + 360.0
    if wrapped > 180:
        return wrapped - 360.0
    return float(wrapped)


def normalize_bearing(bearing: float) -> float:
    """Wrap a bearing to ``[0, 360)``.

    Examples:
        >>> normalize_bearing(-90), normalize_bearing(450)
        (270.0, 90.0)
    """
    return fmod(fmod(bearing, 360) + 360, 360)


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------


def lng_span(west: float, east: float) -> float:
    """Eastward longitude span from *west* to *east*, in degrees.

    Examples:
        >>> lng_span(-10, 10), lng_span(20, 10)
        (20, 350)
    """
    if west > east:
        return east + 360 - west
    return east - west


def crosses_antimeridian(bounds: Bounds) -> bool:
    """Whether *bounds* wraps around the ``+/-180`` meridian."""
    return bounds.south_west.lng > bounds.north_east.lng


def center(bounds: Bounds) -> Coordinates:
    """Center point of *bounds*.

    Examples:
        >>> center(Bounds(Coordinates(10, 20), Coordinates(-10, -20)))
        Coordinates(lat=0.0, lng=0.0)
        >>> center(Bounds(Coordinates(10, -170), Coordinates(-10, 170)))
        Coordinates(lat=0.0, lng=180.0)
    """
    ne, sw = bounds.north_east, bounds.south_west
    if crosses_antimeridian(bounds):
        span = lng_span(sw.lng, ne.lng)
        mid_lng = normalize_lng(sw.lng + span / 2)
    else:
        mid_lng = (sw.lng + ne.lng) / 2
    return Coordinates((sw.lat + ne.lat) / 2, mid_lng)


def _contains_lng(bounds: Bounds, longitude: float) -> bool:
    ne_lng, sw_lng = bounds.north_east.lng, bounds.south_west.lng
    if crosses_antimeridian(bounds):
        return longitude <= ne_lng or longitude >= sw_lng
    return sw_lng <= longitude <= ne_lng


def contains_point(bounds: Bounds, point: Coordinates) -> bool:
    """Whether *point* lies inside *bounds* (edges included).

    Examples:
        >>> box = Bounds(Coordinates(10, 10), Coordinates(-10, -10))
        >>> contains_point(box, Coordinates(0, 0)), contains_point(box, Coordinates(20, 0))
        (True, False)
    """
    if point.lat < bounds.south_west.lat or point.lat > bounds.north_east.lat:
        return False
    return _contains_lng(bounds, point.lng)


def extend(bounds: Bounds, point: Coordinates) -> Bounds:
    """Return new bounds grown to include *point*.

    Latitudes simply widen. When the longitude is outside the box, the edge
    whose extension adds the smaller span moves; ties move the north-east edge.

    Examples:
        >>> box = Bounds(Coordinates(10, 10), Coordinates(-10, -10))
        >>> extend(box, Coordinates(0, 20)).north_east
        Coordinates(lat=10, lng=20)
        >>> extend(box, Coordinates(0, -20)).south_west
        Coordinates(lat=-10, lng=-20)
    """
    ne, sw = bounds.north_east, bounds.south_west
    ne_lat = max(ne.lat, point.lat)
    sw_lat = min(sw.lat, point.lat)
    if _contains_lng(bounds, point.lng):
        return Bounds(Coordinates(ne_lat, ne.lng), Coordinates(sw_lat, sw.lng))
    if lng_span(sw.lng, point.lng) <= lng_span(point.lng, ne.lng):
        return Bounds(Coordinates(ne_lat, point.lng), Coordinates(sw_lat, sw.lng))
    return Bounds(Coordinates(ne_lat, ne.lng), Coordinates(sw_lat, point.lng))


def bounds_from_points(points: Iterable[Coordinates]) -> Bounds:
    """Smallest bounds containing every point, built by repeated :func:`extend`.

    Args:
        points: One or more coordinates.

    Returns:
        Bounds enclosing all *points*.

    Raises:
        ValueError: If *points* is empty.
    """
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        msg = "bounds_from_points() requires at least one point"
        raise ValueError(msg) from None
    bounds = Bounds(first, first)
    for point in it:
        bounds = extend(bounds, point)
    return bounds


# ---------------------------------------------------------------------------
# Distances and rhumb lines
# ---------------------------------------------------------------------------


def distance(start: Coordinates, dest: Coordinates, *, radius: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance between two points in kilometres.

    Uses the Haversine formula. Both points are in degrees.

    Args:
        start: Starting point.
        dest: Destination point.
        radius: Sphere radius in kilometres.

    Returns:
        Distance in kilometres.

    Examples:
        >>> round(distance(Coordinates(0, 0), Coordinates(0, 90)), 1)
        10010.4
    """
    d_lng = deg2rad(dest.lng - start.lng)
    d_lat = deg2rad(dest.lat - start.lat)
    start_lat_r = deg2rad(start.lat)
    dest_lat_r = deg2rad(dest.lat)
    a = math.sin(d_lat / 2) ** 2 + math.cos(start_lat_r) * math.cos(dest_lat_r) * math.sin(d_lng / 2) ** 2
    # Clamp to 1.0 to avoid math domain error from floating-point
    # imprecision for near-antipodal points.
    c = 2 * math.asin(math.sqrt(min(1.0, a)))
    return radius * c


def _shortest_lng_delta(d_lng: float) -> float:
    """Take the shorter way round when a longitude delta exceeds pi radians."""
    if abs(d_lng) > PI:
        if d_lng > 0:
            return -(2 * PI - d_lng)
        return 2 * PI + d_lng
    return d_lng


def _is_pole(lat_r: float) -> bool:
    return abs(lat_r) == PI_HALF


def _isometric_delta(start_lat_r: float, dest_lat_r: float) -> float:
    """Difference in isometric latitude (the "projected" latitude delta)."""
    return math.log(math.tan(dest_lat_r / 2 + PI_FOURTH) / math.tan(start_lat_r / 2 + PI_FOURTH))


def _stretch_factor(d_lat: float, start_lat_r: float, dest_lat_r: float) -> float:
    """Ratio of true to projected latitude change along a rhumb line.

    Falls back to ``cos(start_lat)`` at a pole and on east-west lines, where
    the isometric latitude difference vanishes.
    """
    if _is_pole(start_lat_r) or _is_pole(dest_lat_r):
        logger.debug("Rhumb line touches a pole; using cos(start latitude) as stretch factor")
        return math.cos(start_lat_r)
    d_psi = _isometric_delta(start_lat_r, dest_lat_r)
    if abs(d_psi) < RHUMB_EPSILON:
        logger.debug("East-west rhumb line (d_psi=%r); using cos(start latitude) as stretch factor", d_psi)
        return math.cos(start_lat_r)
    return d_lat / d_psi


def rhumb_distance(start: Coordinates, dest: Coordinates, *, radius: float = EARTH_RADIUS_KM) -> float:
    """Distance along the rhumb line (constant bearing) between two points.

    Partially based on `Movable Type Scripts
    <https://www.movable-type.co.uk/scripts/latlong.html>`_ by Chris Veness.

    Args:
        start: Starting point, in degrees.
        dest: Destination point, in degrees.
        radius: Sphere radius in kilometres.

    Returns:
        Distance in kilometres.
    """
    d_lng = _shortest_lng_delta(deg2rad(abs(dest.lng - start.lng)))
    d_lat = deg2rad(dest.lat - start.lat)
    q = _stretch_factor(d_lat, deg2rad(start.lat), deg2rad(dest.lat))
    delta = math.sqrt(d_lat * d_lat + q * q * d_lng * d_lng)
    return radius * delta


def rhumb_bearing_to(start: Coordinates, dest: Coordinates) -> float:
    """Constant bearing from *start* to *dest* along a rhumb line.

    Bearings starting or ending at a pole are reported as ``0.0``.

    Args:
        start: Starting point, in degrees.
        dest: Destination point, in degrees.

    Returns:
        Bearing in degrees, in ``[0, 360)``.

    Examples:
        >>> rhumb_bearing_to(Coordinates(0, 0), Coordinates(0, 10))
        90.0
        >>> rhumb_bearing_to(Coordinates(90, 0), Coordinates(0, 10))
        0.0
    """
    start_r = deg2rad_coordinates(start)
    dest_r = deg2rad_coordinates(dest)
    if _is_pole(start_r.lat) or _is_pole(dest_r.lat):
        return normalize_bearing(0.0)
    d_lng = _shortest_lng_delta(dest_r.lng - start_r.lng)
    d_psi = _isometric_delta(start_r.lat, dest_r.lat)
    return normalize_bearing(rad2deg(math.atan2(d_lng, d_psi)))


def rhumb_destination_point(
    start: Coordinates,
    bearing: float,
    distance_km: float,
    *,
    radius: float = EARTH_RADIUS_KM,
) -> Coordinates:
    """Destination reached from *start* on a constant *bearing*.

    Holding a constant bearing spirals toward a pole; a path running past a
    pole is reflected back onto the sphere.

    Based on `Movable Type Scripts
    <https://www.movable-type.co.uk/scripts/latlong.html>`_ by Chris Veness.

    Args:
        start: Starting point, in degrees.
        bearing: Bearing in degrees clockwise from north.
        distance_km: Distance to travel in kilometres.
        radius: Sphere radius in kilometres.

    Returns:
        Destination coordinates in degrees, longitude in ``[-180, 180)``.
    """
    delta = distance_km / radius
    start_r = deg2rad_coordinates(start)
    bearing_r = deg2rad(bearing)

    d_phi = delta * math.cos(bearing_r)
    dest_lat_r = start_r.lat + d_phi
    if abs(dest_lat_r) > PI_HALF:
        logger.debug("Rhumb line passes a pole; reflecting latitude %r", dest_lat_r)
        dest_lat_r = PI - dest_lat_r if dest_lat_r > 0 else -PI - dest_lat_r

    q = _stretch_factor(d_phi, start_r.lat, dest_lat_r)
    d_lambda = delta * math.sin(bearing_r) / q
    dest_lng_r = fmod(start_r.lng + d_lambda + 3 * PI, 2 * PI) - PI
    return Coordinates(rad2deg(dest_lat_r), rad2deg(dest_lng_r))
