"""Distance queries over many points at once."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .geometry import Coordinates, distance, rhumb_distance

_KM_PER_DEGREE = 111.0


@dataclass(frozen=True)
class SpatialResult:
    """A spatial proximity result with great-circle distance."""

    index: int
    """Position of the point in the input sequence."""
    point: Coordinates
    """The matched point, as given."""
    distance_km: float
    """Great-circle distance in kilometres."""


def distances(origin: Coordinates, points: Iterable[Coordinates], *, rhumb: bool = False) -> list[float]:
    """Distances in kilometres from *origin* to each of *points*.

    Args:
        origin: Reference point.
        points: Points to measure to.
        rhumb: Measure along rhumb lines instead of great circles.
    """
    measure = rhumb_distance if rhumb else distance
    return [measure(origin, p) for p in points]


def nearest(
    origin: Coordinates,
    points: Sequence[Coordinates],
    *,
    limit: int = 5,
    max_distance_km: float | None = None,
) -> list[SpatialResult]:
    """Find the points nearest to *origin*.

    Uses great-circle distance.  A bounding-box pre-filter is applied when
    *max_distance_km* is specified to avoid computing distances for points
    that are obviously too far.

    Args:
        origin: Reference point.
        points: Candidate points.
        limit: Maximum results to return.
        max_distance_km: Exclude points farther than this.

    Returns:
        Up to *limit* results, closest first.

    Raises:
        ValueError: If *limit* is less than 1.
    """
    if limit < 1:
        msg = f"limit must be at least 1, got {limit}"
        raise ValueError(msg)

    # Bounding-box pre-filter (~111 km per degree of latitude)
    if max_distance_km is not None:
        delta_deg = max_distance_km / _KM_PER_DEGREE + 1.0  # small margin
        lat_min = origin.lat - delta_deg
        lat_max = origin.lat + delta_deg
        # Longitude degrees shrink toward the poles; size by the most poleward latitude in the window
        if lat_min <= -90.0 or lat_max >= 90.0:
            lng_delta = 360.0
        else:
            cos_lat = math.cos(math.radians(max(abs(lat_min), abs(lat_max))))
            lng_delta = delta_deg / max(cos_lat, 0.01)
        # Windows reaching a pole or wrapping the antimeridian skip the longitude filter
        filter_lng = lng_delta < 180.0 and -180.0 <= origin.lng - lng_delta and origin.lng + lng_delta <= 180.0
        lng_min = origin.lng - lng_delta
        lng_max = origin.lng + lng_delta
    else:
        lat_min = lat_max = lng_min = lng_max = 0.0  # unused
        filter_lng = False

    results: list[SpatialResult] = []
    for i, point in enumerate(points):
        if max_distance_km is not None:
            if point.lat < lat_min or point.lat > lat_max:
                continue
            if filter_lng and (point.lng < lng_min or point.lng > lng_max):
                continue
        dist = distance(origin, point)
        if max_distance_km is not None and dist > max_distance_km:
            continue
        results.append(SpatialResult(index=i, point=point, distance_km=dist))

    results.sort(key=lambda r: r.distance_km)
    return results[:limit]


def distance_series(
    origin: Coordinates,
    points: Sequence[Coordinates],
    *,
    labels: Sequence[Any] | None = None,
) -> Any:  # pd.Series, typed as Any for the optional dependency
    """Great-circle distances from *origin* as a pandas Series.

    Args:
        origin: Reference point.
        points: Points to measure to.
        labels: Optional index labels, one per point. Defaults to a
            ``RangeIndex``.

    Returns:
        pandas Series of distances in kilometres, named ``"distance_km"``.

    Raises:
        ImportError: If pandas is not installed.
        ValueError: If *labels* does not match *points* in length.
    """
    try:
        import pandas
    except ImportError:
        msg = "pandas is required for distance_series(). Install with: pip install noesis[dataframes]"
        raise ImportError(msg) from None

    if labels is not None and len(labels) != len(points):
        msg = f"Got {len(labels)} labels for {len(points)} points"
        raise ValueError(msg)

    return pandas.Series(distances(origin, points), index=labels, name="distance_km", dtype="float64")
