"""Shared fixtures for noesis tests."""

from __future__ import annotations

import pytest

from noesis import Bounds, Coordinates


@pytest.fixture
def box() -> Bounds:
    """A 20 x 20 degree box centred on the origin."""
    return Bounds(Coordinates(10.0, 10.0), Coordinates(-10.0, -10.0))


@pytest.fixture
def antimeridian_box() -> Bounds:
    """A 20 x 20 degree box straddling the antimeridian."""
    return Bounds(Coordinates(10.0, -170.0), Coordinates(-10.0, 170.0))


@pytest.fixture
def cities() -> dict[str, Coordinates]:
    """A handful of well-known city coordinates."""
    return {
        "berlin": Coordinates(52.52, 13.405),
        "paris": Coordinates(48.857, 2.352),
        "london": Coordinates(51.507, -0.128),
        "new_york": Coordinates(40.713, -74.006),
        "tokyo": Coordinates(35.690, 139.692),
        "sydney": Coordinates(-33.869, 151.209),
    }
