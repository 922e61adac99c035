"""Shared fixtures for the xyz-geojson test suite."""

from __future__ import annotations

import pytest

from xyz_geojson.shared.exceptions import ReprojectionError

# UTM Zone 15N survey points (central Iowa), one per line.
SURVEY_XYZ = (
    "440287.50 4431748.25 125.3\n"
    "440291.20 4431752.80 126.1\n"
    "440295.10 4431757.50 124.8\n"
)


class ShiftReprojector:
    """Test reprojector: shifts coordinates and rejects listed X values."""

    def __init__(self, reject_x: set[float] | None = None) -> None:
        self.reject_x = reject_x or set()
        self.calls: list[tuple[float, float]] = []

    def __call__(self, x: float, y: float) -> tuple[float, float]:
        self.calls.append((x, y))
        if x in self.reject_x:
            raise ReprojectionError(x, y, "outside the area of use")
        return x / 1000.0, y / 1000.0


class ConstantGeoid:
    """Geoid model returning a fixed offset and recording lookups."""

    def __init__(self, offset: float) -> None:
        self.value = offset
        self.lookups: list[tuple[float, float]] = []

    def offset(self, latitude: float, longitude: float) -> float:
        self.lookups.append((latitude, longitude))
        return self.value


@pytest.fixture()
def survey_xyz() -> str:
    return SURVEY_XYZ


@pytest.fixture()
def shift_reprojector() -> ShiftReprojector:
    return ShiftReprojector()
