"""
xyz-geojson — Horizontal Reprojection
=====================================
The batch transformer only needs "(x, y) in, (lon, lat) out, raise on
failure".  That contract is the :class:`Reprojector` protocol; the
default implementation is backed by :class:`pyproj.Transformer`.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from pyproj import Transformer
from pyproj.exceptions import ProjError

from xyz_geojson.shared.exceptions import CRSError, ReprojectionError
from xyz_geojson.shared.validators import Validators

logger = logging.getLogger("xyz_geojson.reprojection")


class Reprojector(Protocol):
    """Callable mapping a planar pair in the source CRS to the target CRS."""

    def __call__(self, x: float, y: float) -> tuple[float, float]:
        ...


class PyprojReprojector:
    """Reproject single coordinate pairs with one cached pyproj transformer.

    Axis order is forced to (x/easting/longitude, y/northing/latitude)
    regardless of how the CRS definitions order their axes.

    Args:
        from_crs: Source CRS (EPSG code, PROJ string or WKT).
        to_crs: Target CRS.

    Raises:
        CRSError: If either CRS is not recognised, or PROJ has no
            transformation between them.

    Example::

        reproject = PyprojReprojector("EPSG:32615", "EPSG:4326")
        lon, lat = reproject(440287.5, 4431748.25)
    """

    def __init__(self, from_crs: str, to_crs: str) -> None:
        self.from_crs = from_crs
        self.to_crs = to_crs

        source = Validators.assert_crs_valid(from_crs)
        target = Validators.assert_crs_valid(to_crs)
        try:
            self._transformer = Transformer.from_crs(source, target, always_xy=True)
        except ProjError as exc:
            raise CRSError(f"{from_crs} -> {to_crs}", str(exc)) from exc

        logger.debug("Using transformation: %s", self._transformer.description)

    def __call__(self, x: float, y: float) -> tuple[float, float]:
        try:
            lon, lat = self._transformer.transform(x, y, errcheck=True)
        except ProjError as exc:
            raise ReprojectionError(x, y, str(exc)) from exc

        # Some PROJ operations signal failure with inf instead of an error.
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise ReprojectionError(x, y, "transformation returned a non-finite result")
        return lon, lat

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.from_crs!r}, {self.to_crs!r})"
