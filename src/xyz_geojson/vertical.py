"""
xyz-geojson — Vertical Datum Adjustment
=======================================
Maps an elevation from one vertical datum to another at a geographic
position.

Only ``NAVD88 → WGS84`` (orthometric to ellipsoidal height) is known:
``h = H + N`` where ``N`` is the geoid offset at the point.  The offset
comes from a pluggable :class:`GeoidModel`; the bundled
:class:`ZeroGeoidModel` is a declared stub that always returns ``0.0``
until a real geoid grid model is plugged in.
"""

from __future__ import annotations

import logging
from typing import Protocol

from xyz_geojson.models import VerticalAdjustment
from xyz_geojson.shared.exceptions import VerticalDatumError

logger = logging.getLogger("xyz_geojson.vertical")

KNOWN_DATUM_PAIRS: frozenset[tuple[str, str]] = frozenset({("NAVD88", "WGS84")})


class GeoidModel(Protocol):
    """Geoid height lookup: geographic position in, scalar offset (m) out."""

    def offset(self, latitude: float, longitude: float) -> float:
        ...


class ZeroGeoidModel:
    """Stub geoid model with a constant zero offset everywhere."""

    def offset(self, latitude: float, longitude: float) -> float:
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class VerticalDatumAdjuster:
    """Apply geoid offsets for known vertical datum pairs.

    Args:
        geoid: Geoid model used for the offset.  Defaults to
               :class:`ZeroGeoidModel`.
    """

    def __init__(self, geoid: GeoidModel | None = None) -> None:
        self.geoid: GeoidModel = geoid if geoid is not None else ZeroGeoidModel()

    @staticmethod
    def status(source: str | None, target: str | None) -> VerticalAdjustment:
        """Classify a datum pair without touching any coordinates.

        Returns:
            ``NOT_REQUESTED`` if either name is empty, ``APPLIED`` for a
            known pair, ``UNSUPPORTED_PAIR`` otherwise.
        """
        if not source or not target:
            return VerticalAdjustment.NOT_REQUESTED
        if (source, target) in KNOWN_DATUM_PAIRS:
            return VerticalAdjustment.APPLIED
        return VerticalAdjustment.UNSUPPORTED_PAIR

    def check_supported(self, source: str | None, target: str | None) -> None:
        """Raise :class:`VerticalDatumError` for an unsupported pair."""
        if self.status(source, target) is VerticalAdjustment.UNSUPPORTED_PAIR:
            raise VerticalDatumError(source, target)

    def adjust(
        self,
        z: float,
        latitude: float,
        longitude: float,
        source: str | None,
        target: str | None,
    ) -> float:
        """Return *z* expressed in the *target* vertical datum.

        Unknown pairs and missing datum names return *z* unchanged.
        """
        if self.status(source, target) is not VerticalAdjustment.APPLIED:
            return z
        return z + self.geoid.offset(latitude, longitude)


_default_adjuster = VerticalDatumAdjuster()


def vertical_adjust(
    z: float,
    latitude: float,
    longitude: float,
    source: str | None,
    target: str | None,
) -> float:
    """Module-level shortcut for :meth:`VerticalDatumAdjuster.adjust` with
    the stub geoid model."""
    return _default_adjuster.adjust(z, latitude, longitude, source, target)
