"""
Tests — Vertical Datum Adjustment
=================================
Unit tests for :class:`~xyz_geojson.vertical.VerticalDatumAdjuster` and
:func:`~xyz_geojson.vertical.vertical_adjust`.
"""

from __future__ import annotations

import pytest

from conftest import ConstantGeoid
from xyz_geojson.models import VerticalAdjustment
from xyz_geojson.shared.exceptions import VerticalDatumError
from xyz_geojson.vertical import VerticalDatumAdjuster, ZeroGeoidModel, vertical_adjust


class TestStatus:
    @pytest.mark.parametrize(
        "source, target",
        [(None, "WGS84"), ("NAVD88", None), ("", "WGS84"), ("NAVD88", ""), (None, None)],
    )
    def test_missing_name_not_requested(self, source, target) -> None:
        assert VerticalDatumAdjuster.status(source, target) is VerticalAdjustment.NOT_REQUESTED

    def test_known_pair_applied(self) -> None:
        assert VerticalDatumAdjuster.status("NAVD88", "WGS84") is VerticalAdjustment.APPLIED

    @pytest.mark.parametrize("source, target", [("WGS84", "NAVD88"), ("NGVD29", "WGS84"), ("navd88", "wgs84")])
    def test_other_pairs_unsupported(self, source: str, target: str) -> None:
        assert (
            VerticalDatumAdjuster.status(source, target) is VerticalAdjustment.UNSUPPORTED_PAIR
        )


class TestAdjust:
    def test_known_pair_adds_geoid_offset(self) -> None:
        geoid = ConstantGeoid(-27.5)
        adjuster = VerticalDatumAdjuster(geoid)

        assert adjuster.adjust(100.0, 40.0, -93.7, "NAVD88", "WGS84") == pytest.approx(72.5)
        assert geoid.lookups == [(40.0, -93.7)]

    def test_unsupported_pair_passes_through(self) -> None:
        geoid = ConstantGeoid(-27.5)
        adjuster = VerticalDatumAdjuster(geoid)

        assert adjuster.adjust(100.0, 40.0, -93.7, "NGVD29", "WGS84") == 100.0
        assert geoid.lookups == []

    def test_missing_datum_passes_through(self) -> None:
        adjuster = VerticalDatumAdjuster(ConstantGeoid(5.0))
        assert adjuster.adjust(12.25, 0.0, 0.0, "NAVD88", None) == 12.25

    def test_default_geoid_is_zero_stub(self) -> None:
        adjuster = VerticalDatumAdjuster()
        assert isinstance(adjuster.geoid, ZeroGeoidModel)
        assert vertical_adjust(125.3, 40.0, -93.7, "NAVD88", "WGS84") == 125.3

    def test_check_supported_raises_for_unknown_pair(self) -> None:
        with pytest.raises(VerticalDatumError, match="NGVD29"):
            VerticalDatumAdjuster().check_supported("NGVD29", "WGS84")

    def test_check_supported_accepts_known_and_missing(self) -> None:
        adjuster = VerticalDatumAdjuster()
        adjuster.check_supported("NAVD88", "WGS84")
        adjuster.check_supported(None, None)
