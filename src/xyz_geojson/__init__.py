"""
xyz-geojson
===========
Convert line-oriented XYZ survey records to a GeoJSON FeatureCollection,
reprojecting X/Y with pyproj and optionally adjusting Z between vertical
datums.

Public API::

    from xyz_geojson import convert, convert_with_report, TransformOptions
"""

from xyz_geojson.converter import convert, convert_with_report
from xyz_geojson.models import (
    ConversionResult,
    FailedPoint,
    Feature,
    FeatureCollection,
    Point,
    SkippedLine,
    TransformOptions,
    VerticalAdjustment,
)
from xyz_geojson.parser import parse_xyz
from xyz_geojson.reprojection import PyprojReprojector, Reprojector
from xyz_geojson.transformer import transform_points
from xyz_geojson.vertical import (
    GeoidModel,
    VerticalDatumAdjuster,
    ZeroGeoidModel,
    vertical_adjust,
)

__all__ = [
    "convert",
    "convert_with_report",
    "parse_xyz",
    "transform_points",
    "vertical_adjust",
    "ConversionResult",
    "FailedPoint",
    "Feature",
    "FeatureCollection",
    "GeoidModel",
    "Point",
    "PyprojReprojector",
    "Reprojector",
    "SkippedLine",
    "TransformOptions",
    "VerticalAdjustment",
    "VerticalDatumAdjuster",
    "ZeroGeoidModel",
]
__version__ = "1.0.0"
