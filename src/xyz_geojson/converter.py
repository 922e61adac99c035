"""
xyz-geojson — Conversion Entry Point
====================================
Parse → reproject → emit, with every fatal check done before the first
line is parsed.

Two kinds of outcome:

* **Fatal** — blank text or CRS identifier, invalid options, a CRS pyproj
  does not recognise, or (in strict mode) an unsupported vertical datum
  pair.  Raised as an exception; nothing is produced.
* **Recoverable** — malformed lines and points that fail to transform.
  Logged, collected into the :class:`~xyz_geojson.models.ConversionResult`
  and left out of the FeatureCollection.

Typical usage::

    from xyz_geojson import convert

    collection = convert(xyz_text, "EPSG:32615", "EPSG:4326")
    print(collection.to_json(indent=2))
"""

from __future__ import annotations

import logging

from xyz_geojson.models import (
    ConversionResult,
    FailedPoint,
    FeatureCollection,
    SkippedLine,
    TransformOptions,
)
from xyz_geojson.parser import parse_xyz
from xyz_geojson.reprojection import PyprojReprojector, Reprojector
from xyz_geojson.shared.validators import Validators
from xyz_geojson.transformer import transform_points, vertical_status
from xyz_geojson.vertical import GeoidModel, VerticalDatumAdjuster

logger = logging.getLogger("xyz_geojson.converter")


def convert_with_report(
    xyz_text: str,
    from_crs: str,
    to_crs: str,
    options: TransformOptions | None = None,
    *,
    reprojector: Reprojector | None = None,
    geoid: GeoidModel | None = None,
) -> ConversionResult:
    """Convert XYZ text and return the collection with all diagnostics.

    Args:
        xyz_text: Multi-line XYZ text.
        from_crs: CRS of the input X/Y values (e.g. ``"EPSG:32615"``).
        to_crs: CRS wanted for the output (e.g. ``"EPSG:4326"``).
        options: Transform options; defaults to ``TransformOptions()``.
        reprojector: Replaces the pyproj-backed reprojector.
        geoid: Geoid model for the vertical step; defaults to the zero stub.

    Raises:
        MissingParameterError: If *xyz_text*, *from_crs* or *to_crs* is blank.
        CRSError: If the default reprojector rejects a CRS identifier.
        VerticalDatumError: In strict mode, for an unsupported datum pair.
    """
    Validators.assert_not_blank(xyz_text, "xyz_text")
    Validators.assert_not_blank(from_crs, "from_crs")
    Validators.assert_not_blank(to_crs, "to_crs")

    options = options or TransformOptions()
    adjuster = VerticalDatumAdjuster(geoid)
    if options.strict_vertical_datum and options.transform_vertical_datum:
        adjuster.check_supported(options.source_vertical_datum, options.target_vertical_datum)
    reproject = reprojector or PyprojReprojector(from_crs, to_crs)

    skipped: list[SkippedLine] = []
    failed: list[FailedPoint] = []

    points = parse_xyz(xyz_text, on_skip=skipped.append)
    features = transform_points(
        points,
        from_crs,
        to_crs,
        options,
        reprojector=reproject,
        adjuster=adjuster,
        on_failure=failed.append,
    )

    result = ConversionResult(
        collection=FeatureCollection(tuple(features)),
        from_crs=from_crs,
        to_crs=to_crs,
        points_parsed=len(points),
        skipped_lines=tuple(skipped),
        failed_points=tuple(failed),
        vertical=vertical_status(options),
    )

    if result.all_failed:
        logger.error(
            "All %d point(s) failed to transform from %s to %s; "
            "check that the source CRS matches the input coordinates.",
            result.points_parsed,
            from_crs,
            to_crs,
        )

    logger.info(result.summary())
    return result


def convert(
    xyz_text: str,
    from_crs: str,
    to_crs: str,
    options: TransformOptions | None = None,
    *,
    reprojector: Reprojector | None = None,
    geoid: GeoidModel | None = None,
) -> FeatureCollection:
    """Convert XYZ text to a GeoJSON FeatureCollection.

    Same arguments and fatal errors as :func:`convert_with_report`; the
    per-line and per-point diagnostics are only logged.
    """
    return convert_with_report(
        xyz_text, from_crs, to_crs, options, reprojector=reprojector, geoid=geoid
    ).collection
