"""
xyz-geojson — Batch Transformer / Feature Emitter
=================================================
Reprojects parsed points, applies the optional vertical datum step and
emits one GeoJSON :class:`~xyz_geojson.models.Feature` per point.

Points are walked in contiguous batches of ``options.batch_size``.  A
batch is only a slice of the input list; nothing is carried from one
batch to the next, so the output does not depend on the batch size.

A point whose reprojection or vertical adjustment fails is dropped, an
error is logged with its line number, and the run moves on.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

from xyz_geojson.models import (
    FailedPoint,
    Feature,
    Point,
    TransformOptions,
    VerticalAdjustment,
)
from xyz_geojson.reprojection import PyprojReprojector, Reprojector
from xyz_geojson.vertical import VerticalDatumAdjuster

logger = logging.getLogger("xyz_geojson.transformer")


def iter_batches(points: Sequence[Point], batch_size: int) -> Iterator[Sequence[Point]]:
    """Yield contiguous slices of *points*; the last one may be shorter."""
    for start in range(0, len(points), batch_size):
        yield points[start:start + batch_size]


def vertical_status(options: TransformOptions) -> VerticalAdjustment:
    """Outcome kind of the vertical step for *options*."""
    if not options.transform_vertical_datum:
        return VerticalAdjustment.NOT_REQUESTED
    return VerticalDatumAdjuster.status(
        options.source_vertical_datum, options.target_vertical_datum
    )


def transform_points(
    points: Sequence[Point],
    from_crs: str,
    to_crs: str,
    options: TransformOptions | None = None,
    *,
    reprojector: Reprojector | None = None,
    adjuster: VerticalDatumAdjuster | None = None,
    on_failure: Callable[[FailedPoint], None] | None = None,
) -> list[Feature]:
    """Transform *points* into features, preserving input order.

    Args:
        points: Parsed points, in input order.
        from_crs: Source CRS of the planar coordinates.
        to_crs: Target CRS for the output coordinates.
        options: Batch size and vertical datum settings.
        reprojector: Replaces the default :class:`PyprojReprojector`
                     built from *from_crs* and *to_crs*.
        adjuster: Replaces the default :class:`VerticalDatumAdjuster`.
        on_failure: Called with a :class:`FailedPoint` for every dropped
                    point, in addition to the logged error.

    Returns:
        One feature per point that transformed successfully.

    Raises:
        CRSError: If the default reprojector cannot be built.
        VerticalDatumError: If ``options.strict_vertical_datum`` is set
            and the datum pair is not supported.
    """
    options = options or TransformOptions()
    reproject = reprojector or PyprojReprojector(from_crs, to_crs)
    adjuster = adjuster or VerticalDatumAdjuster()

    source_datum = options.source_vertical_datum
    target_datum = options.target_vertical_datum
    status = vertical_status(options)
    if status is VerticalAdjustment.UNSUPPORTED_PAIR:
        if options.strict_vertical_datum:
            adjuster.check_supported(source_datum, target_datum)
        logger.warning(
            "No vertical transformation for %s -> %s; elevations are passed through.",
            source_datum,
            target_datum,
        )

    features: list[Feature] = []
    for batch_number, batch in enumerate(iter_batches(points, options.batch_size), start=1):
        logger.debug("Batch %d: %d point(s)", batch_number, len(batch))

        for point in batch:
            try:
                lon, lat = reproject(point.x, point.y)
                elevation = point.z
                if options.transform_vertical_datum:
                    elevation = adjuster.adjust(point.z, lat, lon, source_datum, target_datum)
            except Exception as exc:  # any plug-in failure only drops this point
                reason = getattr(exc, "message", None) or str(exc)
                logger.error(
                    "Error transforming point at line %d: %s", point.line_number, reason
                )
                if on_failure is not None:
                    on_failure(FailedPoint(point, reason))
                continue

            features.append(Feature(lon, lat, elevation, point))

    return features
