"""
xyz-geojson — Data Model
========================
Value types that flow through the conversion pipeline.

Classes:
    Point               One validated survey record with its source line.
    Feature             GeoJSON Point feature built from a reprojected Point.
    FeatureCollection   Ordered, immutable GeoJSON FeatureCollection.
    TransformOptions    Per-call configuration for the batch transformer.
    VerticalAdjustment  Outcome kind of the vertical datum step.
    SkippedLine         Diagnostic for an input line the parser rejected.
    FailedPoint         Diagnostic for a point the transformer dropped.
    ConversionResult    Collection plus every diagnostic of one run.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from xyz_geojson.shared.exceptions import InputValidationError
from xyz_geojson.shared.validators import Validators

DEFAULT_BATCH_SIZE = 10_000


# ---------------------------------------------------------------------------
# Geometry records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point:
    """A parsed XYZ record.

    Attributes:
        x: Planar X / easting in the source CRS.
        y: Planar Y / northing in the source CRS.
        z: Elevation as read from the input.
        line_number: 1-based line of the input text the record came from.
    """

    x: float
    y: float
    z: float
    line_number: int


@dataclass(frozen=True)
class Feature:
    """GeoJSON Point feature carrying the provenance of its source record.

    Attributes:
        longitude: Reprojected X in the target CRS.
        latitude: Reprojected Y in the target CRS.
        elevation: Z after the optional vertical datum adjustment.
        source: The :class:`Point` this feature was built from.
    """

    longitude: float
    latitude: float
    elevation: float
    source: Point

    @property
    def coordinates(self) -> list[float]:
        return [self.longitude, self.latitude, self.elevation]

    def to_dict(self) -> dict[str, Any]:
        """Return the feature as a GeoJSON-compatible dict."""
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": self.coordinates},
            "properties": {
                "originalX": self.source.x,
                "originalY": self.source.y,
                "originalZ": self.source.z,
                "sourceLineNumber": self.source.line_number,
            },
        }

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()


@dataclass(frozen=True)
class FeatureCollection:
    """Ordered collection of features; the sole output of a conversion."""

    features: tuple[Feature, ...] = ()

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def to_dict(self) -> dict[str, Any]:
        """Return the collection as a GeoJSON-compatible dict."""
        return {
            "type": "FeatureCollection",
            "features": [feature.to_dict() for feature in self.features],
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialise to GeoJSON text."""
        return json.dumps(self.to_dict(), indent=indent)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransformOptions:
    """Configuration for one conversion.

    Attributes:
        batch_size: Number of points processed per batch.  Only affects
                    memory granularity, never the output.
        transform_vertical_datum: Apply the vertical datum step.
        source_vertical_datum: Vertical datum of the input Z (e.g. ``"NAVD88"``).
        target_vertical_datum: Vertical datum wanted for the output
                               elevation (e.g. ``"WGS84"``).
        strict_vertical_datum: Reject an unsupported datum pair with
                               :class:`~xyz_geojson.shared.exceptions.VerticalDatumError`
                               instead of passing Z through unchanged.

    Raises:
        InputValidationError: If ``batch_size`` is not a positive integer,
            or only one of the two datum names is given while
            ``transform_vertical_datum`` is set.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    transform_vertical_datum: bool = False
    source_vertical_datum: str | None = None
    target_vertical_datum: str | None = None
    strict_vertical_datum: bool = False

    def __post_init__(self) -> None:
        Validators.assert_positive_int(self.batch_size, "batch_size")

        if self.transform_vertical_datum:
            given = [bool(self.source_vertical_datum), bool(self.target_vertical_datum)]
            if any(given) and not all(given):
                raise InputValidationError(
                    "source_vertical_datum and target_vertical_datum must be "
                    "given together when transform_vertical_datum is set."
                )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TransformOptions:
        """Build options from a plain mapping such as parsed JSON.

        Raises:
            InputValidationError: On keys that are not option names.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InputValidationError(
                f"Unknown transform option(s): {', '.join(unknown)}. "
                f"Valid options: {', '.join(sorted(known))}"
            )
        return cls(**mapping)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class VerticalAdjustment(str, Enum):
    """What the vertical datum step does for a given datum pair."""

    NOT_REQUESTED = "not_requested"
    APPLIED = "applied"
    UNSUPPORTED_PAIR = "unsupported_pair"


@dataclass(frozen=True)
class SkippedLine:
    """An input line the parser rejected."""

    line_number: int
    text: str
    reason: str


@dataclass(frozen=True)
class FailedPoint:
    """A parsed point that could not be transformed."""

    point: Point
    reason: str

    @property
    def line_number(self) -> int:
        return self.point.line_number


@dataclass(frozen=True)
class ConversionResult:
    """Everything one conversion produced.

    Attributes:
        collection: The output FeatureCollection.
        from_crs: Source CRS string as provided.
        to_crs: Target CRS string as provided.
        points_parsed: Number of valid records the parser produced.
        skipped_lines: Lines the parser rejected, in input order.
        failed_points: Points the transformer dropped, in input order.
        vertical: Outcome kind of the vertical datum step.
    """

    collection: FeatureCollection
    from_crs: str
    to_crs: str
    points_parsed: int
    skipped_lines: tuple[SkippedLine, ...] = ()
    failed_points: tuple[FailedPoint, ...] = ()
    vertical: VerticalAdjustment = VerticalAdjustment.NOT_REQUESTED

    @property
    def all_failed(self) -> bool:
        """``True`` when points were parsed but none could be transformed."""
        return self.points_parsed > 0 and not self.collection.features

    @property
    def has_issues(self) -> bool:
        return bool(self.skipped_lines or self.failed_points)

    def summary(self) -> str:
        """Return a one-line human-readable summary."""
        return (
            f"Converted {len(self.collection)} of {self.points_parsed} points "
            f"({len(self.skipped_lines)} lines skipped, "
            f"{len(self.failed_points)} points failed) | "
            f"{self.from_crs} → {self.to_crs} | vertical: {self.vertical.value}"
        )
