"""
xyz-geojson — Exception Hierarchy
=================================
Every module in the package raises exceptions from here so callers can
catch them at the right level of granularity.

Hierarchy::

    XYZGeoJSONError                      ← catch-all base
    ├── InputValidationError             ← bad arguments, options or files
    │   └── MissingParameterError        ← empty text / CRS identifier
    ├── CRSError                         ← CRS string pyproj does not know
    ├── ReprojectionError                ← one point failed to reproject
    ├── VerticalDatumError               ← unsupported vertical datum pair
    └── OutputWriteError                 ← cannot write to output path

``InputValidationError``, ``CRSError`` and ``OutputWriteError`` are fatal:
they abort a conversion before any record is parsed.  ``ReprojectionError``
and ``VerticalDatumError`` are raised per point inside the batch loop and
are caught there, turning into :class:`~xyz_geojson.models.FailedPoint`
records instead of reaching the caller.

Usage::

    from xyz_geojson.shared.exceptions import CRSError

    raise CRSError("EPSG:99999")
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class XYZGeoJSONError(Exception):
    """Base exception for the package.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(XYZGeoJSONError):
    """Raised when arguments, options or input files fail validation."""


class MissingParameterError(InputValidationError):
    """Raised when a required top-level argument is missing or blank.

    Args:
        parameter: Name of the missing argument (e.g. ``"from_crs"``).

    Example::

        raise MissingParameterError("xyz_text")
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(
            f"Missing required parameter '{parameter}'. "
            "xyz_text, from_crs and to_crs must all be non-empty."
        )
        self.parameter: str = parameter


# ---------------------------------------------------------------------------
# CRS
# ---------------------------------------------------------------------------


class CRSError(XYZGeoJSONError):
    """Raised when a coordinate reference system string cannot be parsed
    or matched to a known CRS.

    Args:
        crs_string: The raw CRS string that caused the error.
        reason: Optional underlying pyproj message.
    """

    def __init__(self, crs_string: str, reason: str | None = None) -> None:
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Invalid or unrecognised CRS: '{crs_string}'{detail}. "
            "Use an EPSG code (e.g. 'EPSG:4326') or a valid WKT/PROJ string."
        )
        self.crs_string: str = crs_string
        self.reason: str | None = reason


# ---------------------------------------------------------------------------
# Per-point failures
# ---------------------------------------------------------------------------


class ReprojectionError(XYZGeoJSONError):
    """Raised when a single coordinate pair cannot be reprojected.

    Args:
        x: Source X / easting.
        y: Source Y / northing.
        reason: Short explanation from PROJ, or why the output was rejected.
    """

    def __init__(self, x: float, y: float, reason: str) -> None:
        super().__init__(f"Cannot reproject ({x!r}, {y!r}): {reason}")
        self.x: float = x
        self.y: float = y
        self.reason: str = reason


class VerticalDatumError(XYZGeoJSONError):
    """Raised when no vertical transformation exists for a datum pair.

    Args:
        source: Source vertical datum name.
        target: Target vertical datum name.

    Example::

        raise VerticalDatumError("NGVD29", "WGS84")
    """

    def __init__(self, source: str, target: str) -> None:
        super().__init__(
            f"Unsupported vertical datum transformation: '{source}' -> '{target}'."
        )
        self.source: str = source
        self.target: str = target


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(XYZGeoJSONError):
    """Raised when the GeoJSON output cannot be written to disk.

    Args:
        output_path: String representation of the path that failed.
        reason: Underlying OS error message.
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write output to '{output_path}': {reason}"
        )
        self.output_path: str = output_path
        self.reason: str = reason
