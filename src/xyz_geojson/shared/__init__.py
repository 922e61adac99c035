"""
xyz-geojson — Shared Foundation
===============================
Re-exports the file-tool base class, the exception hierarchy and the
validators::

    from xyz_geojson.shared import FileTool, Validators
    from xyz_geojson.shared.exceptions import CRSError
"""

from xyz_geojson.shared.base_tool import FileTool, configure_logging
from xyz_geojson.shared.exceptions import (
    CRSError,
    InputValidationError,
    MissingParameterError,
    OutputWriteError,
    ReprojectionError,
    VerticalDatumError,
    XYZGeoJSONError,
)
from xyz_geojson.shared.validators import Validators

__all__ = [
    "FileTool",
    "Validators",
    "configure_logging",
    "XYZGeoJSONError",
    "InputValidationError",
    "MissingParameterError",
    "CRSError",
    "ReprojectionError",
    "VerticalDatumError",
    "OutputWriteError",
]
