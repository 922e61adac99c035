"""
xyz-geojson — Input Validators
==============================
Static precondition checks shared by the converter, the options dataclass
and the file tool.

All methods raise an exception from :mod:`xyz_geojson.shared.exceptions`
rather than returning booleans, so validation reads as a flat list of
assertions::

    Validators.assert_not_blank(xyz_text, "xyz_text")
    Validators.assert_crs_valid(from_crs)
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pyproj import CRS
from pyproj.exceptions import CRSError as PyprojCRSError

from xyz_geojson.shared.exceptions import (
    CRSError,
    InputValidationError,
    MissingParameterError,
    OutputWriteError,
)


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod`` — this class is never instantiated.
    """

    # ------------------------------------------------------------------
    # Argument checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_not_blank(value: object, name: str) -> None:
        """Assert that *value* is a string with at least one non-space character.

        Raises:
            MissingParameterError: If *value* is ``None``, not a string,
                or only whitespace.
        """
        if not isinstance(value, str) or not value.strip():
            raise MissingParameterError(name)

    @staticmethod
    def assert_positive_int(value: object, name: str) -> None:
        """Assert that *value* is an ``int`` greater than zero.

        ``bool`` is rejected even though it subclasses ``int``.

        Raises:
            InputValidationError: If the check fails.
        """
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InputValidationError(
                f"'{name}' must be a positive integer, got {value!r}."
            )

    # ------------------------------------------------------------------
    # File-system checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_file_exists(path: Path) -> None:
        """Assert that *path* points to an existing regular file.

        Raises:
            InputValidationError: If *path* does not exist or is a directory.
        """
        path = Path(path)
        if not path.exists():
            raise InputValidationError(
                f"Input file not found: '{path}'. "
                "Check that the path is correct and the file exists."
            )
        if path.is_dir():
            raise InputValidationError(
                f"Expected a file but got a directory: '{path}'."
            )

    @staticmethod
    def assert_supported_extension(path: Path, extensions: Sequence[str]) -> None:
        """Assert that *path* has one of the allowed file extensions.

        Args:
            path: File path to check.
            extensions: Allowed extensions, each starting with a dot
                        (e.g. ``[".xyz", ".txt"]``).

        Raises:
            InputValidationError: If the extension is not in *extensions*.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        allowed = [ext.lower() for ext in extensions]
        if suffix not in allowed:
            raise InputValidationError(
                f"Unsupported file extension '{suffix}' for '{path.name}'. "
                f"Accepted extensions: {', '.join(allowed)}"
            )

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Create the parent directory of *output_path* if it is missing.

        Raises:
            OutputWriteError: If the directory cannot be created.
        """
        parent = Path(output_path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    # ------------------------------------------------------------------
    # CRS checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_crs_valid(crs_string: str) -> CRS:
        """Assert that *crs_string* can be parsed by pyproj and return it.

        Accepts EPSG codes (``"EPSG:4326"``), PROJ strings and WKT.

        Raises:
            CRSError: If pyproj does not recognise *crs_string*.
        """
        try:
            return CRS.from_user_input(crs_string)
        except PyprojCRSError as exc:
            raise CRSError(crs_string, str(exc)) from exc
