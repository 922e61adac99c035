"""
xyz-geojson — File Tool
=======================
Reads an XYZ file, converts it with :func:`~xyz_geojson.converter.convert_with_report`
and writes the FeatureCollection as a ``.geojson`` file.

Typical usage::

    from pathlib import Path
    from xyz_geojson.tool import ExportConfig, XYZToGeoJSONTool

    cfg = ExportConfig(from_crs="EPSG:32615", to_crs="EPSG:4326")
    tool = XYZToGeoJSONTool(Path("survey.xyz"), Path("survey.geojson"), cfg)
    tool.run()
    print(tool.result.summary())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from xyz_geojson.converter import convert_with_report
from xyz_geojson.models import ConversionResult, TransformOptions
from xyz_geojson.reprojection import PyprojReprojector
from xyz_geojson.shared.base_tool import FileTool
from xyz_geojson.shared.exceptions import InputValidationError, OutputWriteError
from xyz_geojson.shared.validators import Validators

logger = logging.getLogger("xyz_geojson.tool")

SUPPORTED_EXTENSIONS = [".xyz", ".txt", ".csv"]


@dataclass(frozen=True)
class ExportConfig:
    """Settings for :class:`XYZToGeoJSONTool`.

    Attributes:
        from_crs: CRS of the X/Y values in the input file.
        to_crs: CRS wanted for the output coordinates.
        options: Batch size and vertical datum settings.
        indent: JSON indentation of the output file; ``None`` for compact.
    """

    from_crs: str
    to_crs: str
    options: TransformOptions = field(default_factory=TransformOptions)
    indent: int | None = 2


class XYZToGeoJSONTool(FileTool):
    """Convert one XYZ file to one GeoJSON file.

    Args:
        input_path: XYZ text file (``.xyz``, ``.txt`` or ``.csv``).
        output_path: Destination ``.geojson`` path; parent directories
                     are created if missing.
        config: CRS pair, transform options and output formatting.
        verbose: Enable DEBUG-level logging.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        config: ExportConfig,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.config: ExportConfig = config
        self._result: ConversionResult | None = None
        self._reprojector: PyprojReprojector | None = None

    def validate_inputs(self) -> None:
        """Check the input file, the CRS strings and the output directory.

        Raises:
            InputValidationError: Missing file, unsupported extension or
                blank CRS string.
            CRSError: If pyproj does not recognise either CRS, or has no
                transformation between them.
            OutputWriteError: If the output directory cannot be created.
        """
        Validators.assert_file_exists(self.input_path)
        Validators.assert_supported_extension(self.input_path, SUPPORTED_EXTENSIONS)
        Validators.assert_not_blank(self.config.from_crs, "from_crs")
        Validators.assert_not_blank(self.config.to_crs, "to_crs")
        self._reprojector = PyprojReprojector(self.config.from_crs, self.config.to_crs)
        Validators.assert_output_dir_writable(self.output_path)

        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Read, convert and write.

        Raises:
            InputValidationError: If the input is not UTF-8 text.
            OutputWriteError: If writing the output file fails.
        """
        try:
            text = self.input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise InputValidationError(
                f"Input file '{self.input_path}' is not UTF-8 text: {exc.reason}"
            ) from exc

        self._result = convert_with_report(
            text,
            self.config.from_crs,
            self.config.to_crs,
            self.config.options,
            reprojector=self._reprojector,
        )

        try:
            self.output_path.write_text(
                self._result.collection.to_json(indent=self.config.indent),
                encoding="utf-8",
            )
        except OSError as exc:
            raise OutputWriteError(str(self.output_path), str(exc)) from exc

    @property
    def result(self) -> ConversionResult | None:
        """Result of the last :meth:`run`, or ``None`` before the first one."""
        return self._result
