"""
Tests — File Tool and CLI
=========================
Tests for :class:`~xyz_geojson.tool.XYZToGeoJSONTool` and the
``xyz2geojson`` Click command.

Test strategy:
- Write small XYZ inputs to ``tmp_path``.
- Read the GeoJSON output back and check structure and provenance.
- Assert that validation errors are raised for bad inputs.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from xyz_geojson.cli import main
from xyz_geojson.models import TransformOptions
from xyz_geojson.shared.exceptions import CRSError, InputValidationError
from xyz_geojson.shared.validators import Validators
from xyz_geojson.tool import ExportConfig, XYZToGeoJSONTool


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def survey_file(tmp_path: Path, survey_xyz: str) -> Path:
    """Write the three-point UTM 15N survey plus one bad line."""
    path = tmp_path / "survey.xyz"
    path.write_text(survey_xyz + "garbage line\n", encoding="utf-8")
    return path


@pytest.fixture()
def utm_config() -> ExportConfig:
    return ExportConfig(from_crs="EPSG:32615", to_crs="EPSG:4326")


# ---------------------------------------------------------------------------
# File tool
# ---------------------------------------------------------------------------


class TestXYZToGeoJSONTool:
    def test_output_written(
        self, tmp_path: Path, survey_file: Path, utm_config: ExportConfig
    ) -> None:
        output = tmp_path / "out" / "survey.geojson"
        XYZToGeoJSONTool(survey_file, output, utm_config).run()

        geo = json.loads(output.read_text(encoding="utf-8"))
        assert geo["type"] == "FeatureCollection"
        assert [f["properties"]["sourceLineNumber"] for f in geo["features"]] == [1, 2, 3]

    def test_result_populated(
        self, tmp_path: Path, survey_file: Path, utm_config: ExportConfig
    ) -> None:
        tool = XYZToGeoJSONTool(survey_file, tmp_path / "out.geojson", utm_config)
        assert tool.result is None
        tool.run()

        assert tool.result is not None
        assert tool.result.points_parsed == 3
        assert [s.line_number for s in tool.result.skipped_lines] == [4]

    def test_compact_output(self, tmp_path: Path, survey_file: Path) -> None:
        cfg = ExportConfig(from_crs="EPSG:32615", to_crs="EPSG:4326", indent=None)
        output = tmp_path / "out.geojson"
        XYZToGeoJSONTool(survey_file, output, cfg).run()
        assert "\n" not in output.read_text(encoding="utf-8")

    def test_missing_input_raises(self, tmp_path: Path, utm_config: ExportConfig) -> None:
        tool = XYZToGeoJSONTool(tmp_path / "missing.xyz", tmp_path / "o.geojson", utm_config)
        with pytest.raises(InputValidationError):
            tool.run()

    def test_unsupported_extension_raises(
        self, tmp_path: Path, utm_config: ExportConfig
    ) -> None:
        path = tmp_path / "survey.las"
        path.write_text("1 2 3\n", encoding="utf-8")
        with pytest.raises(InputValidationError, match=".las"):
            XYZToGeoJSONTool(path, tmp_path / "o.geojson", utm_config).run()

    def test_invalid_crs_raises(self, tmp_path: Path, survey_file: Path) -> None:
        cfg = ExportConfig(from_crs="EPSG:99999", to_crs="EPSG:4326")
        with pytest.raises(CRSError):
            XYZToGeoJSONTool(survey_file, tmp_path / "o.geojson", cfg).run()

    def test_each_crs_parsed_once(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        survey_file: Path,
        utm_config: ExportConfig,
    ) -> None:
        parsed: list[str] = []
        original = Validators.assert_crs_valid

        def _counting(crs_string: str):
            parsed.append(crs_string)
            return original(crs_string)

        monkeypatch.setattr(Validators, "assert_crs_valid", staticmethod(_counting))
        XYZToGeoJSONTool(survey_file, tmp_path / "o.geojson", utm_config).run()

        assert parsed == ["EPSG:32615", "EPSG:4326"]

    def test_invalid_crs_raises_before_reading_input(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, survey_file: Path
    ) -> None:
        cfg = ExportConfig(from_crs="EPSG:32615", to_crs="EPSG:99999")
        tool = XYZToGeoJSONTool(survey_file, tmp_path / "o.geojson", cfg)
        monkeypatch.setattr(tool, "process", lambda: pytest.fail("process must not run"))
        with pytest.raises(CRSError, match="EPSG:99999"):
            tool.run()

    def test_non_utf8_input_raises(self, tmp_path: Path, utm_config: ExportConfig) -> None:
        path = tmp_path / "binary.xyz"
        path.write_bytes(b"\xff\xfe\x00\x81 1 2 3")
        with pytest.raises(InputValidationError, match="UTF-8"):
            XYZToGeoJSONTool(path, tmp_path / "o.geojson", utm_config).run()

    def test_options_passed_through(self, tmp_path: Path, survey_file: Path) -> None:
        cfg = ExportConfig(
            from_crs="EPSG:32615",
            to_crs="EPSG:4326",
            options=TransformOptions(batch_size=1),
        )
        tool = XYZToGeoJSONTool(survey_file, tmp_path / "o.geojson", cfg)
        tool.run()
        assert len(tool.result.collection) == 3


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


class TestCLI:
    def test_converts_file(self, tmp_path: Path, survey_file: Path) -> None:
        output = tmp_path / "cli.geojson"
        result = CliRunner().invoke(
            main,
            ["-i", str(survey_file), "-o", str(output), "--from-crs", "EPSG:32615"],
        )

        assert result.exit_code == 0, result.output
        assert "Converted 3 of 3 points" in result.output
        assert len(json.loads(output.read_text(encoding="utf-8"))["features"]) == 3

    def test_vertical_datum_option(self, tmp_path: Path, survey_file: Path) -> None:
        output = tmp_path / "cli.geojson"
        result = CliRunner().invoke(
            main,
            [
                "-i", str(survey_file), "-o", str(output),
                "--from-crs", "EPSG:32615",
                "--vertical-datum", "NAVD88", "WGS84",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "vertical: applied" in result.output

    def test_strict_vertical_fails_cleanly(self, tmp_path: Path, survey_file: Path) -> None:
        result = CliRunner().invoke(
            main,
            [
                "-i", str(survey_file), "-o", str(tmp_path / "x.geojson"),
                "--from-crs", "EPSG:32615",
                "--vertical-datum", "NGVD29", "WGS84",
                "--strict-vertical",
            ],
        )
        assert result.exit_code == 1
        assert "Error: Unsupported vertical datum transformation" in result.output

    def test_invalid_crs_exit_code(self, tmp_path: Path, survey_file: Path) -> None:
        result = CliRunner().invoke(
            main,
            ["-i", str(survey_file), "-o", str(tmp_path / "x.geojson"),
             "--from-crs", "EPSG:99999"],
        )
        assert result.exit_code == 1
        assert "Error: Invalid or unrecognised CRS" in result.output

    def test_batch_size_must_be_positive(self, tmp_path: Path, survey_file: Path) -> None:
        result = CliRunner().invoke(
            main,
            ["-i", str(survey_file), "-o", str(tmp_path / "x.geojson"),
             "--from-crs", "EPSG:32615", "--batch-size", "0"],
        )
        assert result.exit_code == 2
