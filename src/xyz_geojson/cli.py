"""
xyz-geojson — CLI Entry Point
=============================
Command-line interface built with Click.  Installed as the ``xyz2geojson``
command via ``pyproject.toml``.

Usage:
    xyz2geojson --input survey.xyz --output survey.geojson \\
                --from-crs EPSG:32615 --to-crs EPSG:4326

    xyz2geojson -i survey.xyz -o survey.geojson \\
                --from-crs EPSG:32615 --to-crs EPSG:4326 \\
                --vertical-datum NAVD88 WGS84

Run ``xyz2geojson --help`` for a full list of options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from xyz_geojson.models import DEFAULT_BATCH_SIZE, TransformOptions
from xyz_geojson.shared.exceptions import XYZGeoJSONError
from xyz_geojson.tool import ExportConfig, XYZToGeoJSONTool


@click.command(
    name="xyz2geojson",
    help=(
        "Convert an XYZ survey file to a GeoJSON FeatureCollection.\n\n"
        "Reads INPUT, reprojects every X/Y pair from FROM_CRS to TO_CRS, "
        "optionally adjusts elevations between vertical datums, and writes "
        "one Point feature per valid line to OUTPUT."
    ),
)
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to the input XYZ file (.xyz, .txt or .csv).",
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Path for the output GeoJSON file. Parent directories are created if absent.",
)
@click.option(
    "--from-crs",
    required=True,
    help="CRS of the input X/Y values (e.g. EPSG:32615).",
)
@click.option(
    "--to-crs",
    default="EPSG:4326",
    show_default=True,
    help="CRS for the output coordinates.",
)
@click.option(
    "--batch-size",
    type=click.IntRange(min=1),
    default=DEFAULT_BATCH_SIZE,
    show_default=True,
    help="Number of points transformed per batch.",
)
@click.option(
    "--vertical-datum",
    type=(str, str),
    default=None,
    metavar="SOURCE TARGET",
    help="Adjust elevations from SOURCE to TARGET vertical datum "
         "(e.g. NAVD88 WGS84).",
)
@click.option(
    "--strict-vertical",
    is_flag=True,
    default=False,
    help="Fail instead of passing elevations through when the vertical "
         "datum pair is not supported.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="JSON indentation of the output file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug-level logging output.",
)
def main(
    input_path: Path,
    output_path: Path,
    from_crs: str,
    to_crs: str,
    batch_size: int,
    vertical_datum: tuple[str, str] | None,
    strict_vertical: bool,
    indent: int,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into XYZToGeoJSONTool."""
    try:
        source_datum, target_datum = vertical_datum or (None, None)
        options = TransformOptions(
            batch_size=batch_size,
            transform_vertical_datum=vertical_datum is not None,
            source_vertical_datum=source_datum,
            target_vertical_datum=target_datum,
            strict_vertical_datum=strict_vertical,
        )
        config = ExportConfig(
            from_crs=from_crs, to_crs=to_crs, options=options, indent=indent
        )
        tool = XYZToGeoJSONTool(input_path, output_path, config, verbose=verbose)
        tool.run()
    except XYZGeoJSONError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    click.echo(tool.result.summary())


if __name__ == "__main__":
    main()
