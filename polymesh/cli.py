"""Command line: read a mesh and export its points and segments as UCD files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from polymesh.importer import MeshImportError, import_mesh
from polymesh.ucd import UCDProperty, UCDUtilities


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Export the points and segments of a polygonal mesh to UCD files.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="directory where Cell0Ds.inp and Cell1Ds.inp are written",
    )
    return parser


def _marker_property(values: list[float]) -> UCDProperty:
    return UCDProperty(label="Marker", unit_label="-", num_components=1, data=values)


def main(argv: list[str] | None = None) -> int:
    """Run the exporter; return the process exit status."""
    args = _parser().parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshImportError:
        print("file not found", file=sys.stderr)
        return 1

    output = Path(args.output)
    utilities = UCDUtilities()
    utilities.export_points(
        output / "Cell0Ds.inp",
        mesh.cell0ds_coordinates,
        [_marker_property(mesh.cell0d_marker_values())],
    )
    utilities.export_segments(
        output / "Cell1Ds.inp",
        mesh.cell0ds_coordinates,
        mesh.cell1ds_extrema,
        [],
        [_marker_property(mesh.cell1d_marker_values())],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())