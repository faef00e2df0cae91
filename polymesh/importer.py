"""Reading a polygonal mesh from the Cell0Ds, Cell1Ds and Cell2Ds CSV files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from polymesh.mesh import PolygonalMesh

PathType = Union[str, "os.PathLike[str]"]

CELL0DS_FILE = "Cell0Ds.csv"
CELL1DS_FILE = "Cell1Ds.csv"
CELL2DS_FILE = "Cell2Ds.csv"

_log = logging.getLogger(__name__)


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


def _read_records(path: Path) -> list[list[str]]:
    """Return the fields of every data row, the header row left out."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MeshImportError(f"File '{path}' cannot be opened") from exc
    rows = text.splitlines()[1:]
    return [row.replace(";", " ").split() for row in rows if row.strip()]


class _Fields:
    """Consumes the fields of one row in order."""

    def __init__(self, fields: list[str], path: Path, row: int) -> None:
        self._fields: Iterator[str] = iter(fields)
        self._where = f"{path.name}, row {row}"

    def _next(self) -> str:
        try:
            return next(self._fields)
        except StopIteration:
            raise MeshImportError(f"{self._where}: missing value") from None

    def integer(self) -> int:
        token = self._next()
        try:
            value = int(token)
        except ValueError:
            raise MeshImportError(f"{self._where}: '{token}' is not an integer") from None
        if value < 0:
            raise MeshImportError(f"{self._where}: '{token}' is negative")
        return value

    def real(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise MeshImportError(f"{self._where}: '{token}' is not a number") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _check_id(cell_id: int, count: int, path: Path, row: int) -> None:
    if cell_id >= count:
        raise MeshImportError(
            f"{path.name}, row {row}: id {cell_id} out of range for {count} cells"
        )


def _add_marker(markers: dict[int, list[int]], marker: int, cell_id: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(cell_id)


def import_cell0ds(mesh: PolygonalMesh, directory: PathType = ".") -> None:
    """Fill the points of ``mesh`` from Cell0Ds.csv (Id;Marker;X;Y)."""
    path = Path(directory) / CELL0DS_FILE
    records = _read_records(path)
    if not records:
        raise MeshImportError("There is no cell 0D")

    count = len(records)
    ids: list[int] = []
    coordinates: list[tuple[float, float, float]] = [(0.0, 0.0, 0.0)] * count
    markers: dict[int, list[int]] = {}
    for row, fields in enumerate(records, start=2):
        reader = _Fields(fields, path, row)
        cell_id = reader.integer()
        marker = reader.integer()
        x, y = reader.real(), reader.real()
        _check_id(cell_id, count, path, row)
        coordinates[cell_id] = (x, y, 0.0)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)

    mesh.cell0ds_id = ids
    mesh.cell0ds_coordinates = coordinates
    mesh.marker_cell0ds = markers
    _log.debug("Point ids: %s", ids)
    _log.debug("Point markers: %s", markers)


def import_cell1ds(mesh: PolygonalMesh, directory: PathType = ".") -> None:
    """Fill the segments of ``mesh`` from Cell1Ds.csv (Id;Marker;Origin;End)."""
    path = Path(directory) / CELL1DS_FILE
    records = _read_records(path)
    if not records:
        raise MeshImportError("There is no cell 1D")

    count = len(records)
    ids: list[int] = []
    extrema: list[tuple[int, int]] = [(0, 0)] * count
    markers: dict[int, list[int]] = {}
    for row, fields in enumerate(records, start=2):
        reader = _Fields(fields, path, row)
        cell_id = reader.integer()
        marker = reader.integer()
        origin, end = reader.integer(), reader.integer()
        _check_id(cell_id, count, path, row)
        extrema[cell_id] = (origin, end)
        ids.append(cell_id)
        _add_marker(markers, marker, cell_id)

    mesh.cell1ds_id = ids
    mesh.cell1ds_extrema = extrema
    mesh.marker_cell1ds = markers
    _log.debug("Segment ids: %s", ids)
    _log.debug("Segment markers: %s", markers)


def import_cell2ds(mesh: PolygonalMesh, directory: PathType = ".") -> None:
    """Fill the polygons of ``mesh`` from Cell2Ds.csv.

    Each row is Id;Marker;NumVertices;Vertices...;NumEdges;Edges...
    """
    path = Path(directory) / CELL2DS_FILE
    records = _read_records(path)
    if not records:
        raise MeshImportError("There is no cell 2D")

    ids: list[int] = []
    markers: list[int] = []
    vertices: list[list[int]] = []
    edges: list[list[int]] = []
    for row, fields in enumerate(records, start=2):
        reader = _Fields(fields, path, row)
        ids.append(reader.integer())
        markers.append(reader.integer())
        vertices.append(reader.integers(reader.integer()))
        edges.append(reader.integers(reader.integer()))

    mesh.cell2ds_id = ids
    mesh.cell2ds_marker = markers
    mesh.cell2ds_vertices = vertices
    mesh.cell2ds_edges = edges
    _log.debug("Polygon ids: %s", ids)


def import_mesh(directory: PathType = ".") -> PolygonalMesh:
    """Read the whole mesh from the three CSV files in ``directory``."""
    mesh = PolygonalMesh()
    import_cell0ds(mesh, directory)
    import_cell1ds(mesh, directory)
    import_cell2ds(mesh, directory)
    return mesh