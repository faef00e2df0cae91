"""Writing meshes of points, segments, polygons and polyhedra as ASCII UCD files."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

PathType = Union[str, "os.PathLike[str]"]


class CellType(enum.Enum):
    """Kinds of cell the UCD format knows."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells.

    ``data`` holds ``num_components`` values per item, item after item.
    """

    label: str
    unit_label: str
    num_components: int = 1
    data: Sequence[float] = ()


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, the ids of its points and its material."""

    type: CellType
    point_ids: tuple[int, ...] = field(default_factory=tuple)
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(self.point_ids))

    def label(self) -> str:
        """The UCD keyword of this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material_ids(materials: Sequence[int] | None, count: int) -> list[int]:
    if materials is not None and len(materials) == count:
        return [int(m) for m in materials]
    return [0] * count


def _check_property(prop: UCDProperty, count: int) -> None:
    needed = prop.num_components * count
    if len(prop.data) < needed:
        raise ValueError(
            f"Property '{prop.label}' holds {len(prop.data)} values, {needed} needed"
        )


def _property_lines(
    properties: Sequence[UCDProperty], count: int, number
) -> Iterable[str]:
    if not properties:
        return
    yield " ".join(
        [str(len(properties))] + [str(prop.num_components) for prop in properties]
    )
    for prop in properties:
        yield f"{prop.label}, {prop.unit_label}"
    for item in range(count):
        values = [
            number(value)
            for prop in properties
            for value in prop.data[
                prop.num_components * item : prop.num_components * (item + 1)
            ]
        ]
        yield " ".join([str(item + 1)] + values)


class UCDUtilities:
    """Exports meshes to ASCII UCD (.inp) files."""

    def export_points(
        self,
        file_path: PathType,
        points: Sequence[Sequence[float]],
        points_properties: Sequence[UCDProperty] | None = None,
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write each point as a cell of its own; properties belong to those cells."""
        ids = _material_ids(materials, len(points))
        cells = [UCDCell(CellType.POINT, (p,), ids[p]) for p in range(len(points))]
        self._export_ascii(points, (), cells, points_properties or (), file_path)

    def export_segments(
        self,
        file_path: PathType,
        points: Sequence[Sequence[float]],
        segments: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] | None = None,
        segments_properties: Sequence[UCDProperty] | None = None,
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write segments given as (origin, end) pairs of point ids."""
        ids = _material_ids(materials, len(segments))
        cells = [
            UCDCell(CellType.LINE, (int(origin), int(end)), material)
            for (origin, end, *_), material in zip(segments, ids)
        ]
        self._export_ascii(
            points, points_properties or (), cells, segments_properties or (), file_path
        )

    def export_polygons(
        self,
        file_path: PathType,
        points: Sequence[Sequence[float]],
        polygons_vertices: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] | None = None,
        polygons_properties: Sequence[UCDProperty] | None = None,
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write triangles and quadrilaterals; other polygons raise ValueError."""
        ids = _material_ids(materials, len(polygons_vertices))
        cells = []
        for vertices, material in zip(polygons_vertices, ids):
            if len(vertices) == 3:
                kind = CellType.TRIANGLE
            elif len(vertices) == 4:
                kind = CellType.QUADRILATERAL
            else:
                raise ValueError("Polygon type not supported")
            cells.append(UCDCell(kind, vertices, material))
        self._export_ascii(
            points, points_properties or (), cells, polygons_properties or (), file_path
        )

    def export_polyhedra(
        self,
        file_path: PathType,
        points: Sequence[Sequence[float]],
        polyhedra_vertices: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] | None = None,
        polyhedra_properties: Sequence[UCDProperty] | None = None,
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write tetrahedra; other polyhedra raise ValueError."""
        ids = _material_ids(materials, len(polyhedra_vertices))
        cells = []
        for vertices, material in zip(polyhedra_vertices, ids):
            if len(vertices) != 4:
                raise ValueError("Polygon type not supported")
            cells.append(UCDCell(CellType.TETRAHEDRON, vertices, material))
        self._export_ascii(
            points, points_properties or (), cells, polyhedra_properties or (), file_path
        )

    @staticmethod
    def _export_ascii(
        points: Sequence[Sequence[float]],
        point_properties: Sequence[UCDProperty],
        cells: Sequence[UCDCell],
        cell_properties: Sequence[UCDProperty],
        file_path: PathType,
    ) -> None:
        for prop in point_properties:
            _check_property(prop, len(points))
        for prop in cell_properties:
            _check_property(prop, len(cells))

        def scientific(value: float) -> str:
            return f"{float(value):.16e}"

        def general(value: float) -> str:
            return f"{float(value):.16g}"

        # Values after the point block follow its scientific notation.
        number = scientific if points else general

        lines = [f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"]
        for index, point in enumerate(points, start=1):
            x, y, z = point
            lines.append(f"{index} {scientific(x)} {scientific(y)} {scientific(z)}")
        for index, cell in enumerate(cells, start=1):
            ids = " ".join(str(p + 1) for p in cell.point_ids)
            lines.append(f"{index} {cell.material_id} {cell.label()} {ids}".rstrip())
        lines.extend(_property_lines(point_properties, len(points), number))
        lines.extend(_property_lines(cell_properties, len(cells), number))

        with open(file_path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n")