"""The polygonal mesh: points, segments and polygons with their markers."""

from __future__ import annotations

from dataclasses import dataclass, field


def _marker_values(markers: dict[int, list[int]], count: int) -> list[float]:
    values = [0.0] * count
    for marker, ids in sorted(markers.items()):
        for cell_id in ids:
            if not 0 <= cell_id < count:
                raise IndexError(f"Cell id {cell_id} out of range for {count} cells")
            values[cell_id] = float(marker)
    return values


@dataclass
class PolygonalMesh:
    """A 2D polygonal mesh.

    Coordinates and extrema are stored by cell id; marker maps send a
    non-zero marker to the ids that carry it, in reading order.
    """

    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)

    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)

    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_marker: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)

    @property
    def num_cell0ds(self) -> int:
        return len(self.cell0ds_id)

    @property
    def num_cell1ds(self) -> int:
        return len(self.cell1ds_id)

    @property
    def num_cell2ds(self) -> int:
        return len(self.cell2ds_id)

    @property
    def cell2ds_num_vertices(self) -> list[int]:
        return [len(vertices) for vertices in self.cell2ds_vertices]

    @property
    def cell2ds_num_edges(self) -> list[int]:
        return [len(edges) for edges in self.cell2ds_edges]

    def cell0d_marker_values(self) -> list[float]:
        """Marker of every point by id, 0.0 where it has none."""
        return _marker_values(self.marker_cell0ds, self.num_cell0ds)

    def cell1d_marker_values(self) -> list[float]:
        """Marker of every segment by id, 0.0 where it has none."""
        return _marker_values(self.marker_cell1ds, self.num_cell1ds)