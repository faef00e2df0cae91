import pytest

from polymesh.ucd import CellType, UCDCell, UCDProperty, UCDUtilities


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


POINTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.25, 2.0, 0.0)]


def test_export_points_layout(tmp_path):
    path = tmp_path / "points.inp"
    marker = UCDProperty("Marker", "-", 1, [1.0, 0.0, 2.0])
    UCDUtilities().export_points(path, POINTS, [marker])
    lines = read_lines(path)

    assert lines[0].split() == ["3", "3", "0", "1", "0"]
    assert lines[1] == "1 0.0000000000000000e+00 0.0000000000000000e+00 0.0000000000000000e+00"
    for index, point in enumerate(POINTS, start=1):
        tokens = lines[index].split()
        assert tokens[0] == str(index)
        assert tuple(float(t) for t in tokens[1:]) == point
    for index in range(1, 4):
        assert lines[3 + index].split() == [str(index), "0", "pt", str(index)]
    assert lines[7].split() == ["1", "1"]
    assert lines[8] == "Marker, -"
    values = [float(line.split()[1]) for line in lines[9:12]]
    assert values == [1.0, 0.0, 2.0]
    assert len(lines) == 12


def test_coordinates_written_in_scientific_notation(tmp_path):
    path = tmp_path / "points.inp"
    UCDUtilities().export_points(path, POINTS)
    assert read_lines(path)[3].split()[1] == "2.5000000000000000e-01"


def test_materials_used_when_count_matches(tmp_path):
    path = tmp_path / "points.inp"
    UCDUtilities().export_points(path, POINTS, materials=[4, 5, 6])
    cell_lines = read_lines(path)[4:7]
    assert [line.split()[1] for line in cell_lines] == ["4", "5", "6"]


def test_materials_ignored_when_count_differs(tmp_path):
    path = tmp_path / "points.inp"
    UCDUtilities().export_points(path, POINTS, materials=[4, 5])
    cell_lines = read_lines(path)[4:7]
    assert [line.split()[1] for line in cell_lines] == ["0", "0", "0"]


def test_export_segments(tmp_path):
    path = tmp_path / "segments.inp"
    segments = [(0, 1), (1, 2), (2, 0)]
    point_prop = UCDProperty("Id", "-", 1, [10.0, 11.0, 12.0])
    seg_prop = UCDProperty("Marker", "-", 1, [3.0, 0.0, 7.0])
    UCDUtilities().export_segments(path, POINTS, segments, [point_prop], [seg_prop])
    lines = read_lines(path)

    assert lines[0].split() == ["3", "3", "1", "1", "0"]
    for index, (origin, end) in enumerate(segments, start=1):
        assert lines[3 + index].split() == [str(index), "0", "line", str(origin + 1), str(end + 1)]
    assert lines[7].split() == ["1", "1"]
    assert lines[8] == "Id, -"
    assert [float(line.split()[1]) for line in lines[9:12]] == [10.0, 11.0, 12.0]
    assert lines[12].split() == ["1", "1"]
    assert lines[13] == "Marker, -"
    assert [float(line.split()[1]) for line in lines[14:17]] == [3.0, 0.0, 7.0]


def test_export_polygons_labels(tmp_path):
    path = tmp_path / "polygons.inp"
    points = POINTS + [(1.0, 2.0, 0.0)]
    polygons = [[0, 1, 2], [0, 1, 3, 2]]
    UCDUtilities().export_polygons(path, points, polygons, materials=[1, 2])
    lines = read_lines(path)
    assert lines[0].split() == ["4", "2", "0", "0", "0"]
    assert lines[5].split() == ["1", "1", "tri", "1", "2", "3"]
    assert lines[6].split() == ["2", "2", "quad", "1", "2", "4", "3"]
    assert len(lines) == 7


def test_export_polygons_rejects_pentagon(tmp_path):
    path = tmp_path / "polygons.inp"
    with pytest.raises(ValueError, match="Polygon type not supported"):
        UCDUtilities().export_polygons(path, POINTS, [[0, 1, 2, 0, 1]])
    assert not path.exists()


def test_export_polyhedra(tmp_path):
    path = tmp_path / "polyhedra.inp"
    points = POINTS + [(0.0, 0.0, 1.0)]
    UCDUtilities().export_polyhedra(path, points, [[0, 1, 2, 3]])
    lines = read_lines(path)
    assert lines[5].split() == ["1", "0", "tet", "1", "2", "3", "4"]


def test_export_polyhedra_rejects_non_tetrahedron(tmp_path):
    path = tmp_path / "polyhedra.inp"
    with pytest.raises(ValueError):
        UCDUtilities().export_polyhedra(path, POINTS, [[0, 1, 2]])


def test_multi_component_property(tmp_path):
    path = tmp_path / "points.inp"
    vec = UCDProperty("Vec", "m", 2, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    UCDUtilities().export_points(path, POINTS, [vec])
    lines = read_lines(path)
    assert lines[7].split() == ["1", "2"]
    rows = [[float(t) for t in line.split()[1:]] for line in lines[9:12]]
    assert rows == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]


def test_short_property_data_rejected(tmp_path):
    path = tmp_path / "points.inp"
    with pytest.raises(ValueError):
        UCDUtilities().export_points(path, POINTS, [UCDProperty("M", "-", 1, [1.0])])


@pytest.mark.parametrize(
    "kind, label",
    [
        (CellType.LINE, "line"),
        (CellType.TRIANGLE, "tri"),
        (CellType.QUADRILATERAL, "quad"),
        (CellType.HEXAHEDRON, "hex"),
        (CellType.PRISM, "prism"),
        (CellType.TETRAHEDRON, "tet"),
        (CellType.PYRAMID, "pyr"),
        (CellType.POINT, "pt"),
    ],
)
def test_cell_labels(kind, label):
    assert UCDCell(kind, (0,), 0).label() == label


def test_unknown_cell_label_raises():
    with pytest.raises(ValueError, match="Type not supported"):
        UCDCell(CellType.UNKNOWN, (), 0).label()


def test_cell_point_ids_become_tuple():
    cell = UCDCell(CellType.LINE, [3, 4], 1)
    assert cell.point_ids == (3, 4)