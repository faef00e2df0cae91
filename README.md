# polymesh

`polymesh` reads a two-dimensional polygonal mesh stored as three
semicolon-separated CSV files. It writes the mesh's points and segments
in the AVS UCD ASCII format (`.inp`), each with its marker as a field.

## Input files

The mesh directory holds:

- `Cell0Ds.csv`: points, one per row: `Id;Marker;X;Y`
- `Cell1Ds.csv`: segments, one per row: `Id;Marker;Origin;End`
- `Cell2Ds.csv`: polygons, one per row:
  `Id;Marker;NumVertices;V1;...;Vn;NumEdges;E1;...;Em`

The first row of each file is a header and is skipped. Blank rows are
ignored. Point and segment ids must lie between 0 and the row count minus
one. In the mesh, a marker of `0` is not recorded. Every other marker maps
to the ids that carry it, in the order they were read.

## Command line

```
polymesh [directory] [-o OUTPUT]
```

- `directory`: where the three CSV files are read from. The default is the
  current directory.
- `-o`, `--output`: where `Cell0Ds.inp` and `Cell1Ds.inp` are written.
  The default is the current directory.

`Cell0Ds.inp` holds one `pt` cell per point. `Cell1Ds.inp` holds one `line`
cell per segment. Each file carries a `Marker` field, with unit `-`, on
its cells. Points and segments without a marker get `0`.

If any of the three files is missing, empty or malformed, the command
prints `file not found` to standard error and exits with status 1.
Otherwise it exits with status 0.

## Library use

```python
from polymesh.importer import import_mesh, MeshImportError
from polymesh.ucd import UCDUtilities, UCDProperty

try:
    mesh = import_mesh("mesh_dir")
except MeshImportError as exc:
    raise SystemExit(str(exc))

markers = UCDProperty(
    label="Marker",
    unit_label="-",
    num_components=1,
    data=mesh.cell0d_marker_values(),
)
UCDUtilities().export_points("Cell0Ds.inp", mesh.cell0ds_coordinates, [markers])
```

### `polymesh.importer`

- `import_mesh(directory)` reads all three files and returns a
  `PolygonalMesh`.
- `import_cell0ds(mesh, directory)`, `import_cell1ds(mesh, directory)` and
  `import_cell2ds(mesh, directory)` each fill one part of an existing mesh.
- All of them raise `MeshImportError` on the following:
  - a file that cannot be opened
  - a file with no data rows
  - a missing, non-numeric or negative integer field
  - an id out of range

What is read is logged at debug level through the standard `logging`
module.

### `polymesh.mesh`

`PolygonalMesh` is a dataclass. It holds:

- `cell0ds_id`, `cell0ds_coordinates` and `marker_cell0ds`. The
  coordinates are `(x, y, 0.0)` tuples indexed by id.
- `cell1ds_id`, `cell1ds_extrema` and `marker_cell1ds`. The extrema are
  `(origin, end)` tuples indexed by id.
- `cell2ds_id`, `cell2ds_marker`, `cell2ds_vertices` and `cell2ds_edges`.

It also has the computed properties `num_cell0ds`, `num_cell1ds`,
`num_cell2ds`, `cell2ds_num_vertices` and `cell2ds_num_edges`.

`cell0d_marker_values()` and `cell1d_marker_values()` return one float per
point or segment. Each value is that item's marker, or `0.0` where it has
none.

### `polymesh.ucd`

`UCDUtilities` writes ASCII UCD files through these methods:

- `export_points`
- `export_segments`
- `export_polygons`, for triangles and quadrilaterals only
- `export_polyhedra`, for tetrahedra only

Any other polygon or polyhedron raises `ValueError`.

Optional `materials` give each cell a material id. They are used only when
there is exactly one per cell; otherwise every id is `0`. Fields are
`UCDProperty` values, with `num_components` values per item. Each cell is
a `UCDCell` with a `CellType`, and `label()` returns its UCD keyword.

## What it does not do

The polygons in `Cell2Ds.csv` are read into the mesh, but the command does
not export them. To write them, call `export_polygons` yourself. The
package does not check mesh quality: it does not verify polygon areas or
segment lengths. It only writes the ASCII UCD variant.

## Running the tests

```
pip install -e ".[test]"
pytest
```