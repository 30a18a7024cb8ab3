# eqmaptools

Building blocks for working with zone map data: geometry containers,
a bounds-checked binary reader, spatial queries, an editor camera, and
the file format and editing model behind volume region maps.

The package is pure Python and has no runtime dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `eqmaptools.bounding_box` | `AlignedBoundingBox` with point, box and sphere tests |
| `eqmaptools.anyvalue` | `AnyValue`, a holder for one value, with `any_cast` and `try_any_cast` |
| `eqmaptools.endian` | `network_to_host_order` and `host_to_network_order` for `struct` format codes |
| `eqmaptools.buffer_reader` | `BufferReader`, a bounds-checked reader over bytes that raises `BufferUnderrun` |
| `eqmaptools.eqg` | EQG models: `Material`, `Geometry`, `InvisWall`, `Region`, `ZoneOptions`, `Terrain` |
| `eqmaptools.placeable` | `Placeable` objects and `PlaceableGroup` |
| `eqmaptools.s3d` | S3D models: `BSPTree`, `BSPNode`, `BSPRegion`, `Texture`, `TextureBrush`, `S3DGeometry` |
| `eqmaptools.chunky_tri_mesh` | `ChunkyTriMesh`, an AABB tree over triangles for 2D overlap queries |
| `eqmaptools.hotkeys` | `HotkeyRegistry`, `EntityRegistry`, `RegionType` and `region_type_name` |
| `eqmaptools.camera` | A free-fly `Camera`, with `perspective`, `look_at`, `invert_matrix` and picking rays |
| `eqmaptools.volume` | Volume region files (`.wtr`) and the `VolumeEditor` |

## Examples

### Bounding boxes

```python
from eqmaptools.bounding_box import AlignedBoundingBox

box = AlignedBoundingBox.from_corners((0.0, 0.0, 0.0), (10.0, 10.0, 10.0))
box.contains((5.0, 5.0, 5.0))                     # True
box.intersects_sphere((12.0, 5.0, 5.0), 4.0)      # squared distance 4.0 <= 4.0: True

cube = AlignedBoundingBox.from_center((0.0, 0.0, 0.0), 2.0)
box.intersects_aabb(cube)                         # True: they touch at the origin
```

### Reading packed data

```python
from eqmaptools.buffer_reader import BufferReader, BufferUnderrun

reader = BufferReader(data)
magic, version = reader.read_struct("II")   # little-endian unless the format says otherwise
name = reader.read_string()                 # NUL-terminated, decoded as latin-1
```

Reading past the end of the buffer raises `BufferUnderrun` and leaves the
offset where it was.

### Holding values of any type

```python
from eqmaptools.anyvalue import AnyValue, any_cast, try_any_cast, BadAnyCast

held = AnyValue(42)
any_cast(held, int)        # 42
try_any_cast(held, str)    # None
any_cast(held, float)      # raises BadAnyCast: the type must match exactly
```

### Chunked triangle meshes

```python
from eqmaptools.chunky_tri_mesh import ChunkyTriMesh

mesh = ChunkyTriMesh.build(verts, tris, 256)
for node_index in mesh.chunks_overlapping_rect((0.0, 0.0), (50.0, 50.0), 64):
    triangles = mesh.chunk_triangles(node_index)
```

Vertices are `(x, y, z)` triples; the tree partitions triangles on the
x/z plane. `chunks_overlapping_segment` answers the same question for a
line segment.

### Hotkeys

```python
from eqmaptools.hotkeys import HotkeyRegistry

registry = HotkeyRegistry()
registry.register(lambda ident: print("hotkey", ident), 1, key=261)
registry.try_hotkey({261})     # key held: nothing fires yet
registry.try_hotkey(set())     # key released: prints "hotkey 1", returns True
```

A listener is either a callable or an object with an `on_hotkey(ident)`
method. At most one hotkey fires per check.

### Camera and picking

```python
from eqmaptools.camera import Camera

camera = Camera()
camera.move(forward=1.0, strafe=0.0, delta_time=0.016)
camera.update_matrices(1280, 720)
start, ray = camera.click_vectors(640, 360, 1280, 720)
```

### Volume maps

```python
from eqmaptools.volume import VolumeEditor, load_volumes, save_volumes, VolumeFormatError

try:
    regions = load_volumes("maps/volume/qeynos.wtr")
except (OSError, VolumeFormatError):
    regions = []

editor = VolumeEditor(regions=regions)
editor.add_region((10.0, 20.0, 5.0))   # a water region, selected and marked modified
editor.expand("x")
editor.save("maps/volume/qeynos.wtr")  # writes only when something was modified
```

Volume files start with the `EQEMUWATER` magic and a version of `2`;
any other header, or a truncated file, raises `VolumeFormatError`.

## What this package does not do

- There is no graphical editor: no window, rendering or input handling.
  `Camera`, `HotkeyRegistry` and `VolumeEditor` are the models such an
  editor would drive.
- There is no reader or editor for waypoint path files.
- There is no parser for WLD fragments, no archive reader, and no event
  loop or timers.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```