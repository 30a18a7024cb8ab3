import pytest

from eqmaptools.chunky_tri_mesh import ChunkyTriMesh


def _strip(count):
    verts = []
    tris = []
    for k in range(count):
        base = len(verts)
        verts.append((10.0 * k, 0.0, 0.0))
        verts.append((10.0 * k + 1.0, 0.0, 0.0))
        verts.append((10.0 * k, 0.0, 1.0))
        tris.append((base, base + 1, base + 2))
    return verts, tris


def _leaves(mesh):
    return [index for index, node in enumerate(mesh.nodes) if node.is_leaf]


def test_all_triangles_kept():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert sorted(mesh.tris) == sorted(tris)
    collected = [t for leaf in _leaves(mesh) for t in mesh.chunk_triangles(leaf)]
    assert sorted(collected) == sorted(tris)


def test_chunk_size_bound():
    verts, tris = _strip(9)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.max_tris_per_chunk <= 2
    assert all(mesh.nodes[leaf].n <= 2 for leaf in _leaves(mesh))


def test_root_escape_covers_tree():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.nodes[0].i == -len(mesh.nodes)


def test_single_leaf_when_chunk_large():
    verts, tris = _strip(3)
    mesh = ChunkyTriMesh.build(verts, tris, 10)
    assert len(mesh.nodes) == 1
    assert mesh.nodes[0].i == 0
    assert mesh.nodes[0].n == 3
    assert mesh.max_tris_per_chunk == 3


def test_rect_covering_everything_returns_all_leaves():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.chunks_overlapping_rect((-100.0, -100.0), (1000.0, 1000.0)) == _leaves(mesh)


def test_rect_far_away_returns_nothing():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.chunks_overlapping_rect((500.0, 500.0), (600.0, 600.0)) == []


def test_rect_selects_first_triangle_chunk():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    ids = mesh.chunks_overlapping_rect((0.0, 0.0), (1.0, 1.0))
    assert len(ids) == 1
    assert tris[0] in mesh.chunk_triangles(ids[0])


def test_max_ids_limits_results():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    everything = mesh.chunks_overlapping_rect((-100.0, -100.0), (1000.0, 1000.0))
    limited = mesh.chunks_overlapping_rect((-100.0, -100.0), (1000.0, 1000.0), max_ids=2)
    assert limited == everything[:2]


def test_segment_across_strip_hits_all_leaves():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.chunks_overlapping_segment((-5.0, 0.5), (100.0, 0.5)) == _leaves(mesh)


def test_segment_through_first_triangle_only():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    ids = mesh.chunks_overlapping_segment((0.5, -5.0), (0.5, 5.0))
    assert len(ids) == 1
    assert tris[0] in mesh.chunk_triangles(ids[0])


def test_segment_missing_everything():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    assert mesh.chunks_overlapping_segment((-5.0, 50.0), (100.0, 50.0)) == []


def test_empty_input_gives_empty_mesh():
    mesh = ChunkyTriMesh.build([], [], 4)
    assert mesh.nodes == []
    assert mesh.chunks_overlapping_rect((0.0, 0.0), (1.0, 1.0)) == []


def test_invalid_chunk_size():
    verts, tris = _strip(2)
    with pytest.raises(ValueError):
        ChunkyTriMesh.build(verts, tris, 0)


def test_chunk_triangles_of_inner_node_raises():
    verts, tris = _strip(8)
    mesh = ChunkyTriMesh.build(verts, tris, 2)
    with pytest.raises(ValueError):
        mesh.chunk_triangles(0)
    with pytest.raises(IndexError):
        mesh.chunk_triangles(len(mesh.nodes))