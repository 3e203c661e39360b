from astrocelerate.geometry import GeometryData, Material, MeshData, MeshOffset, Vertex


def make_vertex(dx=0.0):
    return Vertex(
        position=(1.0 + dx, 2.0, 3.0),
        color=(0.5, 0.5, 0.5),
        tex_coord0=(0.25, 0.75),
        normal=(0.0, 0.0, 1.0),
        tangent=(1.0, 0.0, 0.0),
    )


def test_identical_vertices_equal_and_hash_alike():
    first = make_vertex()
    second = Vertex(
        position=(1.0, 2.0, 3.0),
        color=(0.5, 0.5, 0.5),
        tex_coord0=(0.25, 0.75),
        normal=(0.0, 0.0, 1.0),
        tangent=(1.0, 0.0, 0.0),
    )
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_vertices_within_epsilon_equal():
    assert make_vertex() == make_vertex(1e-9)


def test_vertices_far_apart_differ():
    assert not (make_vertex() == make_vertex(1e-3))


def test_vertex_dedup_in_set():
    assert len({make_vertex(), make_vertex(), make_vertex(0.5)}) == 2


def test_vertex_compared_with_other_type():
    assert (make_vertex() == "vertex") is False


def test_material_defaults():
    m = Material()
    assert m.albedo_color == (1.0, 1.0, 1.0)
    assert m.roughness_factor == 1.0
    assert all(
        idx == -1
        for idx in (
            m.albedo_map_index,
            m.metallic_roughness_map_index,
            m.height_map_index,
            m.normal_map_index,
            m.ao_map_index,
            m.emissive_map_index,
        )
    )


def test_containers_do_not_share_lists():
    a, b = MeshData(), MeshData()
    a.vertices.append(make_vertex())
    assert b.vertices == []
    g = GeometryData(mesh_count=1, mesh_offsets=[MeshOffset(index_count=6)])
    assert g.mesh_offsets[0].index_count == 6
    assert GeometryData().mesh_offsets == []