"""Geometry data: vertices, materials and mesh offsets."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

# Machine epsilon of a 32-bit float.
FLOAT_EPSILON = 1.1920928955078125e-07


def _close(a: tuple[float, ...], b: tuple[float, ...]) -> bool:
    return all(abs(x - y) < FLOAT_EPSILON for x, y in zip(a, b))


@dataclass(eq=False)
class Vertex:
    """A mesh vertex; vertices within float epsilon of each other compare equal."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (0.0, 0.0, 0.0)
    tex_coord0: Vec2 = (0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tangent: Vec3 = (0.0, 0.0, 0.0)

    def _fields(self) -> tuple[tuple[float, ...], ...]:
        return (
            tuple(self.position),
            tuple(self.color),
            tuple(self.tex_coord0),
            tuple(self.normal),
            tuple(self.tangent),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return all(_close(a, b) for a, b in zip(self._fields(), other._fields()))

    def __hash__(self) -> int:
        return hash(self._fields())


@dataclass
class Material:
    """PBR material parameters; a map index of -1 means no texture."""

    albedo_color: Vec3 = (1.0, 1.0, 1.0)
    albedo_map_index: int = -1
    metallic_factor: float = 0.0
    roughness_factor: float = 1.0
    metallic_roughness_map_index: int = -1
    height_map_index: int = -1
    normal_map_index: int = -1
    ao_map_index: int = -1
    emissive_color: Vec3 = (0.0, 0.0, 0.0)
    emissive_map_index: int = -1
    opacity: float = 1.0


@dataclass
class MeshOffset:
    """Offsets of one mesh into the global vertex and index buffers."""

    vertex_offset: int = 0
    index_offset: int = 0
    material_index: int = 0
    index_count: int = 0


@dataclass
class MeshData:
    """Raw mesh data as loaded from a model."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    child_mesh_offsets: list[MeshOffset] = field(default_factory=list)


@dataclass
class GeometryData:
    """Processed geometry of a scene."""

    mesh_count: int = 0
    mesh_offsets: list[MeshOffset] = field(default_factory=list)
    mesh_materials: list[Material] = field(default_factory=list)