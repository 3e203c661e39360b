"""Entity components, input bindings and the keys naming them in simulation files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .geometry import GeometryData, Vertex
from .intervals import Interval, IntervalType
from .physics import FrameType

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]  # (w, x, y, z)

IDENTITY_QUAT: Quat = (1.0, 0.0, 0.0, 0.0)
REF_PREFIX = "ref."


# ----- Core -----


@dataclass
class Transform:
    """Position and orientation (quaternion w, x, y, z)."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Quat = IDENTITY_QUAT


# ----- Physics -----


@dataclass
class RigidBody:
    """Velocity (m/s), acceleration (m/s^2) and mass (kg)."""

    velocity: Vec3 = (0.0, 0.0, 0.0)
    acceleration: Vec3 = (0.0, 0.0, 0.0)
    mass: float = 0.0


@dataclass
class OrbitingBody:
    """A body orbiting another; the file refers to the central body by reference."""

    central_mass: float = 0.0
    central_mass_ref: str = ""


@dataclass
class ReferenceFrame:
    """A frame of reference relative to an optional parent entity."""

    parent_id: int | None = None
    parent_id_ref: str = ""
    frame_type: FrameType = FrameType.INERTIAL
    local_transform: Transform = field(default_factory=Transform)
    global_transform: Transform = field(default_factory=Transform)
    scale: float = 1.0
    visual_scale: float = 1.0


@dataclass
class ShapeParameters:
    """Properties of an ellipsoidal celestial body."""

    equat_radius: float = 0.0
    flattening: float = 0.0
    grav_param: float = 0.0
    rot_velocity: Vec3 = (0.0, 0.0, 0.0)
    j2: float = 0.0


# ----- Spacecraft -----


@dataclass
class Spacecraft:
    """Perturbation properties of a spacecraft."""

    drag_coefficient: float = 0.0
    reference_area: float = 0.0
    reflectivity_coefficient: float = 0.0


@dataclass
class Thruster:
    """Main engine properties of a spacecraft."""

    thrust_magnitude: float = 0.0
    specific_impulse: float = 0.0
    current_fuel_mass: float = 0.0
    max_fuel_mass: float = 0.0


# ----- Telemetry -----


@dataclass
class RenderTransform:
    """Transform used only for telemetry display."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Quat = IDENTITY_QUAT
    visual_scale: float = 1.0


# ----- Models and rendering -----


@dataclass
class Mesh:
    """A mesh's vertices and indices."""

    mesh_id: int = 0
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass
class MeshMaterial:
    """A material referring into a texture array."""

    texture_index: int = 0
    base_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


@dataclass
class SceneData:
    """Scene-wide data; a scene has exactly one."""

    geom_data: GeometryData | None = None


@dataclass
class MeshRenderable:
    """A renderable mesh and the range of its child meshes in the mesh offsets."""

    mesh_path: str = ""
    mesh_range: Interval = field(
        default_factory=lambda: Interval(0, 0, IntervalType.OPEN)
    )


# ----- Input -----


class CameraMovement(Enum):
    """Directions the camera can move in."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5


@dataclass
class Binding:
    """An input bound to a named action."""

    key_name: str = ""
    action_name: str = ""
    key_code: int = 0
    action: int = 0
    mods: int = 0
    only_on_cursor_lock: bool = False


# ----- Simulation file keys -----

PHYSICS_REFERENCE_FRAME = "PhysicsComponent::ReferenceFrame"
PHYSICS_RIGID_BODY = "PhysicsComponent::RigidBody"
PHYSICS_SHAPE_PARAMETERS = "PhysicsComponent::ShapeParameters"
PHYSICS_ORBITING_BODY = "PhysicsComponent::OrbitingBody"
SPACECRAFT_SPACECRAFT = "SpacecraftComponent::Spacecraft"
SPACECRAFT_THRUSTER = "SpacecraftComponent::Thruster"
RENDER_MESH_RENDERABLE = "RenderComponent::MeshRenderable"
TELEMETRY_RENDER_TRANSFORM = "TelemetryComponent::RenderTransform"

_KEY_TO_COMPONENT: dict[str, type] = {
    PHYSICS_REFERENCE_FRAME: ReferenceFrame,
    PHYSICS_RIGID_BODY: RigidBody,
    PHYSICS_SHAPE_PARAMETERS: ShapeParameters,
    PHYSICS_ORBITING_BODY: OrbitingBody,
    SPACECRAFT_SPACECRAFT: Spacecraft,
    SPACECRAFT_THRUSTER: Thruster,
    RENDER_MESH_RENDERABLE: MeshRenderable,
    TELEMETRY_RENDER_TRANSFORM: RenderTransform,
}
_COMPONENT_TO_KEY: dict[type, str] = {v: k for k, v in _KEY_TO_COMPONENT.items()}


def component_for_key(key: str) -> type:
    """Return the component type named by a simulation-file key."""
    try:
        return _KEY_TO_COMPONENT[key]
    except KeyError:
        raise KeyError(f"Unknown component key: {key!r}") from None


def key_for_component(component_type: type) -> str:
    """Return the simulation-file key of a component type."""
    try:
        return _COMPONENT_TO_KEY[component_type]
    except KeyError:
        name = getattr(component_type, "__qualname__", component_type)
        raise KeyError(f"Component type {name} has no simulation-file key") from None


def is_reference(value: Any) -> bool:
    """Return True if ``value`` is a reference to another entity (``ref.<name>``)."""
    return isinstance(value, str) and value.startswith(REF_PREFIX)


def reference_target(value: str) -> str:
    """Return the entity name a reference points to."""
    if not is_reference(value):
        raise ValueError(f"Not an entity reference: {value!r}")
    return value[len(REF_PREFIX):]