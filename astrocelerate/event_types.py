"""Event types carried by the event dispatcher, with their bit flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Any, ClassVar


class Stage(Enum):
    """The stage of the application pipeline the user is in."""

    NULL_STAGE = 0
    START_SCREEN = auto()
    SETUP_ORBITAL = auto()
    LOADING_SCREEN = auto()
    WORKSPACE_ORBITAL = auto()


class State(Enum):
    """The current application state."""

    NULL_STATE = 0
    IDLE = auto()
    RECREATING_SWAPCHAIN = auto()


class EventFlag(IntFlag):
    """One bit per event type."""

    INIT_OFFSCREEN_PIPELINE = 1 << 0
    INIT_PRESENT_PIPELINE = 1 << 1
    INIT_GEOMETRY = 1 << 2
    INIT_SCENE = 1 << 3
    INIT_IMGUI = 1 << 4
    INIT_INPUT_MANAGER = 1 << 5
    INIT_BUFFER_MANAGER = 1 << 6
    INIT_SWAPCHAIN_MANAGER = 1 << 7

    RECREATION_SWAPCHAIN = 1 << 8
    RECREATION_OFFSCREEN_RESOURCES = 1 << 9

    UPDATE_APPLICATION_STATUS = 1 << 10
    UPDATE_INPUT = 1 << 11
    UPDATE_RENDERABLES = 1 << 12
    UPDATE_SESSION_STATUS = 1 << 13
    UPDATE_PHYSICS = 1 << 14
    UPDATE_PER_FRAME_BUFFERS = 1 << 15
    UPDATE_APP_IS_STABLE = 1 << 16
    UPDATE_REGISTRY_RESET = 1 << 17
    UPDATE_SCENE_LOAD_PROGRESS = 1 << 18
    UPDATE_SCENE_LOAD_COMPLETE = 1 << 19

    REQUEST_INIT_SESSION = 1 << 20
    REQUEST_PROCESS_SECONDARY_COMMAND_BUFFERS = 1 << 21
    REQUEST_INIT_SCENE_RESOURCES = 1 << 22


EVENT_FLAG_COUNT = 22 + 1  # highest bit position + 1


def flag_bit(flag: int) -> int:
    """Return the bit position of a single event flag (``1 << x`` gives ``x``)."""
    value = int(flag)
    if value <= 0 or value & (value - 1):
        raise ValueError(f"Expected a single event flag, got {value:#x}")
    return value.bit_length() - 1


class RenderableType(Enum):
    """What kind of renderables are to be updated."""

    MESHES = 0
    GUI = 1


class SessionStatusKind(Enum):
    """Lifecycle status of a user session."""

    PREPARE_FOR_RESET = 0
    RESET = 1
    PREPARE_FOR_INIT = 2
    INITIALIZED = 3


# ----- Initialization events -----


@dataclass(frozen=True)
class InitOffscreenPipeline:
    """The offscreen pipeline has been initialized."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_OFFSCREEN_PIPELINE

    render_pass: Any = None
    pipeline: Any = None
    pipeline_layout: Any = None
    per_frame_descriptor_sets: list = field(default_factory=list)
    pbr_descriptor_set: Any = None
    tex_array_descriptor_set: Any = None
    offscreen_image_views: list = field(default_factory=list)
    offscreen_image_samplers: list = field(default_factory=list)
    offscreen_frame_buffers: list = field(default_factory=list)


@dataclass(frozen=True)
class InitPresentPipeline:
    """The presentation pipeline has been initialized."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_PRESENT_PIPELINE

    render_pass: Any = None


@dataclass(frozen=True)
class InitGeometry:
    """Data for the global vertex and index buffers is available."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_GEOMETRY

    vertex_data: list = field(default_factory=list)
    index_data: list = field(default_factory=list)
    geom_data: Any = None


@dataclass(frozen=True)
class InitScene:
    """The scene has been initialized."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_SCENE


@dataclass(frozen=True)
class InitImGui:
    """The GUI context is available."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_IMGUI


@dataclass(frozen=True)
class InitInputManager:
    """The input manager has been initialized."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_INPUT_MANAGER


@dataclass(frozen=True)
class InitBufferManager:
    """The buffer manager has been initialized."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_BUFFER_MANAGER

    global_vertex_buffer: Any = None
    global_index_buffer: Any = None
    per_frame_descriptor_sets: list = field(default_factory=list)


@dataclass(frozen=True)
class InitSwapchainManager:
    """The swapchain manager is ready."""

    event_flag: ClassVar[EventFlag] = EventFlag.INIT_SWAPCHAIN_MANAGER


# ----- Recreation events -----


@dataclass(frozen=True)
class SwapchainRecreated:
    """The swapchain has been recreated."""

    event_flag: ClassVar[EventFlag] = EventFlag.RECREATION_SWAPCHAIN

    image_index: int = 0
    image_layouts: list = field(default_factory=list)


@dataclass(frozen=True)
class OffscreenResourcesRecreated:
    """The offscreen render targets have been recreated."""

    event_flag: ClassVar[EventFlag] = EventFlag.RECREATION_OFFSCREEN_RESOURCES


# ----- Update events -----


@dataclass(frozen=True)
class ApplicationStatus:
    """The application stage or state has changed."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_APPLICATION_STATUS

    app_stage: Stage = Stage.NULL_STAGE
    app_state: State = State.NULL_STATE


@dataclass(frozen=True)
class InputUpdate:
    """User input needs to be processed."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_INPUT

    delta_time: float = 0.0


@dataclass(frozen=True)
class RenderablesUpdate:
    """Renderables need to be updated."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_RENDERABLES

    renderable_type: RenderableType = RenderableType.MESHES
    command_buffer: Any = None
    current_frame: int = 0


@dataclass(frozen=True)
class SessionStatus:
    """The status of the current session has changed."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_SESSION_STATUS

    session_status: SessionStatusKind = SessionStatusKind.PREPARE_FOR_RESET


@dataclass(frozen=True)
class PhysicsUpdate:
    """Physics need to be updated."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_PHYSICS

    dt: float = 0.0


@dataclass(frozen=True)
class PerFrameBuffersUpdate:
    """Per-frame uniform buffers need to be updated."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_PER_FRAME_BUFFERS

    current_frame: int = 0
    render_origin: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class AppIsStable:
    """All services exist and the application is at a stable point."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_APP_IS_STABLE


@dataclass(frozen=True)
class RegistryReset:
    """The registry has been reset."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_REGISTRY_RESET


@dataclass(frozen=True)
class SceneLoadProgress:
    """Progress of a long operation such as scene loading."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_SCENE_LOAD_PROGRESS

    progress: float = 0.0
    message: str = ""


@dataclass(frozen=True)
class SceneLoadComplete:
    """A long operation such as scene loading has finished."""

    event_flag: ClassVar[EventFlag] = EventFlag.UPDATE_SCENE_LOAD_COMPLETE

    load_successful: bool = False
    final_message: str = ""


# ----- Request events -----


@dataclass(frozen=True)
class InitSessionRequest:
    """A new user session is requested."""

    event_flag: ClassVar[EventFlag] = EventFlag.REQUEST_INIT_SESSION

    simulation_file_path: str = ""


@dataclass(frozen=True)
class ProcessSecondaryCommandBuffersRequest:
    """Secondary command buffers are ready to be recorded into the primary one."""

    event_flag: ClassVar[EventFlag] = EventFlag.REQUEST_PROCESS_SECONDARY_COMMAND_BUFFERS

    buffers: list = field(default_factory=list)


@dataclass(frozen=True)
class InitSceneResourcesRequest:
    """Scene processing is complete and its resources need initializing."""

    event_flag: ClassVar[EventFlag] = EventFlag.REQUEST_INIT_SCENE_RESOURCES