"""Engine-wide constants and resource locations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORKING_DIR = str(Path.cwd())
IN_DEBUG_MODE = __debug__

VULKAN_VERSION_STR = "1.2"

APP_NAME = "Astrocelerate"
APP_VERSION = "0.1.0-alpha"


def _exec_dir() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


EXEC_DIR = _exec_dir()
ROOT_DIR = str(EXEC_DIR.parent)


def resource_path(root: str | Path, relative: str) -> str:
    """Join a resource path onto a root directory."""
    return str(Path(root) / relative)


# Shader bindings and locations
VERT_BIND_GLOBAL_UBO = 0
VERT_BIND_OBJECT_UBO = 1

VERT_LOC_IN_INPOSITION = 0
VERT_LOC_IN_INCOLOR = 1
VERT_LOC_IN_INTEXTURECOORD_0 = 2
VERT_LOC_IN_INNORMAL = 3
VERT_LOC_IN_INTANGENT = 4

VERT_LOC_OUT_FRAGCOLOR = 0
VERT_LOC_OUT_FRAGTEXTURECOORD_0 = 1
VERT_LOC_OUT_FRAGNORMAL = 2
VERT_LOC_OUT_FRAGTANGENT = 3
VERT_LOC_OUT_FRAGPOSITION = 4

FRAG_BIND_MATERIAL_PARAMETERS = 0
FRAG_BIND_TEXTURE_MAP = 0

FRAG_LOC_IN_FRAGCOLOR = VERT_LOC_OUT_FRAGCOLOR
FRAG_LOC_IN_FRAGTEXTURECOORD_0 = VERT_LOC_OUT_FRAGTEXTURECOORD_0
FRAG_LOC_IN_FRAGNORMAL = VERT_LOC_OUT_FRAGNORMAL
FRAG_LOC_IN_FRAGTANGENT = VERT_LOC_OUT_FRAGTANGENT
FRAG_LOC_IN_FRAGPOSITION = VERT_LOC_OUT_FRAGPOSITION

FRAG_LOC_OUT_OUTCOLOR = 0

SHADER_VERTEX = resource_path(ROOT_DIR, "bin/Shaders/VertexShader.spv")
SHADER_FRAGMENT = resource_path(ROOT_DIR, "bin/Shaders/FragmentShader.spv")

# Subpasses
SUBPASS_MAIN = 0
SUBPASS_IMGUI = 1

# Window
DEFAULT_WINDOW_WIDTH = 1500
DEFAULT_WINDOW_HEIGHT = 900

# Configuration
IMGUI_DEFAULT_CONFIG = resource_path(ROOT_DIR, "configs/DefaultImGuiConfig.ini")


@dataclass(frozen=True)
class NotoSansFonts:
    """Paths of the bundled Noto Sans font files."""

    bold: str
    bold_italic: str
    italic: str
    light: str
    light_italic: str
    regular: str
    regular_math: str
    regular_mono: str


def noto_sans_fonts(root: str | Path = ROOT_DIR) -> NotoSansFonts:
    """Return the Noto Sans font paths under ``root``."""
    base = "assets/Fonts/NotoSans/"
    return NotoSansFonts(
        bold=resource_path(root, base + "NotoSans-Bold.ttf"),
        bold_italic=resource_path(root, base + "NotoSans-BoldItalic.ttf"),
        italic=resource_path(root, base + "NotoSans-Italic.ttf"),
        light=resource_path(root, base + "NotoSans-Light.ttf"),
        light_italic=resource_path(root, base + "NotoSans-LightItalic.ttf"),
        regular=resource_path(root, base + "NotoSans-Regular.ttf"),
        regular_math=resource_path(root, base + "NotoSansMath-Regular.ttf"),
        regular_mono=resource_path(root, base + "NotoSansMono-Regular.ttf"),
    )


NOTO_SANS = noto_sans_fonts(ROOT_DIR)

# Gamma correction
GAMMA_THRESHOLD = 0.04045
GAMMA_DIVISOR = 12.92
GAMMA_OFFSET = 0.055
GAMMA_SCALE = 1.055
GAMMA_EXPONENT = 2.4

# Physics
G = 6.67430e-11  # m^3 kg^-1 s^-2
C = 299792458.0  # m/s
AU = 149597870700.0  # m

# Simulation
MAX_SIMULATION_STEPS = 10000
MAX_FRAMES_IN_FLIGHT = 3
MAX_GLOBAL_TEXTURES = 128
TIME_STEP = 1.0 / 60.0
SIMULATION_SCALE = 1e6  # metres per world unit
UP_AXIS = (0.0, 0.0, 1.0)