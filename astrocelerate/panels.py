"""Registry of GUI panels and bit masks of which panels are open."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

from .logging_manager import MsgType, get_logger

PANEL_NULL = -1
MAX_PANEL_COUNT = 256


class Toggle(Enum):
    """Whether to open or close a panel."""

    ON = 0
    OFF = 1


class PanelRegistry:
    """Assigns ids to panel names and records which panels are instanced.

    An instanced panel only opens through events that give it data to render;
    a persistent panel is always available.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = PANEL_NULL + 1
        self._ids: dict[str, int] = {}
        self._names: list[str] = []
        self._instanced: set[int] = set()

    def register_panel(self, name: str, instanced: bool = False) -> int:
        """Return the id of panel ``name``, registering it if it is new.

        Returns ``PANEL_NULL`` once ``MAX_PANEL_COUNT`` panels exist.
        """
        with self._lock:
            if self._next_id >= MAX_PANEL_COUNT:
                get_logger().log(
                    MsgType.WARNING,
                    "PanelRegistry.register_panel",
                    f'Cannot register panel "{name}": Panel count exceeded the maximum '
                    f"of {MAX_PANEL_COUNT}! The default NULL panel (ID: {PANEL_NULL}) "
                    "will be returned instead.",
                )
                return PANEL_NULL
            if name in self._ids:
                return self._ids[name]
            new_id = self._next_id
            self._next_id += 1
            self._ids[name] = new_id
            self._names.append(name)
            if instanced:
                self._instanced.add(new_id)
            return new_id

    def panel_name(self, panel_id: int) -> str:
        """Return the name of ``panel_id``, or ``"Unknown Panel"`` if unregistered."""
        with self._lock:
            if PANEL_NULL < panel_id < len(self._names):
                return self._names[panel_id]
        get_logger().log(
            MsgType.WARNING,
            "PanelRegistry.panel_name",
            f"Cannot get name for panel ID {panel_id}: Panel does not exist! A placeholder "
            "name will be returned instead. Please ensure the panel is registered.",
        )
        return "Unknown Panel"

    def is_instanced(self, panel_id: int) -> bool:
        """Return True if ``panel_id`` was registered as instanced."""
        with self._lock:
            return panel_id in self._instanced


def _check_range(panel_id: int) -> None:
    if not 0 <= panel_id < MAX_PANEL_COUNT:
        raise IndexError(f"Panel ID {panel_id} is out of range")


@dataclass
class PanelMask:
    """A set of open panels stored as ``MAX_PANEL_COUNT`` bits."""

    bits: int = 0

    def is_open(self, panel_id: int) -> bool:
        """Return True if ``panel_id`` is open; the null panel never is."""
        if panel_id == PANEL_NULL:
            return False
        _check_range(panel_id)
        return bool(self.bits >> panel_id & 1)

    def toggle(self, panel_id: int, mode: Toggle) -> None:
        """Open or close ``panel_id``; the null panel is ignored."""
        if panel_id == PANEL_NULL:
            return
        _check_range(panel_id)
        if mode is Toggle.ON:
            self.bits |= 1 << panel_id
        else:
            self.bits &= ~(1 << panel_id)

    def serialize(self) -> str:
        """Return the mask as ``MAX_PANEL_COUNT`` digits, highest panel id first."""
        return format(self.bits, f"0{MAX_PANEL_COUNT}b")

    @classmethod
    def deserialize(cls, text: str) -> "PanelMask":
        """Build a mask from a string of ``0`` and ``1`` digits.

        The last digit is panel 0; only the first ``MAX_PANEL_COUNT`` digits are read.
        """
        digits = text[:MAX_PANEL_COUNT]
        if any(ch not in "01" for ch in digits):
            raise ValueError(f"Invalid panel mask string: {text!r}")
        return cls(int(digits, 2) if digits else 0)