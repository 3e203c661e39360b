"""GPU queue families and physical device scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

QUEUE_GRAPHICS_BIT = 0x00000001
QUEUE_TRANSFER_BIT = 0x00000004


@dataclass
class QueueFamily:
    """A queue family; it exists only once it has an index."""

    index: int | None = None
    flag: int = 0
    device_queue: Any = None
    device_name: str = ""
    supports_presentation: bool = False


def _graphics() -> QueueFamily:
    return QueueFamily(flag=QUEUE_GRAPHICS_BIT, device_name="Graphics queue family")


def _presentation() -> QueueFamily:
    return QueueFamily(device_name="Presentation queue family")


def _transfer() -> QueueFamily:
    return QueueFamily(flag=QUEUE_TRANSFER_BIT, device_name="Transfer queue family")


@dataclass
class QueueFamilyIndices:
    """The graphics, presentation and transfer queue families of a device."""

    graphics_family: QueueFamily = field(default_factory=_graphics)
    presentation_family: QueueFamily = field(default_factory=_presentation)
    transfer_family: QueueFamily = field(default_factory=_transfer)

    def family_exists(self, family: QueueFamily) -> bool:
        """Return True if ``family`` has an index."""
        return family.index is not None

    def all_families(self) -> list[QueueFamily]:
        """Return the graphics, presentation and transfer families."""
        return [self.graphics_family, self.presentation_family, self.transfer_family]

    def available_families(
        self, families: Iterable[QueueFamily] | None = None
    ) -> list[QueueFamily]:
        """Return the families that have an index; all families if none are given."""
        candidates = list(families) if families else self.all_families()
        return [f for f in candidates if f.index is not None]

    def available_indices(self, families: Iterable[QueueFamily] | None = None) -> list[int]:
        """Return the indices of the families that have one."""
        return [f.index for f in self.available_families(families)]


@dataclass
class PhysicalDeviceProperties:
    """A candidate physical device and its suitability score."""

    device: Any = None
    device_name: str = ""
    device_properties: Any = None
    is_compatible: bool = True
    optional_score: int = 0


def score_comparator(first: PhysicalDeviceProperties, second: PhysicalDeviceProperties) -> bool:
    """Return True if ``first`` ranks no higher than ``second``."""
    return (not first.is_compatible and second.is_compatible) or (
        second.is_compatible and first.optional_score <= second.optional_score
    )