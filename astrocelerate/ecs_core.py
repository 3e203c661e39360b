"""Core storage for the entity-component system: entities, component arrays and type ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .logging_manager import EngineError

MAX_COMPONENTS_PER_ENTITY = 64
INVALID_ENTITY = 0xFFFFFFFF
MAX_ENTITIES = 100_000

C = TypeVar("C")


@dataclass(frozen=True)
class Entity:
    """An entity handle: an id, a version and a display name."""

    id: int = 0
    version: int = 0
    name: str = ""

    def __hash__(self) -> int:
        return hash(self.id) ^ hash(self.version)


class ComponentArray(Generic[C]):
    """A dense array of components with a sparse entity-to-index map.

    Removal swaps the removed slot with the last one, so it runs in constant time.
    """

    def __init__(self) -> None:
        self._components: list[C] = []
        self._entity_ids: list[int] = []
        self._index_of: dict[int, int] = {}

    def insert(self, entity_id: int, component: C) -> None:
        """Attach ``component`` to ``entity_id``."""
        if entity_id in self._index_of:
            raise EngineError(
                "ComponentArray.insert",
                "Cannot insert entity into component array: Entity already exists! "
                f"(Entity ID: {entity_id})",
            )
        self._index_of[entity_id] = len(self._components)
        self._components.append(component)
        self._entity_ids.append(entity_id)

    def erase(self, entity_id: int) -> None:
        """Detach the component of ``entity_id``; does nothing if there is none."""
        index = self._index_of.get(entity_id)
        if index is None:
            return
        last = len(self._components) - 1
        self._components[index], self._components[last] = (
            self._components[last],
            self._components[index],
        )
        self._entity_ids[index], self._entity_ids[last] = (
            self._entity_ids[last],
            self._entity_ids[index],
        )
        self._index_of[self._entity_ids[index]] = index
        self._components.pop()
        self._entity_ids.pop()
        del self._index_of[entity_id]

    def update(self, entity_id: int, component: C) -> None:
        """Replace the component of ``entity_id``."""
        index = self._index_of.get(entity_id)
        if index is None:
            raise EngineError(
                "ComponentArray.update",
                f'Cannot update component of type "{type(component).__qualname__}" '
                f"for entity #{entity_id}: Entity does not exist!",
            )
        self._components[index] = component

    def get(self, entity_id: int) -> C:
        """Return the component of ``entity_id``."""
        index = self._index_of.get(entity_id)
        if index is None:
            raise EngineError(
                "ComponentArray.get",
                f"Cannot get component for entity #{entity_id}: Entity does not exist!",
            )
        return self._components[index]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._index_of

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._entity_ids))


class ComponentTypeRegistry:
    """Hands out a unique, stable integer id to each component type."""

    def __init__(self) -> None:
        self._ids: dict[type, int] = {}

    def type_id(self, component_type: type) -> int:
        """Return the id of ``component_type``, assigning the next free one if new."""
        try:
            return self._ids[component_type]
        except KeyError:
            new_id = len(self._ids)
            self._ids[component_type] = new_id
            return new_id