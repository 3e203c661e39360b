"""Entity management, component management, views and the registry facade."""

from __future__ import annotations

from typing import Any, Iterator

from .ecs_core import (
    MAX_COMPONENTS_PER_ENTITY,
    ComponentArray,
    ComponentTypeRegistry,
    Entity,
)
from .logging_manager import EngineError, MsgType, get_logger


def _build_mask(type_registry: ComponentTypeRegistry, component_types) -> int:
    mask = 0
    for component_type in component_types:
        bit = type_registry.type_id(component_type)
        if bit >= MAX_COMPONENTS_PER_ENTITY:
            raise EngineError(
                "build_component_mask",
                f'Component type "{component_type.__qualname__}" exceeds the maximum '
                f"of {MAX_COMPONENTS_PER_ENTITY} component types!",
            )
        mask |= 1 << bit
    return mask


class EntityManager:
    """Creates and destroys entities and keeps their component masks."""

    def __init__(self) -> None:
        self.reset()

    def create_entity(self, name: str) -> Entity:
        """Create a new entity with the next free id."""
        new_id = self._next_entity
        self._next_entity += 1
        entity = Entity(id=new_id, name=name)

        self._active_ids.append(new_id)
        while len(self._masks) <= new_id:
            self._masks.append(0)
        self._index_of[new_id] = len(self._active_ids) - 1
        self._entities[new_id] = entity
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy ``entity``; logs a warning if it does not exist."""
        index = self._index_of.get(entity.id)
        if index is None:
            get_logger().log(
                MsgType.WARNING,
                "EntityManager.destroy_entity",
                f'Cannot destroy entity "{entity.name}" (ID #{entity.id}): '
                "Entity does not exist!",
            )
            return

        last = len(self._active_ids) - 1
        if index != last:
            last_id = self._active_ids[last]
            self._active_ids[index], self._active_ids[last] = (
                self._active_ids[last],
                self._active_ids[index],
            )
            self._index_of[last_id] = index

        self._active_ids.pop()
        del self._index_of[entity.id]
        del self._entities[entity.id]
        if entity.id < len(self._masks):
            self._masks[entity.id] = 0

    def entities(self) -> dict[int, Entity]:
        """Return the live entities keyed by id."""
        return self._entities

    def entity_ids(self) -> list[int]:
        """Return the ids of all live entities."""
        return self._active_ids

    def component_masks(self) -> list[int]:
        """Return the component masks, indexed by entity id."""
        return self._masks

    def set_component_mask(self, entity_id: int, mask: int) -> None:
        """Set the component mask of ``entity_id``."""
        self._masks[entity_id] = mask

    def component_mask(self, entity_id: int) -> int:
        """Return the component mask of ``entity_id``."""
        return self._masks[entity_id]

    def reset(self) -> None:
        """Forget every entity and restart ids from zero."""
        self._next_entity = 0
        self._active_ids: list[int] = []
        self._masks: list[int] = []
        self._index_of: dict[int, int] = {}
        self._entities: dict[int, Entity] = {}


class ComponentManager:
    """Owns one component array per component type."""

    def __init__(self) -> None:
        self._arrays: dict[type, ComponentArray] = {}

    def init_component_array(self, component_type: type) -> None:
        """Create the array for ``component_type`` unless it already exists."""
        if component_type in self._arrays:
            get_logger().log(
                MsgType.WARNING,
                "ComponentManager.init_component_array",
                f'Skipping initialization of component array of type '
                f'"{component_type.__qualname__}" as it has already been initialized.',
            )
            return
        self._arrays[component_type] = ComponentArray()

    def component_array(self, component_type: type) -> ComponentArray:
        """Return the array for ``component_type``."""
        try:
            return self._arrays[component_type]
        except KeyError:
            raise EngineError(
                "ComponentManager.component_array",
                f'Cannot get component array of type "{component_type.__qualname__}": '
                "Component array does not exist!\n"
                "Make sure to initialize the component array first before performing "
                "operations on it.",
            ) from None

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach ``component`` to ``entity_id`` in the array of its type."""
        self.component_array(type(component)).insert(entity_id, component)

    def update_component(self, entity_id: int, component: Any) -> None:
        """Replace the component of the same type attached to ``entity_id``."""
        self.component_array(type(component)).update(entity_id, component)

    def remove_component(self, entity_id: int, component_type: type) -> None:
        """Detach the ``component_type`` component from ``entity_id``."""
        self.component_array(component_type).erase(entity_id)

    def get_component(self, entity_id: int, component_type: type) -> Any:
        """Return the ``component_type`` component of ``entity_id``."""
        return self.component_array(component_type).get(entity_id)

    def entity_has_component(self, entity_id: int, component_type: type) -> bool:
        """Return True if ``entity_id`` has a ``component_type`` component."""
        return entity_id in self.component_array(component_type)

    def has_array(self, component_type: type) -> bool:
        """Return True if an array for ``component_type`` exists."""
        return component_type in self._arrays


class View:
    """The entities that have every required component and none of the ignored ones.

    Iterating yields tuples ``(entity_id, component, ...)`` in the order of
    the requested component types.
    """

    def __init__(
        self,
        entity_manager: EntityManager,
        component_manager: ComponentManager,
        type_registry: ComponentTypeRegistry,
        component_types,
    ) -> None:
        self._entity_manager = entity_manager
        self._component_manager = component_manager
        self._type_registry = type_registry
        self._component_types = tuple(component_types)
        self._masks = list(entity_manager.component_masks())
        self._required = _build_mask(type_registry, self._component_types)
        self._ignored = 0
        self._matching = self._filter(list(entity_manager.entity_ids()))

    def _filter(self, source: list[int]) -> list[int]:
        result = []
        for entity_id in source:
            mask = self._masks[entity_id] if entity_id < len(self._masks) else 0
            if mask & self._required == self._required and not mask & self._ignored:
                result.append(entity_id)
        return result

    def ignore(self, *args: type) -> "View":
        """Exclude entities that have any of the given component types."""
        self._ignored = _build_mask(self._type_registry, args)
        self._matching = self._filter(self._matching)
        return self

    def __len__(self) -> int:
        return len(self._matching)

    def __iter__(self) -> Iterator[tuple]:
        arrays = [
            self._component_manager.component_array(t) for t in self._component_types
        ]
        for entity_id in list(self._matching):
            yield (entity_id, *(array.get(entity_id) for array in arrays))


class Registry:
    """Facade over entities, components and views.

    A fresh registry always holds one entity named ``"null"`` with id 0.
    """

    def __init__(self) -> None:
        self._entity_manager = EntityManager()
        self._component_manager = ComponentManager()
        self._type_registry = ComponentTypeRegistry()
        self._init()

    def _init(self) -> None:
        self.create_entity("null")

    def create_entity(self, name: str = "Unknown entity") -> Entity:
        """Create a new entity."""
        return self._entity_manager.create_entity(name)

    def get_entity(self, entity_id: int) -> Entity:
        """Return the entity with ``entity_id``."""
        try:
            return self._entity_manager.entities()[entity_id]
        except KeyError:
            raise EngineError(
                "Registry.get_entity", f"Entity #{entity_id} does not exist!"
            ) from None

    def has_entity(self, entity_id: int) -> bool:
        """Return True if an entity with ``entity_id`` exists."""
        return entity_id in self._entity_manager.entities()

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy ``entity``."""
        self._entity_manager.destroy_entity(entity)

    def init_component_array(self, component_type: type) -> None:
        """Register ``component_type`` so that entities may carry it."""
        self._component_manager.init_component_array(component_type)

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach ``component`` to ``entity_id``."""
        self._component_manager.add_component(entity_id, component)
        bit = _build_mask(self._type_registry, (type(component),))
        mask = self._entity_manager.component_mask(entity_id)
        self._entity_manager.set_component_mask(entity_id, mask | bit)

    def remove_component(self, entity_id: int, component_type: type) -> None:
        """Detach the ``component_type`` component from ``entity_id``."""
        self._component_manager.remove_component(entity_id, component_type)
        masks = self._entity_manager.component_masks()
        if entity_id < len(masks):
            bit = _build_mask(self._type_registry, (component_type,))
            self._entity_manager.set_component_mask(entity_id, masks[entity_id] & ~bit)

    def update_component(self, entity_id: int, component: Any) -> None:
        """Replace the component of the same type attached to ``entity_id``."""
        self._component_manager.update_component(entity_id, component)

    def get_component(self, entity_id: int, component_type: type) -> Any:
        """Return the ``component_type`` component of ``entity_id``."""
        if not self._component_manager.entity_has_component(entity_id, component_type):
            name = (
                self._entity_manager.entities()[entity_id].name
                if self.has_entity(entity_id)
                else ""
            )
            raise EngineError(
                "Registry.get_component",
                f'Entity "{name}" (ID #{entity_id}) does not have the component '
                f'"{component_type.__qualname__}"!',
            )
        return self._component_manager.get_component(entity_id, component_type)

    def has_component(self, entity_id: int, component_type: type) -> bool:
        """Return True if ``entity_id`` has a ``component_type`` component."""
        return self._component_manager.entity_has_component(entity_id, component_type)

    def clear(self) -> None:
        """Drop every entity and component array and recreate the null entity."""
        self._entity_manager.reset()
        self._component_manager = ComponentManager()
        self._init()
        get_logger().log(MsgType.INFO, "Registry.clear", "Registry has been cleared.")

    def view(self, *args: type) -> View:
        """Return a view over the entities that have all of the given components."""
        if not args:
            raise EngineError(
                "Registry.view", "Cannot get view: No components are passed into view!"
            )
        for component_type in args:
            if not self._component_manager.has_array(component_type):
                raise EngineError(
                    "Registry.view",
                    f'Cannot get view: The component "{component_type.__qualname__}" '
                    "has not been registered!",
                )
        return View(
            self._entity_manager, self._component_manager, self._type_registry, args
        )