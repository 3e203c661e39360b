# astrocelerate

The engine core of an orbital mechanics and spaceflight simulator. It is written
in plain Python and needs nothing outside the standard library.

## What is in it

- `astrocelerate.ecs`: the entity-component system. `Registry` is the facade
  over `EntityManager` and `ComponentManager`. A fresh registry always holds one
  entity named `"null"` with id 0. `Registry.view(*types)` returns a `View`.
  Iterating a view yields `(entity_id, component, ...)` tuples for the entities
  that have every requested component. `View.ignore(*types)` drops the entities
  that have any of the given types.
- `astrocelerate.ecs_core`: `Entity`, `ComponentArray` and
  `ComponentTypeRegistry`. `ComponentArray` is sparse-set storage that removes
  entries by swapping them with the last one. `ComponentTypeRegistry` gives each
  component type an integer id.
- `astrocelerate.event_dispatcher`: `EventDispatcher`. A subscriber first calls
  `register_subscriber`, then `subscribe(subscriber, event_type, handler)`.
  `dispatch` calls the handlers at once. One case is different: when a main
  thread has been set (`astrocelerate.threads.set_main_thread`) and `dispatch`
  is called from another thread. The event is then queued until
  `process_queued_events` runs on the main thread. Each subscriber keeps a
  record of the event flags its handlers have received. Query it with
  `event_callbacks_invoked` or block on it with `wait_for_event_callbacks`.
  `reset_event_callback_registry` clears the record.
- `astrocelerate.event_types`: the event dataclasses, such as `SessionStatus`,
  `InputUpdate` and `SceneLoadComplete`. Each carries an `EventFlag` bit.
  The module also holds the `Stage` and `State` enums and `flag_bit`.
- `astrocelerate.logging_manager`: `Logger` writes aligned, thread-tagged lines
  to stdout/stderr. It keeps a bounded in-memory buffer (`Logger.messages()`).
  `begin_file_logging(directory)` also writes to a timestamped
  `AstroLog-YYYYmmdd_HHMMSS.log` file. The module also provides `EngineError`
  (with `origin`, `severity`, `line` and `thread_info`), `log_assert`,
  `get_logger` and `app_info`.
- `astrocelerate.cleanup`: `GarbageCollector`, a stack of `CleanupTask`s.
  `process_cleanup_stack` runs them newest first. A task is skipped if any of
  its handles is `None` or `0`, or if any of its conditions is false.
- `astrocelerate.physics`: `State`, a position/velocity pair. It supports `+`,
  `-`, scalar `*` and `/`. The module also has the `FrameType` enum.
- `astrocelerate.components`: component dataclasses. They cover transforms,
  rigid bodies, orbiting bodies, reference frames, shape parameters, spacecraft,
  thrusters, telemetry transforms, meshes and mesh renderables. It also has
  the `CameraMovement` enum and `Binding`. `component_for_key` and
  `key_for_component` map component types to and from their simulation-file
  keys, such as `"PhysicsComponent::RigidBody"`. `is_reference` and
  `reference_target` handle `ref.<name>` entity references.
- `astrocelerate.intervals`: `Interval` with `IntervalType` (open, closed,
  half-open). `Interval.range(step)` steps through an interval.
- `astrocelerate.panels`: `PanelRegistry` assigns ids to GUI panel names.
  `PanelMask` records which panels are open, as bits, and can be serialized
  to a string of digits.
- `astrocelerate.geometry`: `Vertex` (equal within float epsilon), `Material`,
  `MeshOffset`, `MeshData` and `GeometryData`.
- `astrocelerate.device`: `QueueFamily`, `QueueFamilyIndices`,
  `PhysicalDeviceProperties` and `score_comparator`.
- `astrocelerate.constants`: physical constants (`G`, `C`, `AU`), simulation
  settings (`TIME_STEP`, `SIMULATION_SCALE`, ...), shader locations and resource
  paths (`resource_path`, `noto_sans_fonts`).
- `astrocelerate.services`: `ServiceLocator`, which registers and looks up
  shared services by type.
- `astrocelerate.threads`: `set_main_thread`, `main_thread_id`,
  `is_main_thread` and `thread_id_to_string`.

## Installation

```
pip install .
```

## Example

```python
from astrocelerate.ecs import Registry
from astrocelerate.components import RigidBody

registry = Registry()
registry.init_component_array(RigidBody)

probe = registry.create_entity("Probe")
registry.add_component(probe.id, RigidBody(velocity=(0.0, 7800.0, 0.0),
                                           acceleration=(0.0, 0.0, 0.0),
                                           mass=500.0))

for entity_id, body in registry.view(RigidBody):
    print(entity_id, body.mass)   # 1 500.0
```

```python
from astrocelerate.event_dispatcher import EventDispatcher
from astrocelerate.event_types import EventFlag, InputUpdate

dispatcher = EventDispatcher()
me = dispatcher.register_subscriber("camera")
dispatcher.subscribe(me, InputUpdate, lambda event: print(event.delta_time))
dispatcher.dispatch(InputUpdate(delta_time=0.016))
assert dispatcher.event_callbacks_invoked(me, EventFlag.UPDATE_INPUT)
```

## What it does not do

This package is a library of engine building blocks only. It has no command,
window, renderer or GUI. It has no main simulation loop, and no orbit
integrator that advances `State` over time. It does not load simulation files:
`astrocelerate.components` names the keys such files use, but nothing here
parses them.

## Tests

```
pip install .[test]
pytest
```