"""Engine core for orbital mechanics simulation: ECS, events, logging, cleanup and physics data."""

__version__ = "0.1.0"

__all__ = [
    "cleanup",
    "components",
    "constants",
    "device",
    "ecs",
    "ecs_core",
    "event_dispatcher",
    "event_types",
    "geometry",
    "intervals",
    "logging_manager",
    "panels",
    "physics",
    "services",
    "threads",
]