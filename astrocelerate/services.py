"""A registry of shared engine services, looked up by type."""

from __future__ import annotations

from typing import Any

from .logging_manager import EngineError, MsgType, get_logger


class ServiceLocator:
    """Maps service types to service instances."""

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}

    def register(self, service: Any, service_type: type | None = None) -> None:
        """Register ``service`` under ``service_type`` (its own type by default).

        An existing service of the same type is replaced.
        """
        key = service_type if service_type is not None else type(service)
        if key in self._services:
            get_logger().log(
                MsgType.WARNING,
                "ServiceLocator.register",
                f'Service of type "{key.__qualname__}" already exists! '
                "Overwriting existing service...",
            )
        self._services[key] = service

    def get(self, service_type: type, caller: str = "unknown caller") -> Any:
        """Return the service registered under ``service_type``."""
        try:
            return self._services[service_type]
        except KeyError:
            raise EngineError(
                "ServiceLocator.get",
                f'Failed to find service of type "{service_type.__qualname__}"!\n'
                f"Service retrieval requested from {caller}.",
            ) from None

    def clear(self) -> None:
        """Remove every registered service."""
        self._services.clear()