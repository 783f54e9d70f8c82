"""Dependency injection container used by build_container()."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Container:
    """
    Registry of the objects a SheetORM deployment is assembled from.

    Instances (Config, MetricsRegistry, a caller-supplied RowSource) are
    registered ready-made. The row source and SheetORM itself are built by
    factories on first resolve and the result is kept.
    """

    def __init__(self) -> None:
        self._factories: dict[type, Callable[[Container], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register_singleton(self, interface: type[T], instance: T) -> None:
        """Register a ready-made instance for an interface."""
        self._instances[interface] = instance

    def register_factory(
        self,
        interface: type[T],
        factory: Callable[[Container], T],
    ) -> None:
        """
        Register a lazily called factory.

        Re-registering drops any instance already built for the interface,
        so a rebuilt SheetORM picks up new wiring.

        Args:
            interface: The type the factory provides
            factory: Called with the container, returns the instance
        """
        self._factories[interface] = factory
        self._instances.pop(interface, None)

    def resolve(self, interface: type[T]) -> T:
        """
        Return the instance for an interface, building it if needed.

        Raises:
            KeyError: If nothing is registered for the interface
        """
        if interface not in self._instances:
            if interface not in self._factories:
                raise KeyError(f"No registration found for {interface.__name__}")
            self._instances[interface] = self._factories[interface](self)
        return self._instances[interface]

    def has(self, interface: type) -> bool:
        """Check if an interface is registered."""
        return interface in self._instances or interface in self._factories

    def clear(self) -> None:
        """Drop every registration and built instance."""
        self._factories.clear()
        self._instances.clear()
