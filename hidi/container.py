# hidi/container.py
"""
Hierarchical dependency container.

A container maps identifiers to registered values. Lookups that miss fall
back to the parent container, so a child created with extend() sees
everything its ancestors hold and can shadow any of it locally:

    app = DependencyContainer(name="app")
    app.register(Logger, FileLogger())

    request = app.extend(name="request")
    request.register("user", current_user)

    request.require(Logger)   # found on app
    app.has("user")           # False, children never leak upwards
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .keys import InjectableKey, get_injectable_key

logger = logging.getLogger(__name__)

_MISSING = object()


class RequiredDependencyNotFoundError(LookupError):
    """Raised by require() when no container in the chain holds the key."""

    def __init__(self, key: str):
        super().__init__(f"Required dependency '{key}' not found in container")
        self.key = key


class ContainerCycleError(RuntimeError):
    """Raised when walking a parent chain that loops back on itself."""

    def __init__(self, container: "DependencyContainer"):
        super().__init__(f"Parent chain of {container!r} contains a cycle")
        self.container = container


def _check_parent(parent: Any):
    if parent is not None and not isinstance(parent, DependencyContainer):
        raise TypeError(
            f"Parent must be a DependencyContainer or None, got {type(parent).__name__}"
        )


class DependencyContainer:
    """
    Key-value store with optional parent fallback.

    Own entries always take precedence over anything visible through the
    parent chain. The parent is a plain reference; it is never copied or
    owned, and reassigning it with set_parent() takes effect on the next
    lookup.
    """

    def __init__(
        self,
        parent: Optional["DependencyContainer"] = None,
        name: Optional[str] = None,
    ):
        """
        Initialize the container.

        Args:
            parent: Container to fall back to on lookup misses
            name: Label used in repr() and log messages
        """
        _check_parent(parent)
        self.parent = parent
        self.name = name
        self._dependencies: Dict[str, Any] = {}

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<{type(self).__name__}{label} entries={len(self._dependencies)}>"

    def get_injectable_key(self, injectable: InjectableKey) -> str:
        """Get the string identifier for a key (string or class)."""
        return get_injectable_key(injectable)

    def register(self, key: InjectableKey, injectable: Any) -> None:
        """
        Register a dependency on this container.

        Args:
            key: Explicit name or class to register under
            injectable: The value to store (instance, class, function, data)
        """
        name = get_injectable_key(key)
        if name in self._dependencies:
            logger.warning(f"Overwriting dependency '{name}' in {self!r}")
        self._dependencies[name] = injectable

    def injectable(self, key: Optional[InjectableKey] = None) -> Callable:
        """
        Decorator to register a class or function.

        Usage:
            @container.injectable()
            class Clock:
                ...

            @container.injectable("now")
            def utc_now():
                ...
        """
        def decorator(obj):
            self.register(obj if key is None else key, obj)
            return obj
        return decorator

    def lineage(self) -> Iterator["DependencyContainer"]:
        """
        Iterate over this container and its ancestors, nearest first.

        Raises:
            ContainerCycleError: If a container is reached twice
        """
        seen = set()
        current = self
        while current is not None:
            if id(current) in seen:
                raise ContainerCycleError(self)
            seen.add(id(current))
            yield current
            current = current.parent

    def _lookup(self, name: str) -> Any:
        for container in self.lineage():
            if name in container._dependencies:
                if container is not self:
                    logger.debug(f"Resolved '{name}' from ancestor {container!r}")
                return container._dependencies[name]
        return _MISSING

    def get(self, key: InjectableKey, default: Any = None) -> Any:
        """
        Get a dependency, searching up the parent chain if not found.

        Returns default when nothing in the chain holds the key.
        """
        value = self._lookup(get_injectable_key(key))
        return default if value is _MISSING else value

    def require(self, key: InjectableKey) -> Any:
        """
        Get a dependency, raising if it is not found anywhere in the chain.

        Raises:
            RequiredDependencyNotFoundError: Carries the resolved identifier
        """
        name = get_injectable_key(key)
        value = self._lookup(name)
        if value is _MISSING:
            raise RequiredDependencyNotFoundError(name)
        return value

    def has(self, key: InjectableKey) -> bool:
        """Check if a dependency exists in this container or its ancestors."""
        name = get_injectable_key(key)
        return any(name in c._dependencies for c in self.lineage())

    def extend(self, name: Optional[str] = None) -> "DependencyContainer":
        """Create a child container that inherits from this one."""
        return type(self)(parent=self, name=name)

    def set_parent(self, parent: Optional["DependencyContainer"]) -> None:
        """
        Set the parent container.

        Own entries are untouched. Passing None detaches the container.
        No cycle check happens here; a cyclic chain surfaces as
        ContainerCycleError on the next lookup that walks it.
        """
        _check_parent(parent)
        logger.debug(f"Reparenting {self!r}: {self.parent!r} -> {parent!r}")
        self.parent = parent

    def keys(self) -> List[str]:
        """List own identifiers in registration order."""
        return list(self._dependencies)

    def list_dependencies(self) -> Dict[str, Any]:
        """List everything visible from this container, own entries winning."""
        merged: Dict[str, Any] = {}
        for container in reversed(list(self.lineage())):
            merged.update(container._dependencies)
        return merged

    def __contains__(self, key: InjectableKey) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._dependencies)

    def __iter__(self):
        return iter(list(self._dependencies))
