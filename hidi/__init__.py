# hidi - Hierarchical dependency container
#
# A small registry for dependency lookup. Values are registered under a
# string name or a class and resolved later, falling back through a chain
# of parent containers.
#
# Core concepts:
# - Key: a non-empty string, or a class (identified by its __name__)
# - Container: own entries plus an optional parent for fallback lookups
# - Child: a container created with extend() that shadows its parent

from .keys import InjectableKey, InvalidKeyError, get_injectable_key
from .container import (
    DependencyContainer,
    RequiredDependencyNotFoundError,
    ContainerCycleError,
)

__all__ = [
    "InjectableKey",
    "InvalidKeyError",
    "get_injectable_key",
    "DependencyContainer",
    "RequiredDependencyNotFoundError",
    "ContainerCycleError",
]

__version__ = "0.1.0"
