# hidi/keys.py
"""
Key resolution for the dependency container.

A dependency can be addressed by an explicit string name or by a class.
Both forms collapse to one canonical string identifier, so
``container.get("Logger")`` and ``container.get(Logger)`` address the
same entry.
"""

from types import GenericAlias
from typing import Any, Type, Union

InjectableKey = Union[str, Type[Any]]


class InvalidKeyError(ValueError):
    """Raised when a key cannot be turned into a non-empty identifier."""

    def __init__(self, key: Any = None):
        super().__init__("Cannot get key for injectable.")
        self.key = key


def get_injectable_key(injectable: InjectableKey) -> str:
    """
    Get the string identifier for an injectable key.

    Args:
        injectable: A non-empty string, or a class

    Returns:
        The string verbatim, or the class's ``__name__``

    Raises:
        InvalidKeyError: For empty strings and anything that is neither
            a string nor a class (None, numbers, instances, functions,
            unnamed classes, parameterized generics such as list[int])
    """
    key = None
    if isinstance(injectable, str):
        key = injectable
    elif isinstance(injectable, type) and not isinstance(injectable, GenericAlias):
        key = injectable.__name__

    if not key:
        raise InvalidKeyError(injectable)
    return key
