"""Abstract base class for service bindings.

All binding implementations must conform to this interface, enabling
callers to read a binding the same way whether it is backed by a mounted
directory, an in-memory mapping, or a caching wrapper around either.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Reserved keys
PROVIDER: str = "provider"
TYPE: str = "type"


class Binding(ABC):
    """A binding as defined by the Kubernetes Service Binding Specification.

    Reference: https://github.com/k8s-service-bindings/spec#workload-projection

    Concrete bindings only implement the two primitives, ``get_as_bytes()``
    and ``get_name()``. Text access and the reserved ``type`` and
    ``provider`` entries are derived from them here.

    Example usage::

        binding = ConfigTreeBinding("/bindings/db")
        binding.get_type()       # "postgresql"
        binding.get("url")       # "postgres://..."
        binding.get("missing")   # None
    """

    @abstractmethod
    def get_as_bytes(self, key: str) -> bytes | None:
        """Return the contents of an entry in its raw bytes form.

        Args:
            key: The key of the entry to retrieve.

        Returns:
            The contents of the entry if it exists and the key is valid,
            otherwise None. Never raises for a missing or invalid key.
        """
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of the binding."""
        ...

    @property
    def name(self) -> str:
        """The name of the binding."""
        return self.get_name()

    def get(self, key: str) -> str | None:
        """Return the contents of an entry as UTF-8 text with whitespace trimmed.

        Args:
            key: The key of the entry to retrieve.

        Returns:
            The decoded contents of the entry if it exists, otherwise None.

        Raises:
            UnicodeDecodeError: If the entry is not valid UTF-8. Binding
                values are expected to always be text.
        """
        value = self.get_as_bytes(key)
        if value is None:
            return None
        return value.decode("utf-8").strip()

    def get_provider(self) -> str | None:
        """Return the value of the ``provider`` entry, or None if it is absent."""
        return self.get(PROVIDER)

    def get_type(self) -> str:
        """Return the value of the ``type`` entry.

        Raises:
            InvalidBindingError: If the binding does not contain a type.
        """
        binding_type = self.get(TYPE)
        if binding_type is None:
            raise InvalidBindingError(
                "binding does not contain a type", binding=self.get_name()
            )
        return binding_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r})"


class InvalidBindingError(Exception):
    """Raised when a binding violates the projection contract."""

    def __init__(self, message: str, binding: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.binding = binding

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidBindingError):
            return NotImplemented
        return self.message == other.message and self.binding == other.binding

    def __hash__(self) -> int:
        return hash((self.message, self.binding))
