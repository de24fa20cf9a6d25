"""In-memory binding, for tests and static configuration."""

from __future__ import annotations

from collections.abc import Mapping

from service_bindings.binding.base import Binding
from service_bindings.secret import is_valid_secret_key


class MappingBinding(Binding):
    """Returns entries from a fixed mapping.

    The mapping is copied at construction and never changes afterward.
    ``str`` values are stored UTF-8 encoded.

    Example usage::

        binding = MappingBinding("db", {"type": "postgresql", "url": b"postgres://..."})
    """

    def __init__(self, name: str, content: Mapping[str, bytes | str] | None = None) -> None:
        """Initialize the binding.

        Args:
            name: The name of the binding.
            content: The entries of the binding, keyed by entry name.
        """
        self._name = name
        self._content: dict[str, bytes] = {
            key: value.encode("utf-8") if isinstance(value, str) else bytes(value)
            for key, value in (content or {}).items()
        }

    def get_as_bytes(self, key: str) -> bytes | None:
        if not is_valid_secret_key(key):
            return None
        return self._content.get(key)

    def get_name(self) -> str:
        return self._name
