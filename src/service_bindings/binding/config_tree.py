"""Binding backed by a volume mounted Kubernetes Secret.

Each regular file directly under the root is an entry: the file name is
the key and the file contents are the value. This is the layout the
platform projects under ``$SERVICE_BINDING_ROOT/<binding-name>/``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from service_bindings.binding.base import Binding
from service_bindings.secret import is_valid_secret_key

logger = logging.getLogger(__name__)


class ConfigTreeBinding(Binding):
    """Reads entries from files in a mounted directory.

    Nothing is cached; every lookup reads the file again. Wrap the
    binding in a CacheBinding to memoize values.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        """Initialize the binding.

        Args:
            root: The root of the volume mounted Kubernetes Secret. Its
                  final path component becomes the binding name.
        """
        self._root = Path(root)
        self._name = self._root.name

    @property
    def root(self) -> Path:
        return self._root

    def get_as_bytes(self, key: str) -> bytes | None:
        if not is_valid_secret_key(key):
            return None

        path = self._root / key
        try:
            if not path.is_file():
                return None
            return path.read_bytes()
        except OSError as e:
            logger.debug("Unable to read %s: %s", path, e)
            return None

    def get_name(self) -> str:
        return self._name
