"""Discovery, lookup and filtering over collections of bindings.

Discovery reads a service binding root: every directory directly under
the root is one binding. All functions return new lists and never modify
the bindings passed in.

Example usage::

    found = filter_with_provider(from_service_binding_root(), "mysql", "bitnami")
    binding = find(cached(from_path("/bindings")), "orders-db")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from service_bindings.binding import Binding, CacheBinding, ConfigTreeBinding, InvalidBindingError
from service_bindings.config.settings import BindingSettings

logger = logging.getLogger(__name__)

SERVICE_BINDING_ROOT = "SERVICE_BINDING_ROOT"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def _equals_ignore_ascii_case(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def _is_dir(path: Path) -> bool:
    """Like Path.is_dir(), but a path that cannot be stat'ed is not a directory."""
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug("Unable to stat %s: %s", path, e)
        return False


def cached(bindings: Iterable[Binding], synchronized: bool = True) -> list[CacheBinding]:
    """Wrap each binding in a CacheBinding, preserving order.

    Args:
        bindings: The bindings to wrap.
        synchronized: Passed through to every CacheBinding.
    """
    return [CacheBinding(b, synchronized=synchronized) for b in bindings]


def from_path(root: str | os.PathLike[str]) -> list[Binding]:
    """Create a binding for each directory directly under ``root``.

    Each binding is a ConfigTreeBinding over its directory, named after
    it. Files under the root are skipped. If the root does not exist, is
    not a directory, or cannot be read, an empty list is returned.

    Args:
        root: The service binding root to populate the bindings from.

    Returns:
        The bindings found in the root, ordered by directory name.
    """
    path = Path(root)
    if not _is_dir(path):
        logger.debug("Binding root %s is not a directory", path)
        return []

    try:
        children = sorted(path.iterdir(), key=lambda child: child.name)
    except OSError as e:
        logger.debug("Unable to list binding root %s: %s", path, e)
        return []

    result: list[Binding] = []
    for child in children:
        if not _is_dir(child):
            logger.debug("Skipping %s: not a directory", child)
            continue
        result.append(ConfigTreeBinding(child))

    logger.info("Discovered %d binding(s) in %s", len(result), path)
    return result


def from_service_binding_root(environ: Mapping[str, str] | None = None) -> list[Binding]:
    """Create bindings from the directory named by ``$SERVICE_BINDING_ROOT``.

    If the variable is not set, an empty list is returned. If the directory
    does not exist, an empty list is returned.

    Args:
        environ: Environment to read the variable from. Defaults to
                 ``os.environ``.
    """
    if environ is None:
        environ = os.environ

    root = environ.get(SERVICE_BINDING_ROOT)
    if not root:
        logger.debug("%s is not set", SERVICE_BINDING_ROOT)
        return []

    return from_path(root)


def load_bindings(settings: BindingSettings | None = None) -> list[Binding]:
    """Discover bindings as described by ``settings``.

    Reads ``settings.service_binding_root`` and wraps every binding in a
    CacheBinding when caching is enabled. Unlike from_path(), a configured
    root that is missing or not a directory is logged at WARNING, since
    the caller asked for it explicitly.

    Args:
        settings: Settings to use. If None, settings are read from the
                  environment.
    """
    if settings is None:
        settings = BindingSettings()

    root = settings.service_binding_root
    if root is None:
        logger.debug("No service binding root configured")
        return []
    if not _is_dir(root):
        logger.warning("Service binding root %s does not exist or is not a directory", root)
        return []

    result = from_path(root)
    if settings.cache.enabled:
        return cached(result, synchronized=settings.cache.synchronized)
    return result


def find(bindings: Iterable[Binding], name: str) -> Binding | None:
    """Return the first binding with a given name.

    Comparison is case-insensitive for ASCII letters.

    Args:
        bindings: The bindings to search.
        name: The name of the binding to find.
    """
    for binding in bindings:
        if _equals_ignore_ascii_case(binding.get_name(), name):
            return binding
    return None


def filter_with_provider(
    bindings: Iterable[Binding],
    binding_type: str | None = None,
    provider: str | None = None,
) -> list[Binding]:
    """Return the bindings with a given type and provider.

    If ``binding_type`` or ``provider`` is None, the result is not filtered
    on that argument. Comparisons are case-insensitive for ASCII letters.
    A binding that does not declare a type never matches a type filter.

    Args:
        bindings: The bindings to filter.
        binding_type: The type of the bindings to find.
        provider: The provider of the bindings to find.

    Returns:
        The matching bindings, in their original order.
    """
    result: list[Binding] = []
    for binding in bindings:
        if binding_type is not None:
            try:
                actual_type = binding.get_type()
            except InvalidBindingError as e:
                logger.debug("Excluding %s: %s", binding.get_name(), e)
                continue
            if not _equals_ignore_ascii_case(actual_type, binding_type):
                continue

        if provider is not None:
            actual_provider = binding.get_provider()
            if actual_provider is None or not _equals_ignore_ascii_case(actual_provider, provider):
                continue

        result.append(binding)
    return result


def filter_by_type(bindings: Iterable[Binding], binding_type: str) -> list[Binding]:
    """Return the bindings with a given type.

    Equivalent to ``filter_with_provider(bindings, binding_type, None)``.
    """
    return filter_with_provider(bindings, binding_type, None)
