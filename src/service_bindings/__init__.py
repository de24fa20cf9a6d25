"""service_bindings -- Kubernetes Service Binding workload projections.

Reads configuration and secrets that a platform projects into a workload
as a directory tree: one subdirectory per binding, one file per key, all
under ``$SERVICE_BINDING_ROOT``.

Example usage::

    from service_bindings import bindings

    found = bindings.filter_by_type(bindings.from_service_binding_root(), "postgresql")
    if len(found) != 1:
        raise RuntimeError(f"Incorrect number of PostgreSQL bindings: {len(found)}")
    url = found[0].get("url")
"""

from service_bindings.binding import (
    PROVIDER,
    TYPE,
    Binding,
    CacheBinding,
    ConfigTreeBinding,
    InvalidBindingError,
    MappingBinding,
)

__version__ = "1.0.0"

__all__ = [
    "PROVIDER",
    "TYPE",
    "Binding",
    "CacheBinding",
    "ConfigTreeBinding",
    "InvalidBindingError",
    "MappingBinding",
]
