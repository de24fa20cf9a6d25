"""Binding implementations for service_bindings.

Public API:
    Binding -- Abstract base class
    InvalidBindingError -- Raised for a binding without a type
    ConfigTreeBinding -- Reads entries from a mounted directory
    MappingBinding -- Reads entries from an in-memory mapping
    CacheBinding -- Memoizes values from another binding
"""

from service_bindings.binding.base import PROVIDER, TYPE, Binding, InvalidBindingError
from service_bindings.binding.cache import CacheBinding
from service_bindings.binding.config_tree import ConfigTreeBinding
from service_bindings.binding.mapping import MappingBinding

__all__ = [
    "PROVIDER",
    "TYPE",
    "Binding",
    "CacheBinding",
    "ConfigTreeBinding",
    "InvalidBindingError",
    "MappingBinding",
]
