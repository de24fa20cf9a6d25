"""Shared test fixtures for the service_bindings test suite.

Provides a projected service binding tree on disk and in-memory
bindings used across the unit tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from service_bindings.binding import Binding, MappingBinding


# ---------------------------------------------------------------------------
# On-disk Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def binding_root(tmp_path: Path) -> Path:
    """A service binding root with three bindings and one stray file.

    Layout::

        root/
            additional-file
            test-k8s/
                .hidden-data/
                test-secret-key
                type
            test-name-2/
            test-name-3/
    """
    root = tmp_path / "bindings"
    k8s = root / "test-k8s"
    (k8s / ".hidden-data").mkdir(parents=True)
    (k8s / "test-secret-key").write_text("test-secret-value\n")
    (k8s / "type").write_text("test-type-1\n")
    (root / "test-name-2").mkdir()
    (root / "test-name-3").mkdir()
    (root / "additional-file").write_text("")
    return root


@pytest.fixture
def k8s_binding_dir(binding_root: Path) -> Path:
    """The directory of the ``test-k8s`` binding."""
    return binding_root / "test-k8s"


# ---------------------------------------------------------------------------
# In-memory Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def typed_bindings() -> list[Binding]:
    """Four bindings covering every type/provider combination."""
    return [
        MappingBinding("test-name-1", {"type": "test-type-1", "provider": "test-provider-1"}),
        MappingBinding("test-name-2", {"type": "test-type-1", "provider": "test-provider-2"}),
        MappingBinding("test-name-3", {"type": "test-type-2", "provider": "test-provider-2"}),
        MappingBinding("test-name-4", {"type": "test-type-2"}),
    ]
