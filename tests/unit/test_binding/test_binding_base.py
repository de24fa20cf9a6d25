"""Tests for the Binding abstract base class."""

from __future__ import annotations

import pytest

from service_bindings.binding import Binding, InvalidBindingError, MappingBinding


class TestBindingInterface:
    def test_cannot_instantiate_abstract_class(self) -> None:
        """Binding should not be instantiable directly."""
        with pytest.raises(TypeError):
            Binding()  # type: ignore[abstract]

    def test_name_property(self) -> None:
        assert MappingBinding("test-name").name == "test-name"

    def test_repr(self) -> None:
        assert repr(MappingBinding("test-name")) == "MappingBinding(name='test-name')"


class TestGet:
    def test_missing(self) -> None:
        b = MappingBinding("test-name", {})
        assert b.get("test-missing-key") is None

    def test_valid_trims_whitespace(self) -> None:
        b = MappingBinding("test-name", {"test-secret-key": "test-secret-value\n"})
        assert b.get("test-secret-key") == "test-secret-value"

    def test_trims_leading_whitespace(self) -> None:
        b = MappingBinding("test-name", {"test-secret-key": b" \ttest-secret-value \r\n"})
        assert b.get("test-secret-key") == "test-secret-value"

    def test_idempotent(self) -> None:
        b = MappingBinding("test-name", {"test-secret-key": "test-secret-value\n"})
        assert b.get("test-secret-key") == b.get("test-secret-key")

    def test_invalid_utf8_raises(self) -> None:
        b = MappingBinding("test-name", {"test-secret-key": b"\xff\xfe"})
        with pytest.raises(UnicodeDecodeError):
            b.get("test-secret-key")


class TestGetProvider:
    def test_missing(self) -> None:
        b = MappingBinding("test-name", {})
        assert b.get_provider() is None

    def test_valid(self) -> None:
        b = MappingBinding("test-name", {"provider": "test-provider-1"})
        assert b.get_provider() == "test-provider-1"


class TestGetType:
    def test_invalid(self) -> None:
        b = MappingBinding("test-name", {})
        with pytest.raises(InvalidBindingError) as exc_info:
            b.get_type()
        assert str(exc_info.value) == "binding does not contain a type"
        assert exc_info.value == InvalidBindingError("binding does not contain a type", binding="test-name")

    def test_valid(self) -> None:
        b = MappingBinding("test-name", {"type": "test-type-1"})
        assert b.get_type() == "test-type-1"


class TestInvalidBindingError:
    def test_carries_binding_name(self) -> None:
        error = InvalidBindingError("binding does not contain a type", binding="db")
        assert error.message == "binding does not contain a type"
        assert error.binding == "db"

    def test_inequality(self) -> None:
        assert InvalidBindingError("a") != InvalidBindingError("b")
