# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RegistryOutputAttributes."""

from __future__ import annotations

import logging
import threading

import pytest
from pydantic import ValidationError

from output_attributes import ModelOutputRegistration, RegistryOutputAttributes


@pytest.fixture
def registry() -> RegistryOutputAttributes:
    """Return an empty registry owned by a fake class name."""
    return RegistryOutputAttributes(owner="Item")


class TestRegistryRegister:
    """Test register() and register_output()."""

    def test_register_returns_key(self, registry) -> None:
        registration = ModelOutputRegistration(key="cost", source="price")

        assert registry.register(registration) == "cost"
        assert registry.get("cost") == "price"

    def test_register_output_defaults_source_to_key(self, registry) -> None:
        assert registry.register_output("name") == "name"
        assert registry.get("name") == "name"

    def test_register_output_stores_callable_as_is(self, registry) -> None:
        def compute(item: object) -> str:
            return "computed"

        registry.register_output("label", compute)

        assert registry.get("label") is compute

    def test_register_output_stores_unrecognized_source(self, registry) -> None:
        registry.register_output("broken", 42)

        assert registry.get("broken") == 42

    def test_overwrite_keeps_position(self, registry) -> None:
        registry.register_output("a")
        registry.register_output("b")
        registry.register_output("a", "other")

        assert registry.list_keys() == ["a", "b"]
        assert registry.get("a") == "other"

    def test_non_string_key_is_rejected(self, registry) -> None:
        with pytest.raises(ValidationError):
            registry.register_output(123)  # type: ignore[arg-type]

        assert len(registry) == 0

    def test_register_logs_debug_record(self, registry, caplog) -> None:
        with caplog.at_level(
            logging.DEBUG,
            logger="output_attributes.registry.registry_output_attributes",
        ):
            registry.register_output("name")
            registry.register_output("name", "title")

        records = [r for r in caplog.records if r.msg == "Registered output attribute"]
        assert [r.overwrite for r in records] == [False, True]
        assert all(r.owner == "Item" and r.key == "name" for r in records)


class TestRegistryQueries:
    """Test read operations."""

    def test_get_unknown_key_raises_key_error(self, registry) -> None:
        with pytest.raises(KeyError, match="missing"):
            registry.get("missing")

    def test_membership_and_length(self, registry) -> None:
        registry.register_output("name")

        assert "name" in registry
        assert "price" not in registry
        assert registry.is_registered("name")
        assert not registry.is_registered("price")
        assert len(registry) == 1

    def test_iteration_follows_insertion_order(self, registry) -> None:
        for key in ("c", "a", "b"):
            registry.register_output(key)

        assert list(registry) == ["c", "a", "b"]

    def test_snapshot_is_read_only_and_detached(self, registry) -> None:
        registry.register_output("name")
        snapshot = registry.snapshot()

        with pytest.raises(TypeError):
            snapshot["price"] = "price"  # type: ignore[index]

        registry.register_output("price")
        assert dict(snapshot) == {"name": "name"}

    def test_initial_entries(self) -> None:
        registry = RegistryOutputAttributes(entries={"b": "b", "a": "x"})

        assert registry.list_keys() == ["b", "a"]
        assert registry.owner is None

    def test_repr_includes_owner_and_keys(self, registry) -> None:
        registry.register_output("name")

        assert repr(registry) == "RegistryOutputAttributes(owner='Item', keys=['name'])"


class TestRegistryCopy:
    """Test copy() independence."""

    def test_copy_has_same_entries_and_new_owner(self, registry) -> None:
        registry.register_output("name")
        registry.register_output("cost", "price")

        clone = registry.copy(owner="SubItem")

        assert clone.owner == "SubItem"
        assert dict(clone.snapshot()) == {"name": "name", "cost": "price"}

    def test_copy_is_independent(self, registry) -> None:
        registry.register_output("name")
        clone = registry.copy(owner="SubItem")

        clone.register_output("extra")
        registry.register_output("late")

        assert clone.list_keys() == ["name", "extra"]
        assert registry.list_keys() == ["name", "late"]


class TestRegistryThreadSafety:
    """Test concurrent registration."""

    def test_concurrent_registration_keeps_every_key(self, registry) -> None:
        def register_batch(prefix: str) -> None:
            for index in range(100):
                registry.register_output(f"{prefix}_{index}")

        threads = [
            threading.Thread(target=register_batch, args=(f"t{n}",)) for n in range(5)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 500
