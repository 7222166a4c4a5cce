# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes Registry - per-class store of output key -> source.

Every class adopting MixinOutputAttributes owns exactly one
RegistryOutputAttributes instance, created when the class is defined. The
registry is never shared: subclasses receive a copy of their parent's
entries (see ``copy``), after which both evolve independently.

The registry:
- Preserves insertion order, which is the projection order
- Overwrites the source of an existing key in place (position is kept)
- Stores sources exactly as declared; they are interpreted lazily at
  resolution time by ModelOutputSource.from_declared
- Never invokes a source

Example Usage:
    ```python
    registry = RegistryOutputAttributes(owner="Item")
    registry.register_output("name")
    registry.register_output("cost", "price")
    registry.register_output("label", lambda item: item.name().upper())

    registry.list_keys()  # ["name", "cost", "label"]
    registry.get("cost")  # "price"
    ```

Thread Safety:
    All reads and writes are protected by a threading.Lock. Readers get
    snapshots, so a registration running concurrently with a resolution never
    invalidates the resolver's iteration.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from output_attributes.models import ModelOutputRegistration

logger = logging.getLogger(__name__)


class RegistryOutputAttributes:
    """Ordered, thread-safe mapping from output key to declared source.

    Attributes:
        owner: Name of the class this registry belongs to (used for logging
            and error context only).
    """

    def __init__(
        self,
        owner: str | None = None,
        entries: Mapping[str, object] | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            owner: Name of the owning class.
            entries: Initial key -> source entries, in order.
        """
        self.owner = owner
        self._entries: dict[str, object] = dict(entries or {})
        self._lock = threading.Lock()

    def register(self, registration: ModelOutputRegistration) -> str:
        """Register an output key using a registration model.

        If the key is already registered its source is replaced and the key
        keeps its original position.

        Args:
            registration: Validated key and optional source.

        Returns:
            The registered key, unchanged.
        """
        key = registration.key
        with self._lock:
            overwrite = key in self._entries
            self._entries[key] = registration.declared_source

        logger.debug(
            "Registered output attribute",
            extra={
                "owner": self.owner,
                "key": key,
                "overwrite": overwrite,
            },
        )
        return key

    def register_output(self, key: str, source: object | None = None) -> str:
        """Register an output key (convenience wrapper around ``register``).

        Args:
            key: Output key.
            source: Method name or callable taking the instance. Defaults to
                the method named ``key``.

        Returns:
            The registered key, unchanged.

        Raises:
            pydantic.ValidationError: If ``key`` is not a non-empty string.
        """
        return self.register(ModelOutputRegistration(key=key, source=source))

    def get(self, key: str) -> object:
        """Return the declared source for ``key``.

        Raises:
            KeyError: If ``key`` is not registered.
        """
        with self._lock:
            if key not in self._entries:
                raise KeyError(f"No output attribute registered for key {key!r}")
            return self._entries[key]

    def list_keys(self) -> list[str]:
        """Return registered keys in insertion order."""
        with self._lock:
            return list(self._entries)

    def is_registered(self, key: str) -> bool:
        """Return True if ``key`` has a registered source."""
        with self._lock:
            return key in self._entries

    def snapshot(self) -> Mapping[str, object]:
        """Return a read-only, point-in-time view of all entries."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def copy(self, owner: str | None = None) -> RegistryOutputAttributes:
        """Return an independent registry seeded with this registry's entries.

        Args:
            owner: Name of the class that will own the copy.
        """
        with self._lock:
            entries = dict(self._entries)

        logger.debug(
            "Copied output attribute registry",
            extra={
                "source_owner": self.owner,
                "owner": owner,
                "key_count": len(entries),
            },
        )
        return RegistryOutputAttributes(owner=owner, entries=entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_keys())

    def __repr__(self) -> str:
        return f"RegistryOutputAttributes(owner={self.owner!r}, keys={self.list_keys()!r})"


__all__ = ["RegistryOutputAttributes"]
