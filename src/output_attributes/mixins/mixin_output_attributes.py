# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes Mixin.

Lets a class declare which of its methods (or computed values) make up its
key/value projection, and builds that projection for an instance on demand.

Each class that inherits MixinOutputAttributes gets its own
RegistryOutputAttributes when it is defined. Registrations on one class are
never visible on another. A subclass starts from a copy of its nearest
registering ancestor's entries; later changes on either side are not shared.

Registration forms, processed in class-body order when the class is created:

    ``__output_attributes__``
        Iterable of keys or ``(key, source)`` tuples. Use it to declare keys
        whose methods are defined further down, or computed keys.

    ``@output_attribute``
        Decorator on a method. Registers the method's attribute name, or the
        given key(s), with the method as source. Returns the function
        unchanged, so it composes with other decorators.

    ``Cls.output(key, source=None)``
        Classmethod for registration after the class statement. Returns
        ``key``.

Usage:
    >>> class Item(MixinOutputAttributes):
    ...     __output_attributes__ = (
    ...         "name",
    ...         ("description", lambda item: f"{item.name()}: {item.price()}"),
    ...     )
    ...
    ...     def name(self):
    ...         return "A Thing"
    ...
    ...     @output_attribute
    ...     @output_attribute("cost")
    ...     def price(self):
    ...         return "free"
    >>> Item().output_attributes()
    {'name': 'A Thing', 'description': 'A Thing: free', 'price': 'free', 'cost': 'free'}

The mixin does not define ``to_dict``/``__iter__``; alias
``output_attributes`` yourself if a class needs one.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import ClassVar, TypeVar, overload

from output_attributes.registry import RegistryOutputAttributes
from output_attributes.runtime import resolve_output_attributes

_F = TypeVar("_F", bound=Callable[..., object])

# Tuple of keys (None = attribute name) attached by @output_attribute.
OUTPUT_KEYS_ATTR = "__output_attribute_keys__"
DECLARATIONS_ATTR = "__output_attributes__"


def _mark(func: _F, key: str | None) -> _F:
    if not callable(func):
        # classmethod and property objects are not callable; properties are
        # not supported as sources.
        raise TypeError(
            f"output_attribute expects a method, got {type(func).__name__}; "
            "apply it below @classmethod"
        )
    existing = getattr(func, OUTPUT_KEYS_ATTR, ())
    if not isinstance(existing, tuple):
        existing = ()
    # Decorators apply bottom-up; prepend so keys follow source order.
    setattr(func, OUTPUT_KEYS_ATTR, (key, *existing))
    return func


@overload
def output_attribute(func_or_key: _F) -> _F: ...


@overload
def output_attribute(
    func_or_key: str | None = None, *, key: str | None = None
) -> Callable[[_F], _F]: ...


def output_attribute(
    func_or_key: _F | str | None = None,
    *,
    key: str | None = None,
) -> _F | Callable[[_F], _F]:
    """Mark a method as an output attribute of its class.

    Supported forms::

        @output_attribute                 # key = attribute name
        @output_attribute("description")  # key = "description"
        @output_attribute(key="description")

    The method itself stays the source; registration happens when the owning
    MixinOutputAttributes subclass is created.

    Raises:
        TypeError: If applied to something that is neither a callable nor a
            key, such as a classmethod or property object.
    """
    if isinstance(func_or_key, str):
        key = func_or_key
    elif func_or_key is not None:
        return _mark(func_or_key, key)

    def decorator(func: _F) -> _F:
        return _mark(func, key)

    return decorator


class MixinOutputAttributes:
    """Mixin providing a per-class output registry and instance projection.

    Class Methods:
        output: Register a key (optionally with a source); returns the key
        registered_output_attributes: Read-only view of key -> declared source

    Instance Methods:
        output_attributes: Resolve the projection for this instance
    """

    # Always empty: subclasses get their own registry, and output() refuses
    # to register on the mixin itself.
    _output_registry: ClassVar[RegistryOutputAttributes] = RegistryOutputAttributes(
        owner="MixinOutputAttributes"
    )

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._output_registry = cls._inherited_output_registry()

        for name, value in list(cls.__dict__.items()):
            if name == DECLARATIONS_ATTR:
                for entry in value:
                    if isinstance(entry, tuple):
                        cls.output(*entry)
                    else:
                        cls.output(entry)
                continue

            # classmethod/staticmethod keep the marked function in __func__.
            keys = getattr(getattr(value, "__func__", value), OUTPUT_KEYS_ATTR, None)
            if isinstance(keys, tuple):
                for key in keys:
                    cls.output(name if key is None else key, name)

    @classmethod
    def _inherited_output_registry(cls) -> RegistryOutputAttributes:
        owner = cls.__qualname__
        for base in cls.__mro__[1:]:
            if base is MixinOutputAttributes:
                break
            registry = base.__dict__.get("_output_registry")
            if isinstance(registry, RegistryOutputAttributes):
                return registry.copy(owner=owner)
        return RegistryOutputAttributes(owner=owner)

    @classmethod
    def output(cls, key: str, source: object | None = None) -> str:
        """Register ``key`` on this class.

        Args:
            key: Output key.
            source: Method name or callable taking the instance. Defaults to
                the method named ``key``. Not validated until resolution.

        Returns:
            ``key``, unchanged.

        Raises:
            TypeError: If called on MixinOutputAttributes itself.
        """
        if cls is MixinOutputAttributes:
            # The base registry is never inherited; keys must go on a subclass.
            raise TypeError(
                "output() must be called on a MixinOutputAttributes subclass"
            )
        return cls._output_registry.register_output(key, source)

    @classmethod
    def registered_output_attributes(cls) -> Mapping[str, object]:
        """Return a read-only snapshot of this class's key -> declared source."""
        return cls._output_registry.snapshot()

    def output_attributes(self) -> dict[str, object]:
        """Return the key -> value projection of this instance."""
        return resolve_output_attributes(self)


__all__ = [
    "MixinOutputAttributes",
    "output_attribute",
]
