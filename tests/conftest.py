"""Pytest configuration and shared fixtures for output_attributes tests."""

from __future__ import annotations

import pytest

from output_attributes import MixinOutputAttributes, output_attribute

# =============================================================================
# Reference Classes
# =============================================================================


class Dog(MixinOutputAttributes):
    """Registers outputs before and after method definitions."""

    # Declared before the method exists.
    __output_attributes__ = ("name",)

    @output_attribute
    def speak(self) -> str:
        return "woof"

    def name(self) -> str:
        return "Percy"

    def describe(self) -> str:
        return "A good dog"

    def not_an_output(self) -> str:
        return "Ignore this"


Dog.output("describe")
Dog.output("description", "describe")
Dog.output("sit", lambda dog: f"{dog.name()} is sitting.")


class Cat(MixinOutputAttributes):
    """Second adopter, used to check registries stay separate."""

    def speak(self) -> str:
        return "meow"

    def is_a_dog(self) -> bool:
        return False

    __output_attributes__ = ("speak", "is_a_dog")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def dog_class() -> type[Dog]:
    """Return the Dog reference class."""
    return Dog


@pytest.fixture
def cat_class() -> type[Cat]:
    """Return the Cat reference class."""
    return Cat


@pytest.fixture
def dog() -> Dog:
    """Return a fresh Dog instance."""
    return Dog()


@pytest.fixture
def cat() -> Cat:
    """Return a fresh Cat instance."""
    return Cat()
