# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes - declarative key/value projections of objects.

A class inherits MixinOutputAttributes and declares which methods or
computed values appear in its projection. ``instance.output_attributes()``
then returns an ordered dict of key -> value, recomputed on every call.

Key Components:
    - MixinOutputAttributes: Adoption point; owns one registry per class
    - output_attribute: Method decorator for class-body registration
    - RegistryOutputAttributes: Ordered key -> declared source store
    - resolve_output_attributes: Builds the projection for one instance
    - InvalidSourceError: Registered source is neither a name nor a callable
"""

from output_attributes.enums import EnumOutputSourceKind
from output_attributes.errors import InvalidSourceError, OutputAttributesError
from output_attributes.mixins import MixinOutputAttributes, output_attribute
from output_attributes.models import ModelOutputRegistration, ModelOutputSource
from output_attributes.protocols import ProtocolOutputAttributes
from output_attributes.registry import RegistryOutputAttributes
from output_attributes.runtime import resolve_output_attributes

__version__ = "0.1.0"

__all__: list[str] = [
    "EnumOutputSourceKind",
    "InvalidSourceError",
    "MixinOutputAttributes",
    "ModelOutputRegistration",
    "ModelOutputSource",
    "OutputAttributesError",
    "ProtocolOutputAttributes",
    "RegistryOutputAttributes",
    "__version__",
    "output_attribute",
    "resolve_output_attributes",
]
