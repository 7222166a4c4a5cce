# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Value source kind enumeration for output attribute resolution."""

from enum import Enum


class EnumOutputSourceKind(str, Enum):
    """Tag of a resolved output value source.

    Values:
        METHOD: Zero-argument method looked up by name on the instance.
        COMPUTED: Callable invoked with the instance as its only argument.
    """

    METHOD = "method"
    COMPUTED = "computed"
