# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attributes models.

Exports:
    ModelOutputRegistration: Validated payload of one registration call
    ModelOutputSource: Tagged METHOD / COMPUTED value source
"""

from output_attributes.models.model_output_registration import (
    ModelOutputRegistration,
)
from output_attributes.models.model_output_source import ModelOutputSource

__all__: list[str] = [
    "ModelOutputRegistration",
    "ModelOutputSource",
]
