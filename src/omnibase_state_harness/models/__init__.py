# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""State Harness Models Module.

Exports:
    ModelDiffRenderConfig: Diff rendering options (color, header width)
    ModelDiffSpan: One (operation, text) span of a character diff
    ModelProviderTestCase: Validated inputs of a single provider test
"""

from omnibase_state_harness.models.model_diff_render_config import (
    ModelDiffRenderConfig,
)
from omnibase_state_harness.models.model_diff_span import ModelDiffSpan
from omnibase_state_harness.models.model_provider_test_case import (
    ModelProviderTestCase,
)

__all__: list[str] = [
    "ModelDiffRenderConfig",
    "ModelDiffSpan",
    "ModelProviderTestCase",
]
