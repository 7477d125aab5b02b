# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Character diff computation and diagnostic rendering.

Exports:
    compute_diff: Character-level (operation, text) alignment of two strings
    reassemble_expected: Rebuild the expected text from diff spans
    reassemble_actual: Rebuild the actual text from diff spans
    render_diff: Render spans with [- -] / {+ +} markers
    build_diff_block: Delimited diff block for assertion messages
"""

from omnibase_state_harness.diff.diff_renderer import (
    build_diff_block,
    render_diff,
    render_span,
)
from omnibase_state_harness.diff.util_char_diff import (
    compute_diff,
    reassemble_actual,
    reassemble_expected,
)

__all__: list[str] = [
    "build_diff_block",
    "compute_diff",
    "reassemble_actual",
    "reassemble_expected",
    "render_diff",
    "render_span",
]
