# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diagnostic rendering of emission diffs.

Renders a character diff between the expected value and the captured
emissions into a delimited block appended to assertion messages::

    ==== diff ========================================

    [1, [-2-]{+3+}]

    ==== end diff ====================================

Deleted text (expected only) is wrapped in ``[- -]`` and inserted text
(actual only) in ``{+ +}``. With color enabled, equal spans are gray,
deletions red and insertions green.
"""

from __future__ import annotations

from collections.abc import Iterable

from omnibase_state_harness.diff.util_char_diff import compute_diff
from omnibase_state_harness.enums import EnumDiffOperation
from omnibase_state_harness.models import ModelDiffRenderConfig, ModelDiffSpan

ANSI_RESET = "\u001b[0m"
ANSI_GRAY = "\u001b[90m"
ANSI_RED = "\u001b[31m"
ANSI_GREEN = "\u001b[32m"

DIFF_HEADER_LABEL = " diff "
DIFF_FOOTER_LABEL = " end diff "
_RULE_PREFIX = "=" * 4


def render_span(span: ModelDiffSpan, config: ModelDiffRenderConfig) -> str:
    """Render one diff span with its bracketing marker and optional color."""
    if span.operation is EnumDiffOperation.DELETE:
        text, color = f"[-{span.text}-]", ANSI_RED
    elif span.operation is EnumDiffOperation.INSERT:
        text, color = f"{{+{span.text}+}}", ANSI_GREEN
    else:
        text, color = span.text, ANSI_GRAY
    if not config.use_color:
        return text
    return f"{color}{text}{ANSI_RESET}"


def render_diff(
    spans: Iterable[ModelDiffSpan], config: ModelDiffRenderConfig | None = None
) -> str:
    """Render diff spans into a single line of marked-up text.

    Args:
        spans: Spans produced by ``compute_diff``.
        config: Rendering options. Defaults to the environment-derived config.

    Returns:
        Rendered diff text.
    """
    config = config or ModelDiffRenderConfig.from_env()
    return "".join(render_span(span, config) for span in spans)


def _rule(label: str, width: int) -> str:
    head = f"{_RULE_PREFIX}{label}"
    return head + "=" * max(width - len(head), 0)


def build_diff_block(
    *,
    expected: object,
    actual: object,
    config: ModelDiffRenderConfig | None = None,
) -> str:
    """Build the delimited diff block for an emission mismatch.

    Both values are rendered with ``repr`` before diffing.

    Args:
        expected: The expected value or matcher.
        actual: The captured emissions.
        config: Rendering options. Defaults to the environment-derived config.

    Returns:
        Multi-line diff block terminated by a newline.

    Example:
        >>> block = build_diff_block(
        ...     expected=[1, 2],
        ...     actual=[1, 3],
        ...     config=ModelDiffRenderConfig(use_color=False),
        ... )
        >>> "[1, [-2-]{+3+}]" in block
        True
    """
    config = config or ModelDiffRenderConfig.from_env()
    spans = compute_diff(repr(expected), repr(actual))
    lines = [
        _rule(DIFF_HEADER_LABEL, config.header_width),
        "",
        render_diff(spans, config),
        "",
        _rule(DIFF_FOOTER_LABEL, config.header_width),
    ]
    return "\n".join(lines) + "\n"


__all__ = [
    "ANSI_GRAY",
    "ANSI_GREEN",
    "ANSI_RED",
    "ANSI_RESET",
    "build_diff_block",
    "render_diff",
    "render_span",
]
