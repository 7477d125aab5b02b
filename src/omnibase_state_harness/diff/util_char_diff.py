# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Character-level diff computation.

Aligns two strings character by character and returns the alignment as an
ordered list of ``ModelDiffSpan`` entries. Concatenating every non-DELETE
span yields the actual text; concatenating every non-INSERT span yields the
expected text.
"""

from __future__ import annotations

import difflib

from omnibase_state_harness.enums import EnumDiffOperation
from omnibase_state_harness.models import ModelDiffSpan


def compute_diff(expected_text: str, actual_text: str) -> list[ModelDiffSpan]:
    """Compute a character-level diff between two strings.

    ``replace`` opcodes are split into a DELETE span followed by an INSERT
    span. Adjacent spans with the same operation are merged and empty spans
    are never emitted.

    Args:
        expected_text: Textual representation of the expected value.
        actual_text: Textual representation of the captured emissions.

    Returns:
        Ordered spans describing the alignment.

    Example:
        >>> [(s.operation.value, s.text) for s in compute_diff("[1, 2]", "[1, 3]")]
        [('equal', '[1, '), ('delete', '2'), ('insert', '3'), ('equal', ']')]
    """
    matcher = difflib.SequenceMatcher(a=expected_text, b=actual_text, autojunk=False)
    spans: list[ModelDiffSpan] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append_span(spans, EnumDiffOperation.EQUAL, expected_text[i1:i2])
            continue
        if tag in ("delete", "replace"):
            _append_span(spans, EnumDiffOperation.DELETE, expected_text[i1:i2])
        if tag in ("insert", "replace"):
            _append_span(spans, EnumDiffOperation.INSERT, actual_text[j1:j2])
    return spans


def _append_span(
    spans: list[ModelDiffSpan], operation: EnumDiffOperation, text: str
) -> None:
    if not text:
        return
    if spans and spans[-1].operation is operation:
        spans[-1] = ModelDiffSpan(operation=operation, text=spans[-1].text + text)
        return
    spans.append(ModelDiffSpan(operation=operation, text=text))


def reassemble_expected(spans: list[ModelDiffSpan]) -> str:
    """Rebuild the expected text from a diff (every non-INSERT span)."""
    return "".join(s.text for s in spans if s.operation is not EnumDiffOperation.INSERT)


def reassemble_actual(spans: list[ModelDiffSpan]) -> str:
    """Rebuild the actual text from a diff (every non-DELETE span)."""
    return "".join(s.text for s in spans if s.operation is not EnumDiffOperation.DELETE)


__all__ = ["compute_diff", "reassemble_actual", "reassemble_expected"]
