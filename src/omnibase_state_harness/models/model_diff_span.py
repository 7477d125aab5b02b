# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diff Span Model.

A single ``(operation, text)`` entry of a character-level diff between the
expected and actual textual representation of emitted states.
"""

from pydantic import BaseModel, ConfigDict, Field

from omnibase_state_harness.enums import EnumDiffOperation


class ModelDiffSpan(BaseModel):
    """One aligned span of a character-level diff.

    Attributes:
        operation: Whether the text is shared, expected-only or actual-only
        text: The characters covered by this span (never empty)

    Example:
        >>> ModelDiffSpan(operation=EnumDiffOperation.INSERT, text="3")
        ModelDiffSpan(operation=<EnumDiffOperation.INSERT: 'insert'>, text='3')
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: EnumDiffOperation = Field(
        ...,
        description="Span operation (equal, delete, insert)",
    )
    text: str = Field(
        ...,
        min_length=1,
        description="Characters covered by the span",
    )


__all__ = ["ModelDiffSpan"]
