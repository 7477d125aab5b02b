# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diff Operation Enumeration.

Defines the span operations produced by the character-level diff used in
emission mismatch diagnostics.
"""

from enum import Enum


class EnumDiffOperation(str, Enum):
    """Operations of a character-level diff span.

    Attributes:
        EQUAL: Text present in both the expected and actual representation
        DELETE: Text present in the expected representation only
        INSERT: Text present in the actual representation only
    """

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


__all__ = ["EnumDiffOperation"]
