# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""State Harness Enumerations Module.

Exports:
    EnumDiffOperation: Character diff span operation (EQUAL, DELETE, INSERT)
"""

from omnibase_state_harness.enums.enum_diff_operation import EnumDiffOperation

__all__: list[str] = ["EnumDiffOperation"]
