# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diff Render Configuration Model.

Controls how emission mismatch diffs are rendered into assertion messages.

Environment Variables:
    NO_COLOR: When set (any value), ANSI styling is disabled.
    OMNIBASE_STATE_HARNESS_DIFF_COLOR: Explicit switch that wins over
        NO_COLOR. Accepts 1/true/yes/always or 0/false/no/never.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

ENV_DIFF_COLOR = "OMNIBASE_STATE_HARNESS_DIFF_COLOR"
ENV_NO_COLOR = "NO_COLOR"

_TRUTHY = frozenset({"1", "true", "yes", "always"})
_FALSY = frozenset({"0", "false", "no", "never"})


class ModelDiffRenderConfig(BaseModel):
    """Rendering options for the diagnostic diff block.

    Attributes:
        use_color: Wrap spans in ANSI color codes (gray/red/green)
        header_width: Total width of the ``==== diff ====`` header and footer

    Example:
        >>> config = ModelDiffRenderConfig(use_color=False)
        >>> config.header_width
        50
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    use_color: bool = Field(
        default=True,
        description="Render spans with ANSI color codes",
    )
    header_width: int = Field(
        default=50,
        ge=20,
        description="Width of the diff block header and footer lines",
    )

    @classmethod
    def from_env(cls) -> ModelDiffRenderConfig:
        """Build a config from the process environment.

        Returns:
            Config with ``use_color`` resolved from the environment.
        """
        explicit = os.getenv(ENV_DIFF_COLOR)
        if explicit is not None:
            value = explicit.strip().lower()
            if value in _TRUTHY:
                return cls(use_color=True)
            if value in _FALSY:
                return cls(use_color=False)
        return cls(use_color=os.getenv(ENV_NO_COLOR) is None)


__all__ = ["ENV_DIFF_COLOR", "ENV_NO_COLOR", "ModelDiffRenderConfig"]
