# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Test Case Model.

Bundles every input of a single provider test so that invalid definitions
(negative skip, empty description, a container that is not a declarative
container) fail when the test is defined rather than when it runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from dependency_injector import containers, providers
from pydantic import BaseModel, ConfigDict, Field

from omnibase_state_harness.models.model_diff_render_config import (
    ModelDiffRenderConfig,
)


class ModelProviderTestCase(BaseModel):
    """Validated inputs of one provider test.

    Attributes:
        description: Human-readable test description
        container: Declarative container class constructed for the test
        provider: Provider under test, as attribute name or the provider
            object declared on ``container``
        overrides: Provider name to overriding provider or plain value
        setup: Hook run before the container is constructed
        skip: Number of leading emissions discarded before comparison
        fire_immediately: Deliver the current value when the listener attaches
        act: Hook receiving the live container, used to trigger emissions
        expect: Zero-argument callable returning the expected states
        verify: Hook receiving the live container after comparison
        teardown: Hook run after verify
        render_config: Diff rendering options (environment-derived if None)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    description: str = Field(
        ...,
        min_length=1,
        description="Human-readable test description",
    )
    container: type[containers.DeclarativeContainer] = Field(
        ...,
        description="Declarative container class under test",
    )
    provider: str | providers.Provider = Field(
        ...,
        description="Provider under test (attribute name or provider object)",
    )
    overrides: dict[str, Any] = Field(
        default_factory=dict,
        description="Provider overrides applied to the fresh container",
    )
    setup: Callable[[], Any] | None = Field(
        default=None,
        description="Hook awaited before the container is constructed",
    )
    skip: int = Field(
        default=0,
        ge=0,
        description="Leading emissions discarded before comparison",
    )
    fire_immediately: bool = Field(
        default=False,
        description="Replay the current value to the listener on attach",
    )
    act: Callable[[Any], Any] | None = Field(
        default=None,
        description="Hook awaited with the live container",
    )
    expect: Callable[[], Any] | None = Field(
        default=None,
        description="Lazily evaluated expected states",
    )
    verify: Callable[[Any], Any] | None = Field(
        default=None,
        description="Additional verification with the live container",
    )
    teardown: Callable[[], Any] | None = Field(
        default=None,
        description="Hook awaited after verify",
    )
    render_config: ModelDiffRenderConfig | None = Field(
        default=None,
        description="Diff rendering options",
    )

    @property
    def should_listen(self) -> bool:
        """Whether emissions need to be captured at all."""
        return self.expect is not None

    @property
    def provider_name(self) -> str:
        """Printable provider identifier for logs and messages."""
        if isinstance(self.provider, str):
            return self.provider
        for name, declared in self.container.providers.items():
            if declared is self.provider:
                return name
        return type(self.provider).__name__


__all__ = ["ModelProviderTestCase"]
