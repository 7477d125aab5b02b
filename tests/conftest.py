# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_state_harness tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import AsyncExitStack

import pytest

from omnibase_state_harness.models import ModelDiffRenderConfig
from omnibase_state_harness.runtime import ProviderScope
from tests.helpers import CounterContainer, CounterRepository


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def plain_render_config() -> ModelDiffRenderConfig:
    """Diff rendering without ANSI codes, for readable message assertions."""
    return ModelDiffRenderConfig(use_color=False)


@pytest.fixture
def counter_repository() -> CounterRepository:
    return CounterRepository(start=0)


@pytest.fixture
async def counter_scope() -> AsyncGenerator[ProviderScope, None]:
    """ProviderScope over CounterContainer, disposed after the test."""
    scope = ProviderScope(CounterContainer)
    yield scope
    await scope.dispose()


@pytest.fixture
async def cleanup_stack() -> AsyncGenerator[AsyncExitStack, None]:
    """Cleanup stack owned by the test, closed after it if still open."""
    stack = AsyncExitStack()
    yield stack
    await stack.aclose()
