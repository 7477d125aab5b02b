# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pytest plugin for provider tests.

Registered through the ``pytest11`` entry point. Provides the cleanup stack
that tests generated by ``provider_test`` register container disposal on.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack

import pytest_asyncio


@pytest_asyncio.fixture
async def provider_test_cleanup() -> AsyncIterator[AsyncExitStack]:
    """Async cleanup stack closed after the test body, on every exit path."""
    async with AsyncExitStack() as stack:
        yield stack
