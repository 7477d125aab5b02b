# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Emission capture: push-based listener to an ordered buffer."""

from __future__ import annotations

import logging
from typing import Any

from dependency_injector import providers

from omnibase_state_harness.runtime.provider_scope import ProviderScope

logger = logging.getLogger(__name__)


def listen_to_provider_states(
    scope: ProviderScope,
    provider: str | providers.Provider,
    *,
    should_listen: bool,
    fire_immediately: bool = False,
) -> list[Any]:
    """Capture every value ``provider`` emits into a list.

    The returned list is appended to by the listener in emission order, with
    no deduplication or coalescing. When ``should_listen`` is False no
    listener is attached and the list stays empty.

    Args:
        scope: Scope owning the container the provider is resolved in.
        provider: Provider under test.
        should_listen: Attach the listener at all.
        fire_immediately: Capture the current value as the first entry.

    Returns:
        The live emission buffer.
    """
    states: list[Any] = []
    if not should_listen:
        logger.debug("Emission capture disabled, no expectation supplied")
        return states

    scope.listen(provider, states.append, fire_immediately=fire_immediately)
    return states


__all__ = ["listen_to_provider_states"]
