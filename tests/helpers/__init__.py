# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_state_harness unit tests.

Available Utilities:
    Counter Container:
        - CounterContainer: Declarative container with observable providers
        - CounterNotifier: BehaviorSubject-backed counter
        - CounterRepository: In-memory counter persistence
        - ResourceTracker: Counts resource opens/closes on container shutdown

    Log Helpers:
        - filter_module_records: Filter log records by module and level
        - get_messages: Extract messages from filtered log records
"""

from tests.helpers.counter_container import (
    CounterContainer,
    CounterNotifier,
    CounterRepository,
    ResourceTracker,
)
from tests.helpers.log_helpers import filter_module_records, get_messages

__all__ = [
    "CounterContainer",
    "CounterNotifier",
    "CounterRepository",
    "ResourceTracker",
    "filter_module_records",
    "get_messages",
]
