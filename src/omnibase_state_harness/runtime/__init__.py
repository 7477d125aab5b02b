# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider test runtime: container scope, emission capture, orchestration.

Exports:
    ProviderScope: Per-test owner of a container instance and its listeners
    listen_to_provider_states: Capture provider emissions into a list
    assert_matches: Equality assertion with an Expected/Actual message
    compare_states: Comparison with diff-augmented failures
    execute_provider_test: Run a validated ModelProviderTestCase
    run_provider_test: Run a provider test from keyword inputs
    provider_test: Define a pytest test for a provider
"""

from omnibase_state_harness.runtime.emission_capture import listen_to_provider_states
from omnibase_state_harness.runtime.provider_scope import ProviderScope
from omnibase_state_harness.runtime.provider_test_runner import (
    execute_provider_test,
    provider_test,
    run_provider_test,
)
from omnibase_state_harness.runtime.state_comparator import (
    assert_matches,
    compare_states,
)

__all__: list[str] = [
    "ProviderScope",
    "assert_matches",
    "compare_states",
    "execute_provider_test",
    "listen_to_provider_states",
    "provider_test",
    "run_provider_test",
]
