# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX State Harness - Sequenced emission testing for reactive providers.

This package lets a test assert the ordered states a provider emits after
an action runs. Providers are declared on dependency-injector containers
and resolve to reactivex observables.

Key Components:
    - provider_test: Define a pytest test for a provider
    - run_provider_test: Run a provider test directly
    - ProviderScope: Per-test container instance with overrides and listeners
    - EmissionMismatchError: Failure carrying a character diff of the states
"""

from omnibase_state_harness.errors import (
    EmissionMismatchError,
    EmissionSkipError,
    ProviderTestConfigurationError,
    ProviderTestError,
)
from omnibase_state_harness.models import (
    ModelDiffRenderConfig,
    ModelDiffSpan,
    ModelProviderTestCase,
)
from omnibase_state_harness.runtime import (
    ProviderScope,
    execute_provider_test,
    provider_test,
    run_provider_test,
)

__all__: list[str] = [
    "EmissionMismatchError",
    "EmissionSkipError",
    "ModelDiffRenderConfig",
    "ModelDiffSpan",
    "ModelProviderTestCase",
    "ProviderScope",
    "ProviderTestConfigurationError",
    "ProviderTestError",
    "execute_provider_test",
    "provider_test",
    "run_provider_test",
]
