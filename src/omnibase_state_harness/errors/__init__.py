# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""State Harness Errors Module.

Exports:
    ProviderTestError: Base harness error class
    ProviderTestConfigurationError: Container/provider wiring errors
    EmissionMismatchError: Captured emissions differ from the expectation
    EmissionSkipError: Fewer emissions captured than the test skips
"""

from omnibase_state_harness.errors.error_provider_test import (
    EmissionMismatchError,
    EmissionSkipError,
    ProviderTestConfigurationError,
    ProviderTestError,
)

__all__: list[str] = [
    "EmissionMismatchError",
    "EmissionSkipError",
    "ProviderTestConfigurationError",
    "ProviderTestError",
]
