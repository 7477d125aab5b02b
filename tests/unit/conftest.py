# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

Automatically applies the `unit` marker to all tests in the tests/unit/
directory hierarchy.

    # Run only unit tests
    pytest -m unit
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Dynamically add unit marker to all tests in the unit directory.

    pytestmark defined in conftest.py does NOT automatically apply to tests
    in other files within the same directory, so the marker is added here.

    Args:
        config: Pytest configuration object.
        items: List of collected test items.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
