# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Comparison of captured emissions against an expectation.

A matcher is any object compared with ``==`` against the emission buffer,
so plain lists as well as ``pytest.approx(...)`` or ``unittest.mock.ANY``
entries can be used. On mismatch the assertion message is augmented with a
character diff block (see ``omnibase_state_harness.diff``).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from omnibase_state_harness.diff import build_diff_block
from omnibase_state_harness.errors import EmissionMismatchError
from omnibase_state_harness.models import ModelDiffRenderConfig

logger = logging.getLogger(__name__)


def _describe_mismatch(actual: object, expected: object) -> str | None:
    if isinstance(actual, (str, bytes)) or isinstance(expected, (str, bytes)):
        return None
    if not isinstance(actual, Sequence) or not isinstance(expected, Sequence):
        return None
    for index, (got, want) in enumerate(zip(actual, expected)):
        if got != want:
            return f"at location [{index}] is <{got!r}> instead of <{want!r}>"
    if len(actual) < len(expected):
        return f"shorter than expected at location [{len(actual)}]"
    if len(actual) > len(expected):
        return f"longer than expected at location [{len(expected)}]"
    return None


def assert_matches(actual: object, expected: object) -> None:
    """Assert that ``actual`` equals the expected value or matcher.

    Args:
        actual: The captured emissions.
        expected: The expected value or matcher.

    Raises:
        AssertionError: If the values are not equal.

    Example:
        >>> assert_matches([1, 3], [1, 2])
        Traceback (most recent call last):
        ...
        AssertionError: Expected: [1, 2]
          Actual: [1, 3]
           Which: at location [1] is <3> instead of <2>
    """
    if actual == expected:
        return
    message = f"Expected: {expected!r}\n  Actual: {actual!r}"
    which = _describe_mismatch(actual, expected)
    if which:
        message += f"\n   Which: {which}"
    raise AssertionError(message)


def compare_states(
    states: list[object],
    expected: object,
    render_config: ModelDiffRenderConfig | None = None,
) -> None:
    """Compare captured states, augmenting failures with a diff block.

    Only ``AssertionError`` is intercepted. Any other error raised while
    comparing (for example by a matcher's ``__eq__``) propagates unchanged.

    Args:
        states: Captured (and trimmed) emissions.
        expected: The expected value or matcher.
        render_config: Diff rendering options.

    Raises:
        EmissionMismatchError: If the states do not match.
    """
    try:
        assert_matches(states, expected)
    except AssertionError as error:
        diff = build_diff_block(expected=expected, actual=states, config=render_config)
        logger.debug(
            "Emitted states did not match expectation",
            extra={"captured": len(states)},
        )
        raise EmissionMismatchError(
            f"{error}\n{diff}",
            expected=expected,
            actual=list(states),
            diff=diff,
        ) from error


__all__ = ["assert_matches", "compare_states"]
