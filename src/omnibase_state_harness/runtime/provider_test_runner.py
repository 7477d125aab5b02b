# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider test orchestration.

``provider_test`` defines a pytest test that asserts the ordered states a
provider emits after ``act`` runs. ``run_provider_test`` executes one such
case directly and is what the generated test calls.

Execution Order:
    1. setup()                      awaited if it returns an awaitable
    2. container constructed        disposal registered on the cleanup stack
    3. listener attached            only when ``expect`` is given
    4. act(container)               awaited if it returns an awaitable
    5. skip                         leading emissions discarded, fails if
                                    fewer were captured
    6. expect() compared            evaluated lazily, after act
    7. verify(container)            awaited; skipped when the comparison failed
    8. teardown()                   awaited if it returns an awaitable
    9. container disposed           when the cleanup stack closes

Example Usage:
    ```python
    from omnibase_state_harness import provider_test

    test_increment_emits_next_count = provider_test(
        "emits [1, 2] when incremented twice",
        container=CounterContainer,
        provider=CounterContainer.count,
        act=lambda c: (c.notifier().increment(), c.notifier().increment()),
        expect=lambda: [1, 2],
    )
    ```
"""

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable, Mapping
from contextlib import AsyncExitStack
from typing import Any

import pytest
from dependency_injector import containers, providers

from omnibase_state_harness.errors import EmissionSkipError
from omnibase_state_harness.models import ModelDiffRenderConfig, ModelProviderTestCase
from omnibase_state_harness.runtime.emission_capture import listen_to_provider_states
from omnibase_state_harness.runtime.provider_scope import ProviderScope
from omnibase_state_harness.runtime.state_comparator import compare_states

logger = logging.getLogger(__name__)

_NON_IDENTIFIER = re.compile(r"\W+")


async def _maybe_await(result: object) -> None:
    if inspect.isawaitable(result):
        await result


async def execute_provider_test(
    case: ModelProviderTestCase, cleanup: AsyncExitStack
) -> None:
    """Run a validated provider test case.

    Args:
        case: The test case to run.
        cleanup: Stack the container disposal is registered on. The caller
            owns it and closes it after this coroutine returns or raises.

    Raises:
        EmissionMismatchError: If the captured states do not match.
        EmissionSkipError: If fewer states were captured than ``skip``.
        ProviderTestConfigurationError: If the container cannot be wired.
    """
    log_extra = {"description": case.description, "provider": case.provider_name}
    logger.debug("Running provider test", extra=log_extra)

    if case.setup is not None:
        await _maybe_await(case.setup())

    scope = ProviderScope(case.container, case.overrides)
    cleanup.push_async_callback(scope.dispose)

    states = listen_to_provider_states(
        scope,
        case.provider,
        should_listen=case.should_listen,
        fire_immediately=case.fire_immediately,
    )

    if case.act is not None:
        await _maybe_await(case.act(scope.container))

    if case.skip > 0:
        if case.should_listen and case.skip > len(states):
            raise EmissionSkipError(
                f"Cannot skip {case.skip} emitted state(s), "
                f"only {len(states)} captured",
                skip=case.skip,
                captured=len(states),
            )
        del states[: case.skip]

    if case.expect is not None:
        logger.debug(
            "Comparing emitted states",
            extra={**log_extra, "captured": len(states), "skip": case.skip},
        )
        compare_states(states, case.expect(), case.render_config)

    if case.verify is not None:
        await _maybe_await(case.verify(scope.container))

    if case.teardown is not None:
        await _maybe_await(case.teardown())


def _build_case(
    *, overrides: Mapping[str, object] | None, **fields: Any
) -> ModelProviderTestCase:
    return ModelProviderTestCase(overrides=dict(overrides or {}), **fields)


async def run_provider_test(
    *,
    container: type[containers.DeclarativeContainer],
    provider: str | providers.Provider,
    description: str = "provider test",
    overrides: Mapping[str, object] | None = None,
    setup: Callable[[], Any] | None = None,
    skip: int = 0,
    fire_immediately: bool = False,
    act: Callable[[Any], Any] | None = None,
    expect: Callable[[], Any] | None = None,
    verify: Callable[[Any], Any] | None = None,
    teardown: Callable[[], Any] | None = None,
    render_config: ModelDiffRenderConfig | None = None,
    cleanup: AsyncExitStack | None = None,
) -> None:
    """Run one provider test outside of ``provider_test``.

    When ``cleanup`` is None the runner owns a cleanup stack and disposes the
    container before returning, on success and on failure.

    Raises:
        pydantic.ValidationError: If the inputs are invalid (e.g. skip < 0).
        EmissionMismatchError: If the captured states do not match.
        EmissionSkipError: If fewer states were captured than ``skip``.
    """
    case = _build_case(
        description=description,
        container=container,
        provider=provider,
        overrides=overrides,
        setup=setup,
        skip=skip,
        fire_immediately=fire_immediately,
        act=act,
        expect=expect,
        verify=verify,
        teardown=teardown,
        render_config=render_config,
    )
    if cleanup is not None:
        await execute_provider_test(case, cleanup)
        return
    async with AsyncExitStack() as stack:
        await execute_provider_test(case, stack)


def _test_name(description: str) -> str:
    slug = _NON_IDENTIFIER.sub("_", description.lower()).strip("_")
    return f"test_{slug or 'provider'}"


def provider_test(
    description: str,
    *,
    container: type[containers.DeclarativeContainer],
    provider: str | providers.Provider,
    overrides: Mapping[str, object] | None = None,
    setup: Callable[[], Any] | None = None,
    skip: int = 0,
    fire_immediately: bool = False,
    act: Callable[[Any], Any] | None = None,
    expect: Callable[[], Any] | None = None,
    verify: Callable[[Any], Any] | None = None,
    teardown: Callable[[], Any] | None = None,
    render_config: ModelDiffRenderConfig | None = None,
) -> Callable[..., Any]:
    """Define a pytest test asserting the states ``provider`` emits.

    Assign the result to a module-level ``test_*`` name for pytest to collect
    it. The generated function is not a method, so it cannot be placed in a
    test class body. The container is disposed through the
    ``provider_test_cleanup`` fixture after the test, whatever the outcome.

    Args:
        description: Human-readable description, used as the docstring.
        container: Declarative container class constructed per test run.
        provider: Provider under test (attribute name or provider object).
        overrides: Provider name to overriding provider or plain value.
        setup: Called (and awaited) before the container is constructed.
        skip: Number of leading emissions discarded before comparison.
        fire_immediately: Capture the current value when the listener attaches.
        act: Called (and awaited) with the live container.
        expect: Zero-argument callable returning the expected states,
            evaluated after ``act``.
        verify: Called (and awaited) with the live container after a
            successful comparison.
        teardown: Called (and awaited) after ``verify``.
        render_config: Diff rendering options (environment-derived if None).

    Returns:
        An async pytest test function.

    Raises:
        pydantic.ValidationError: If the inputs are invalid (e.g. skip < 0).
    """
    case = _build_case(
        description=description,
        container=container,
        provider=provider,
        overrides=overrides,
        setup=setup,
        skip=skip,
        fire_immediately=fire_immediately,
        act=act,
        expect=expect,
        verify=verify,
        teardown=teardown,
        render_config=render_config,
    )

    async def _provider_test(provider_test_cleanup: AsyncExitStack) -> None:
        await execute_provider_test(case, provider_test_cleanup)

    _provider_test.__name__ = _test_name(description)
    _provider_test.__qualname__ = _provider_test.__name__
    _provider_test.__doc__ = description
    _provider_test.provider_test_case = case  # type: ignore[attr-defined]
    return pytest.mark.asyncio(_provider_test)


__all__ = [
    "execute_provider_test",
    "provider_test",
    "run_provider_test",
]
