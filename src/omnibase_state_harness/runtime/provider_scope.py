# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider scope owning one container instance for one test.

A ``ProviderScope`` constructs a fresh declarative container, applies the
provider overrides of the test, resolves providers to reactive sources,
attaches listeners, and releases all of it on ``dispose()``.

Providers are identified either by their attribute name on the container
(``"count"``) or by the provider object declared on the container class
(``CounterContainer.count``). The resolved object must be a
``reactivex.Observable``. A ``BehaviorSubject`` carries a current value, so
only it can replay that value when the listener attaches.

Example Usage:
    ```python
    class CounterContainer(containers.DeclarativeContainer):
        notifier = providers.Singleton(CounterNotifier)
        count = notifier.provided.state

    scope = ProviderScope(CounterContainer, overrides={"notifier": fake})
    scope.listen(CounterContainer.count, states.append, fire_immediately=True)
    scope.container.notifier().increment()
    await scope.dispose()
    ```
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

import reactivex
from dependency_injector import containers, providers
from reactivex import operators as ops
from reactivex.abc import DisposableBase
from reactivex.subject import BehaviorSubject

from omnibase_state_harness.errors import ProviderTestConfigurationError

logger = logging.getLogger(__name__)


class ProviderScope:
    """Single-test owner of a dependency-injector container instance.

    Attributes:
        container: The live container instance passed to ``act``/``verify``
        disposed: Whether ``dispose()`` already ran
    """

    def __init__(
        self,
        container_cls: type[containers.DeclarativeContainer],
        overrides: Mapping[str, object] | None = None,
    ) -> None:
        """Construct the container and apply overrides.

        Args:
            container_cls: Declarative container class to instantiate.
            overrides: Provider name to overriding provider or plain value.

        Raises:
            ProviderTestConfigurationError: If an override names a provider
                the container does not declare.
        """
        self._container_cls = container_cls
        self._container = container_cls()
        self._subscriptions: list[DisposableBase] = []
        self._disposed = False

        overrides = dict(overrides or {})
        unknown = sorted(set(overrides) - set(self._container.providers))
        if unknown:
            raise ProviderTestConfigurationError(
                f"Unknown provider override(s) for {container_cls.__name__}: "
                f"{', '.join(unknown)}",
                container=container_cls.__name__,
                unknown_overrides=unknown,
            )
        if overrides:
            self._container.override_providers(**overrides)

        logger.debug(
            "Provider container constructed",
            extra={
                "container": container_cls.__name__,
                "overrides": sorted(overrides),
            },
        )

    @property
    def container(self) -> Any:
        return self._container

    @property
    def disposed(self) -> bool:
        return self._disposed

    def provider_name(self, provider: str | providers.Provider) -> str:
        """Return the container attribute name of ``provider``.

        Raises:
            ProviderTestConfigurationError: If the provider is not declared on
                the container class.
        """
        if isinstance(provider, str):
            if provider in self._container.providers:
                return provider
        else:
            for name, declared in self._container_cls.providers.items():
                if declared is provider:
                    return name
        raise ProviderTestConfigurationError(
            f"Provider {provider!r} is not declared on "
            f"{self._container_cls.__name__}",
            container=self._container_cls.__name__,
        )

    def read(self, provider: str | providers.Provider) -> Any:
        """Resolve ``provider`` against this scope's container instance."""
        name = self.provider_name(provider)
        return self._container.providers[name]()

    def listen(
        self,
        provider: str | providers.Provider,
        callback: Callable[[Any], None],
        *,
        fire_immediately: bool = False,
    ) -> DisposableBase:
        """Subscribe ``callback`` to the observable ``provider`` resolves to.

        Args:
            provider: Provider under test.
            callback: Invoked with every newly emitted value.
            fire_immediately: Deliver the current value synchronously before
                returning. Without it, the replay of a ``BehaviorSubject`` is
                skipped.

        Returns:
            Disposable for the subscription. It is also disposed by
            ``dispose()``.

        Raises:
            ProviderTestConfigurationError: If the scope is disposed or the
                provider does not resolve to an observable.
        """
        if self._disposed:
            raise ProviderTestConfigurationError(
                "Cannot listen on a disposed provider scope",
                container=self._container_cls.__name__,
            )
        name = self.provider_name(provider)
        source = self._container.providers[name]()
        if not isinstance(source, reactivex.Observable):
            raise ProviderTestConfigurationError(
                f"Provider '{name}' resolved to {type(source).__name__}, "
                "expected a reactivex Observable",
                container=self._container_cls.__name__,
                provider=name,
            )

        if isinstance(source, BehaviorSubject):
            if not fire_immediately:
                source = source.pipe(ops.skip(1))
        elif fire_immediately:
            logger.debug(
                "Provider has no current value to replay",
                extra={"provider": name, "source_type": type(source).__name__},
            )

        subscription = source.subscribe(on_next=callback)
        self._subscriptions.append(subscription)
        logger.debug(
            "Listener attached",
            extra={"provider": name, "fire_immediately": fire_immediately},
        )
        return subscription

    async def dispose(self) -> None:
        """Release listeners, resources, singletons and overrides.

        Safe to call more than once.
        """
        if self._disposed:
            return
        self._disposed = True

        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()

        # Overriding providers are only reachable while the override is active.
        result = self._container.shutdown_resources()
        if inspect.isawaitable(result):
            await result
        self._container.reset_singletons()
        self._container.reset_override()

        logger.debug(
            "Provider container disposed",
            extra={"container": self._container_cls.__name__},
        )


__all__ = ["ProviderScope"]
