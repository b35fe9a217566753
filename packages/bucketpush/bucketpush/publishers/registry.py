"""Publisher registry — named publisher factories bound to store settings at creation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from bucketpush.core.errors import ConfigurationError
from bucketpush.publishers.base import BasePublisher
from bucketpush.settings import StoreSettings

PublisherFactory = Callable[[StoreSettings], BasePublisher]


@dataclass(frozen=True)
class _Entry:
    factory: PublisherFactory
    backends: frozenset[str]


class PublisherRegistry:
    """Maps publisher names to factories.

    A host resolves its StoreSettings first and then asks for a publisher by
    name; ``create`` builds a fresh, unconfigured instance for those settings.
    A publisher may restrict the store backends it works with.
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def register(
        self,
        name: str,
        factory: PublisherFactory,
        *,
        backends: Iterable[str] = ("s3", "local"),
    ) -> None:
        if name in self._entries:
            raise ConfigurationError(f"Publisher '{name}' is already registered")
        self._entries[name] = _Entry(factory=factory, backends=frozenset(backends))

    def create(self, name: str, settings: StoreSettings) -> BasePublisher:
        """Build publisher ``name`` for ``settings``.

        Raises ConfigurationError for an unknown name, a backend the
        publisher does not support, or a factory whose publisher reports a
        different name.
        """
        entry = self._entries.get(name)
        if entry is None:
            known = ", ".join(self.names()) or "none"
            raise ConfigurationError(f"Publisher '{name}' is not registered (known: {known})")
        if settings.backend not in entry.backends:
            raise ConfigurationError(
                f"Publisher '{name}' does not support the '{settings.backend}' backend"
            )
        publisher = entry.factory(settings)
        if publisher.name != name:
            raise ConfigurationError(
                f"Factory for '{name}' built a publisher named '{publisher.name}'"
            )
        return publisher

    def names(self) -> list[str]:
        return sorted(self._entries)

    def supports(self, name: str, backend: str) -> bool:
        entry = self._entries.get(name)
        return entry is not None and backend in entry.backends

    def __contains__(self, name: object) -> bool:
        return name in self._entries
