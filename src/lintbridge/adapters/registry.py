# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry mapping adapter keys to adapter classes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from ..errors import ConfigurationError
from .base import LinterAdapter
from .swiftformat import SwiftFormatAdapter


class AdapterRegistry(Mapping[str, type[LinterAdapter]]):
    """Read-only mapping of adapter keys with explicit registration."""

    def __init__(self) -> None:
        self._adapters: dict[str, type[LinterAdapter]] = {}

    def register(self, key: str, adapter: type[LinterAdapter]) -> None:
        """Register ``adapter`` under ``key``.

        Raises:
            ValueError: If ``key`` is already registered.
        """

        if key in self._adapters:
            raise ValueError(f"Adapter '{key}' already registered")
        self._adapters[key] = adapter

    def get_adapter(self, key: str) -> type[LinterAdapter]:
        """Return the adapter registered under ``key``.

        Raises:
            ConfigurationError: If no adapter is registered under ``key``.
        """

        try:
            return self._adapters[key]
        except KeyError:
            known = ", ".join(sorted(self._adapters)) or "<none>"
            raise ConfigurationError(f"unknown adapter '{key}' (known: {known})") from None

    def __getitem__(self, key: str) -> type[LinterAdapter]:
        return self._adapters[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._adapters))

    def __len__(self) -> int:
        return len(self._adapters)


DEFAULT_REGISTRY = AdapterRegistry()
DEFAULT_REGISTRY.register("swiftformat", SwiftFormatAdapter)

__all__ = ["DEFAULT_REGISTRY", "AdapterRegistry"]
