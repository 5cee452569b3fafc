"""Adapter Registry — Holds the provider adapters for the life of the process.

Adapters are constructed once at startup with their resolved configuration,
registered under the route name they serve, initialized together and shut
down together.
"""

from __future__ import annotations

import logging

from terrific.adapters.base.adapter import ProviderAdapter
from terrific.models.response import AdapterStatus

logger = logging.getLogger(__name__)


class AdapterNotFoundError(Exception):
    """Raised when a requested adapter is not registered."""


class AdapterRegistry:
    """Registry of provider adapter instances.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(VideoSearchAdapter(api_key="..."))
        >>> await registry.initialize_all()
        >>> adapter = registry.get("youtube")
    """

    def __init__(self) -> None:
        self._instances: dict[str, ProviderAdapter] = {}

    def register(self, adapter: ProviderAdapter) -> None:
        """Register an adapter instance under its ``name``."""
        if adapter.name in self._instances:
            logger.warning("Overwriting existing adapter registration: %s", adapter.name)
        self._instances[adapter.name] = adapter
        logger.info("Registered adapter: %s", adapter.name)

    def get(self, name: str) -> ProviderAdapter:
        """Get an adapter by name.

        Raises:
            AdapterNotFoundError: If nothing is registered under this name.
        """
        if name not in self._instances:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._instances.keys())}"
            )
        return self._instances[name]

    async def initialize_all(self) -> None:
        """Initialize every registered adapter."""
        for adapter in self._instances.values():
            await adapter.initialize()

    async def shutdown_all(self) -> None:
        """Gracefully shut down all adapters."""
        for name, adapter in self._instances.items():
            try:
                await adapter.shutdown()
                logger.info("Shut down adapter: %s", name)
            except Exception:
                logger.warning("Error shutting down adapter: %s", name, exc_info=True)
        self._instances.clear()

    def statuses(self) -> dict[str, AdapterStatus]:
        """Configuration status of every adapter, keyed by name."""
        return {name: adapter.status() for name, adapter in self._instances.items()}

    @property
    def active_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._instances.keys())
