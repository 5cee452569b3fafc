"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Request

from terrific.adapters.base.adapter import ProviderAdapter
from terrific.adapters.base.registry import AdapterRegistry


def get_registry(request: Request) -> AdapterRegistry:
    """Get the adapter registry of the application serving *request*.

    Raises:
        RuntimeError: If the application lifespan has not started.
    """
    registry: AdapterRegistry | None = getattr(request.app.state, "registry", None)
    if registry is None:
        raise RuntimeError("Adapter registry not initialized. Is the server running?")
    return registry


def provide_adapter(name: str) -> Callable[[Request], ProviderAdapter]:
    """Build a dependency that resolves the adapter registered as *name*."""

    def _dependency(request: Request) -> ProviderAdapter:
        return get_registry(request).get(name)

    _dependency.__name__ = f"get_{name}_adapter"
    return _dependency
