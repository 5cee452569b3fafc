"""Base adapter interface — Abstract class for upstream provider connectors."""

from terrific.adapters.base.adapter import ProviderAdapter, parse_page
from terrific.adapters.base.registry import AdapterRegistry

__all__ = ["AdapterRegistry", "ProviderAdapter", "parse_page"]
