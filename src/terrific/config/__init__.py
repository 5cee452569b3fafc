"""Configuration loading."""

from terrific.config.settings import CredentialSettings, Settings, load_settings

__all__ = ["CredentialSettings", "Settings", "load_settings"]
