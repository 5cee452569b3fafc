"""Terrific — one HTTP surface over several news, listing and video providers."""

__version__ = "0.1.0"
