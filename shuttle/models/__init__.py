"""Data models for shuttle."""

from .item import Item, normalize_haystack

__all__ = ["Item", "normalize_haystack"]
