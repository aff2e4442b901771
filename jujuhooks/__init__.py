"""Helpers for Juju hook tools, called through a supplied runner: status, storage and unit addresses."""

__version__ = "0.1.0"
__all__ = ["status", "storage", "unit"]