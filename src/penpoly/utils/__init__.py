"""Utility functions for penpoly.

This module provides utility functions including:

- Logging setup and configuration
"""

from penpoly.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
