"""Asset sources for the catalog pipeline.

This package contains the base interface for sources.
Concrete implementations live in the platforms/ directory.
"""

from .base import Source

__all__ = ["Source"]
