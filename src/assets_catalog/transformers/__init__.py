"""Transformers for converting catalog trees to output.

This package contains the base class for transformers.
Platform-specific implementations live in the platforms/ directory.
"""

from .base import Transformer

__all__ = ["Transformer"]
