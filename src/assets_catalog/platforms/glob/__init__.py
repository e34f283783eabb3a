"""Glob platform for the catalog pipeline.

This platform builds catalog trees from a bundler's pre-resolved glob
result, for use at runtime inside the bundled application.
"""

from collections.abc import Mapping
from typing import Any

from .source import GlobSource, resolved_path, strip_base_dir
from .transformer import RuntimeTransformer

# Auto-register with the registry
from ...registry import SourceRegistry


def _create_glob_source(files: Mapping[str, Any], base_dir: str = "", **kwargs) -> GlobSource:
    """Factory function for creating glob sources.

    Args:
        files: Mapping of virtual path to resolved URL
        base_dir: Prefix trimmed from every virtual path
        **kwargs: Additional parameters (unused for glob results)

    Returns:
        GlobSource instance
    """
    return GlobSource(files, base_dir)


SourceRegistry.register_factory("glob", _create_glob_source)

__all__ = [
    "GlobSource",
    "RuntimeTransformer",
    "resolved_path",
    "strip_base_dir",
]
