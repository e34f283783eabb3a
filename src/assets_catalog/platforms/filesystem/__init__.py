"""Filesystem platform for the catalog pipeline.

This platform scans a local asset directory and generates a
TypeScript module describing it.
"""

from pathlib import Path

from .source import FilesystemSource, walk_files
from .transformer import ModuleTransformer, write_module

# Auto-register with the registry
from ...registry import SourceRegistry


def _create_filesystem_source(path: Path, **kwargs) -> FilesystemSource:
    """Factory function for creating filesystem sources.

    Args:
        path: Root directory to scan
        **kwargs: ``input_dir``, ``anchor``, ``skip_hidden``, ``mime_lookup``

    Returns:
        FilesystemSource instance
    """
    return FilesystemSource(Path(path), **kwargs)


# Auto-register at module import
SourceRegistry.register_factory("filesystem", _create_filesystem_source)

__all__ = [
    "FilesystemSource",
    "ModuleTransformer",
    "walk_files",
    "write_module",
]
