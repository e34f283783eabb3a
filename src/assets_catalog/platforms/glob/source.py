"""Glob-result source adapter.

This module provides a Source implementation over a bundler's glob
result: a mapping of virtual module path to an already resolved URL.
No filesystem access happens here.
"""

from collections.abc import Mapping
from typing import Any

from ...core.metadata import infer_meta
from ...core.segments import segment
from ...core.types import AssetEntry
from ...sources.base import Source
from .transformer import RuntimeTransformer


def strip_base_dir(file_path: str, base_dir: str) -> str:
    """Remove an optional base directory prefix and leading slashes.

    Example:
        ("/src/assets/icons/logo.png", "/src/assets") -> "icons/logo.png"
    """
    relative = file_path
    if base_dir and file_path.startswith(base_dir):
        relative = file_path[len(base_dir) :]
    return relative.lstrip("/")


def resolved_path(file_path: str, resolved: Any) -> str:
    """Pick the path to embed for a glob entry.

    String values are resolved URLs and are used as-is; anything else
    (e.g. a lazily imported module) falls back to the virtual path.
    """
    if isinstance(resolved, str) and resolved:
        return resolved
    return file_path


class GlobSource(Source):
    """Source adapter for pre-resolved glob results.

    Keys are segmented without the anchor rule; ``base_dir`` plays that
    role. Metadata is inferred from the extension with the built-in
    MIME table only.

    Example:
        >>> source = GlobSource({'/src/assets/logo.png': '/assets/logo.4f2a.png'}, '/src/assets')
        >>> source.list_entries()[0].segments
        ['logo']
    """

    def __init__(self, files: Mapping[str, Any], base_dir: str = ""):
        self.files = files
        self.base_dir = base_dir

    def describe(self) -> str:
        return f"glob result ({len(self.files)} files)"

    def list_entries(self) -> list[AssetEntry]:
        entries: list[AssetEntry] = []

        for file_path, resolved in self.files.items():
            relative = strip_base_dir(file_path, self.base_dir)
            segments = segment(relative, anchor=None)
            if not segments:
                continue

            meta = infer_meta(relative, mime_lookup=None)
            meta["path"] = resolved_path(file_path, resolved)
            entries.append(AssetEntry(segments=segments, meta=meta))

        return entries

    def get_transformer(self) -> RuntimeTransformer:
        return RuntimeTransformer()
