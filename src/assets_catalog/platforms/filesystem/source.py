"""Filesystem source adapter.

This module provides a Source implementation that walks a local asset
directory and produces one catalog entry per file.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from ...core.metadata import MimeLookup, infer_meta, lookup_mime
from ...core.segments import DEFAULT_ANCHOR, join_root, segment
from ...core.types import AssetEntry
from ...sources.base import Source
from .transformer import ModuleTransformer


def walk_files(root_path: Path, skip_hidden: bool = False) -> list[Path]:
    """Recursively list the files under a directory.

    Directories are visited in sorted order so repeated scans of the
    same tree produce the same sequence. Symlinked directories are
    followed; a directory already reached through another path is not
    walked twice, which also stops symlink cycles.

    Args:
        root_path: Absolute directory to walk
        skip_hidden: Skip files and directories whose name starts with "."

    Returns:
        Absolute file paths, directories excluded
    """
    files: list[Path] = []
    visited: set[str] = set()

    for dirpath, dirnames, filenames in os.walk(root_path, followlinks=True):
        real_dir = os.path.realpath(dirpath)
        if real_dir in visited:
            dirnames[:] = []
            continue
        visited.add(real_dir)

        dirnames.sort()
        if skip_hidden:
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]

        for filename in sorted(filenames):
            if skip_hidden and filename.startswith("."):
                continue
            files.append(Path(dirpath) / filename)

    return files


class FilesystemSource(Source):
    """Source adapter for local asset directories.

    Each file is keyed by its path under ``input_dir`` (the directory as
    the user spelled it) so the anchor rule can see the whole prefix,
    e.g. ``src/assets/sound/beep.mp3`` becomes ``["sound", "beep"]``.
    Metadata keeps the absolute file path.

    Example:
        >>> source = FilesystemSource(Path('src/assets'))
        >>> entries = source.list_entries()
    """

    def __init__(
        self,
        path: Path,
        input_dir: Optional[str] = None,
        anchor: Optional[str] = DEFAULT_ANCHOR,
        skip_hidden: bool = False,
        mime_lookup: Optional[MimeLookup] = lookup_mime,
    ):
        """Initialize filesystem source.

        Args:
            path: Root directory to scan
            input_dir: Prefix used for segmentation (defaults to ``path`` as given)
            anchor: Directory name that relocates the tree root, or None
            skip_hidden: Ignore dot-files and dot-directories
            mime_lookup: MIME resolver passed to metadata inference

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.input_dir = input_dir if input_dir is not None else str(path)
        self.path = path.resolve()
        self.anchor = anchor
        self.skip_hidden = skip_hidden
        self.mime_lookup = mime_lookup

        if not self.path.exists():
            raise ValueError(f"Path does not exist: {self.path}")

        if not self.path.is_dir():
            raise ValueError(f"Path is not a directory: {self.path}")

    def describe(self) -> str:
        return str(self.path)

    def list_entries(self) -> list[AssetEntry]:
        """Scan the directory and build one entry per file.

        Returns:
            Entries in walk order
        """
        entries: list[AssetEntry] = []

        for file_path in walk_files(self.path, skip_hidden=self.skip_hidden):
            relative = file_path.relative_to(self.path).as_posix()
            segments = segment(join_root(self.input_dir, relative), anchor=self.anchor)

            if not segments:
                print(f"Warning: Skipping {file_path}: no usable key", file=sys.stderr)
                continue

            meta = infer_meta(str(file_path), mime_lookup=self.mime_lookup)
            entries.append(AssetEntry(segments=segments, meta=meta))

        return entries

    def get_transformer(self) -> ModuleTransformer:
        return ModuleTransformer()
