"""Relative path rewriting.

Generated modules reference assets relative to their own location, so
every absolute leaf path is rewritten against the output file's directory.
"""

import os
from pathlib import Path
from typing import Union

from .tree import map_leaves
from .types import AssetMeta, Branch


def relative_path(target: Union[str, Path], from_dir: Union[str, Path]) -> str:
    """Compute a module-style relative path.

    The result always uses forward slashes and starts with "./" or "../".

    Example:
        ("/app/src/assets/logo.png", "/app/src/lib") -> "../assets/logo.png"

    Args:
        target: Absolute path of the asset
        from_dir: Absolute directory the path should be relative to

    Returns:
        Relative path string
    """
    rel = os.path.relpath(os.fspath(target), os.fspath(from_dir))
    rel = rel.replace("\\", "/")
    if not rel.startswith("."):
        rel = "./" + rel
    return rel


def to_relative(tree: Branch, output_file: Union[str, Path]) -> Branch:
    """Rewrite every leaf path relative to the output file's directory.

    Args:
        tree: Metadata tree with absolute leaf paths (not modified)
        output_file: Absolute path of the module being generated

    Returns:
        New tree with the same keys and order, leaf paths rewritten
    """
    from_dir = os.path.dirname(os.path.abspath(os.fspath(output_file)))

    def rewrite(value: Union[AssetMeta, str]) -> Union[AssetMeta, str]:
        if isinstance(value, str):
            return relative_path(value, from_dir)
        return AssetMeta(
            type=value["type"],
            ext=value["ext"],
            mime=value["mime"],
            path=relative_path(value["path"], from_dir),
        )

    return map_leaves(tree, rewrite)  # type: ignore[return-value]
