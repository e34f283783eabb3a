"""Runtime catalog composition.

Builds the metadata and path trees straight from a bundler's glob
result, for code that needs the catalog as live data instead of a
generated module.
"""

from collections.abc import Mapping
from typing import Any

from .core.tree import insert, to_plain
from .core.types import Branch
from .platforms.glob import GlobSource


def compose(files: Mapping[str, Any], base_dir: str = "") -> tuple[Branch, Branch]:
    """Build the metadata tree and the path tree in lock-step.

    Args:
        files: Mapping of virtual path to resolved URL
        base_dir: Prefix trimmed from every virtual path, e.g. '/src/assets'

    Returns:
        Tuple of (metadata tree, path tree)
    """
    meta_tree = Branch()
    assets_tree = Branch()

    for entry in GlobSource(files, base_dir).list_entries():
        meta_tree = insert(meta_tree, entry.segments, entry.meta)
        assets_tree = insert(assets_tree, entry.segments, entry.meta["path"])

    return meta_tree, assets_tree


def create_assets(files: Mapping[str, Any], base_dir: str = "") -> dict[str, Any]:
    """Create the asset catalog as nested dictionaries.

    Example:
        >>> catalog = create_assets(
        ...     {'/src/assets/icons/logo.png': '/assets/logo.4f2a.png'},
        ...     '/src/assets',
        ... )
        >>> catalog['assets']['icons']['logo']
        '/assets/logo.4f2a.png'
        >>> catalog['assetMeta']['icons']['logo']['type']
        'image'

    Args:
        files: Mapping of virtual path to resolved URL
        base_dir: Prefix trimmed from every virtual path

    Returns:
        Dictionary with "assetMeta" and "assets" trees
    """
    meta_tree, assets_tree = compose(files, base_dir)
    return {
        "assetMeta": to_plain(meta_tree),
        "assets": to_plain(assets_tree),
    }
