"""assets-catalog - typed static asset catalogs.

This package scans a directory of static assets and generates a
TypeScript module exposing a nested metadata tree and a path-only tree
that mirror the directory layout. The same trees can be built at
runtime from a bundler's pre-resolved glob result.
"""

# Core library interface
from .pipeline import CatalogPipeline
from .registry import SourceRegistry
from .sources.base import Source

# Core utilities
from .core import AssetMeta, AssetType, Branch, Leaf, TreeConflictError
from .core import build_tree, infer_meta, insert, render, segment, to_relative

# Runtime composition
from .runtime import compose, create_assets

# CLI interface
from .cli import generate_assets_module, main, watch_and_generate

__version__ = "0.1.0"

# Auto-discover and register all platforms
SourceRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "CatalogPipeline",
    "SourceRegistry",
    "Source",
    # Core utilities
    "AssetMeta",
    "AssetType",
    "Branch",
    "Leaf",
    "TreeConflictError",
    "build_tree",
    "infer_meta",
    "insert",
    "render",
    "segment",
    "to_relative",
    # Runtime
    "compose",
    "create_assets",
    # CLI
    "generate_assets_module",
    "main",
    "watch_and_generate",
]
