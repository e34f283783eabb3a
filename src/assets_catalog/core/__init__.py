"""Core catalog building blocks.

This package contains the pure functions shared by every source:
metadata inference, path segmentation, tree building, relative path
rewriting, code generation and schema validation.
"""

from .codegen import render, render_module, to_ts_literal
from .metadata import COMMON_MIME_TYPES, classify_mime, infer_meta
from .paths import relative_path, to_relative
from .segments import segment
from .tree import TreeConflictError, build_tree, insert, meta_to_paths, to_plain
from .types import ASSET_TYPES, AssetEntry, AssetMeta, AssetType, Branch, Leaf, Node
from .validator import validate_tree, validate_tree_with_error_details

__all__ = [
    "ASSET_TYPES",
    "AssetEntry",
    "AssetMeta",
    "AssetType",
    "Branch",
    "COMMON_MIME_TYPES",
    "Leaf",
    "Node",
    "TreeConflictError",
    "build_tree",
    "classify_mime",
    "infer_meta",
    "insert",
    "meta_to_paths",
    "relative_path",
    "render",
    "render_module",
    "segment",
    "to_plain",
    "to_relative",
    "to_ts_literal",
    "validate_tree",
    "validate_tree_with_error_details",
]
