"""Runtime transformer for glob sources.

Returns live trees instead of generated source.
"""

from typing import Any

from ...core.tree import meta_to_paths
from ...core.types import Branch
from ...transformers.base import Transformer


class RuntimeTransformer(Transformer):
    """Pair a metadata tree with its path-only tree."""

    def transform(self, tree: Branch, **kwargs: Any) -> tuple[Branch, Branch]:
        return tree, meta_to_paths(tree)
