"""Pure construction of catalog trees.

Every function here returns new nodes and leaves its inputs untouched.
Subtrees that a call doesn't touch are shared between the old and new
tree rather than copied.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Callable, Literal, Union

from .types import AssetMeta, Branch, Leaf, Node

ConflictPolicy = Literal["overwrite", "error"]


class TreeConflictError(ValueError):
    """Raised when two insertions target the same key path under the "error" policy."""

    def __init__(self, segments: Sequence[str]):
        self.segments = list(segments)
        super().__init__(f"Duplicate asset key: {'/'.join(self.segments)}")


def insert(
    tree: Branch,
    segments: Sequence[str],
    value: Union[AssetMeta, str],
    on_conflict: ConflictPolicy = "overwrite",
) -> Branch:
    """Place ``value`` at the key path ``segments``.

    Intermediate levels are created as needed; a leaf standing where a
    directory is needed is replaced by a fresh branch. With the default
    "overwrite" policy a repeated key path keeps the last value written.

    Args:
        tree: Root branch to insert into (not modified)
        segments: Key path, file key last
        value: Leaf value to store
        on_conflict: "overwrite" (last write wins) or "error"

    Returns:
        New root branch; ``tree`` itself if ``segments`` is empty

    Raises:
        TreeConflictError: If on_conflict is "error" and the key path
            already holds a node
    """
    if not segments:
        return tree
    return _insert(tree, segments, 0, value, on_conflict)


def _insert(
    branch: Branch,
    segments: Sequence[str],
    depth: int,
    value: Union[AssetMeta, str],
    on_conflict: ConflictPolicy,
) -> Branch:
    key = segments[depth]
    children = dict(branch.children)

    if depth == len(segments) - 1:
        if on_conflict == "error" and key in children:
            raise TreeConflictError(segments)
        children[key] = Leaf(value)
        return Branch(children)

    child = children.get(key)
    if not isinstance(child, Branch):
        if on_conflict == "error" and child is not None:
            raise TreeConflictError(segments[: depth + 1])
        child = Branch()

    children[key] = _insert(child, segments, depth + 1, value, on_conflict)
    return Branch(children)


def build_tree(
    entries: Iterable[tuple[Sequence[str], Union[AssetMeta, str]]],
    on_conflict: ConflictPolicy = "overwrite",
) -> Branch:
    """Fold (segments, value) pairs into a single tree, in order."""
    tree = Branch()
    for segments, value in entries:
        tree = insert(tree, segments, value, on_conflict)
    return tree


def map_leaves(node: Node, fn: Callable[[Union[AssetMeta, str]], Union[AssetMeta, str]]) -> Node:
    """Rebuild a tree with ``fn`` applied to every leaf value."""
    if isinstance(node, Leaf):
        return Leaf(fn(node.value))
    return Branch({key: map_leaves(child, fn) for key, child in node.children.items()})


def _leaf_path(value: Union[AssetMeta, str]) -> str:
    if isinstance(value, str):
        return value
    return value["path"]


def meta_to_paths(tree: Branch) -> Branch:
    """Derive the path-only tree from a metadata tree."""
    return map_leaves(tree, _leaf_path)  # type: ignore[return-value]


def to_plain(node: Node) -> Any:
    """Convert a tree into nested dictionaries.

    Branches become dicts (insertion order kept); leaves become a copy of
    their AssetMeta record or their path string.
    """
    if isinstance(node, Leaf):
        if isinstance(node.value, str):
            return node.value
        return dict(node.value)
    return {key: to_plain(child) for key, child in node.children.items()}


def iter_leaves(node: Node, prefix: tuple[str, ...] = ()) -> Iterable[tuple[tuple[str, ...], Union[AssetMeta, str]]]:
    """Yield (key path, value) for every leaf, depth first in insertion order."""
    if isinstance(node, Leaf):
        yield prefix, node.value
        return
    for key, child in node.children.items():
        yield from iter_leaves(child, prefix + (key,))
