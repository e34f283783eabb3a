"""Type definitions for asset catalogs.

This module defines the leaf metadata record and the tagged tree nodes
that every stage of the catalog pipeline passes around.
"""

from dataclasses import dataclass, field
from typing import Literal, TypedDict, Union

AssetType = Literal["image", "audio", "video", "font", "application", "text", "other"]

# Every tag a leaf's ``type`` can take, "other" last
ASSET_TYPES: tuple[AssetType, ...] = (
    "image",
    "audio",
    "video",
    "font",
    "application",
    "text",
    "other",
)


class AssetMeta(TypedDict):
    """Metadata for a single asset file."""

    type: AssetType  # Coarse type derived from the MIME major component
    ext: str  # Lowercased, dot-prefixed extension ('' when absent)
    mime: str  # MIME string, 'application/octet-stream' when unknown
    path: str  # Absolute while building, relative once rewritten


@dataclass(frozen=True)
class Leaf:
    """Terminal tree node.

    Holds an AssetMeta record in a metadata tree, or a plain path
    string in a path-only tree.
    """

    value: Union[AssetMeta, str]


@dataclass(frozen=True)
class Branch:
    """Intermediate tree node mapping keys to child nodes.

    Children keep insertion order, which is the order the generated
    code is emitted in.
    """

    children: dict[str, "Node"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __getitem__(self, key: str) -> "Node":
        return self.children[key]


Node = Union[Branch, Leaf]


@dataclass
class AssetEntry:
    """A scanned file ready to be folded into a tree.

    Attributes:
        segments: Tree keys leading to the file (last one is the file key)
        meta: Metadata for the file
    """

    segments: list[str]
    meta: AssetMeta
