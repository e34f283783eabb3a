"""Catalog pipeline.

This module provides the main interface for building asset catalogs.
The pipeline is source-agnostic: it folds a source's entries into a
metadata tree and delegates output to the source's transformer.
"""

from typing import Any

from .core.tree import ConflictPolicy, insert
from .core.types import Branch
from .sources.base import Source


class CatalogPipeline:
    """Main interface for catalog generation.

    Example:
        >>> # Via registry (recommended)
        >>> from assets_catalog import SourceRegistry
        >>> pipeline = SourceRegistry.create_pipeline('filesystem', path=Path('src/assets'))
        >>> code = pipeline.run(out_file=Path('src/lib/assets.ts').resolve())
        >>>
        >>> # Direct instantiation (advanced)
        >>> from assets_catalog.platforms.filesystem import FilesystemSource
        >>> pipeline = CatalogPipeline(FilesystemSource(Path('src/assets')))
    """

    def __init__(self, source: Source, on_conflict: ConflictPolicy = "overwrite"):
        """Initialize the pipeline.

        Args:
            source: Source instance to read entries from
            on_conflict: What to do when two files map to the same key path.
                         Options: 'overwrite' (last one wins), 'error'
        """
        self.source = source
        self.on_conflict = on_conflict

    def build_tree(self) -> Branch:
        """Fold every entry of the source into a metadata tree.

        Returns:
            Metadata tree in source order

        Raises:
            TreeConflictError: If on_conflict is 'error' and keys collide
        """
        tree = Branch()
        for entry in self.source.list_entries():
            tree = insert(tree, entry.segments, entry.meta, on_conflict=self.on_conflict)
        return tree

    def run(self, **kwargs: Any) -> Any:
        """Build the tree and hand it to the source's transformer.

        Args:
            **kwargs: Parameters passed to the transformer

        Returns:
            Whatever the source's transformer produces
        """
        tree = self.build_tree()
        transformer = self.source.get_transformer()
        return transformer.transform(tree, **kwargs)
