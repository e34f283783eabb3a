"""Source registry for factory-based pipeline creation.

This module provides a central registry for source factories,
enabling source-agnostic pipeline creation and automatic
platform discovery.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .pipeline import CatalogPipeline
    from .sources.base import Source


class SourceRegistry:
    """Central registry for source factories.

    Platforms register a factory when imported, and the registry
    can automatically discover all available platforms.
    """

    _factories: dict[str, Callable[..., "Source"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Source"]) -> None:
        """Register a factory function for creating sources.

        Args:
            name: Name of the source (e.g., 'filesystem', 'glob')
            factory: Callable that creates a Source instance

        Example:
            >>> def create_fs_source(path: Path) -> FilesystemSource:
            ...     return FilesystemSource(path)
            >>> SourceRegistry.register_factory('filesystem', create_fs_source)
        """
        cls._factories[name] = factory

    @classmethod
    def create_pipeline(cls, source_name: str, **kwargs) -> "CatalogPipeline":
        """Create a pipeline from a registered source.

        Args:
            source_name: Name of the registered source
            **kwargs: Arguments passed to the source factory.
                     'on_conflict' is extracted and passed to the pipeline.

        Returns:
            CatalogPipeline configured with the requested source

        Raises:
            ValueError: If source_name is not registered

        Example:
            >>> pipeline = SourceRegistry.create_pipeline(
            ...     'filesystem',
            ...     path=Path('src/assets'),
            ...     on_conflict='error'
            ... )
        """
        # Import here to avoid circular dependency
        from .pipeline import CatalogPipeline

        if source_name not in cls._factories:
            available = ", ".join(cls._factories.keys()) or "none"
            raise ValueError(f"Unknown source: '{source_name}'. Available sources: {available}")

        on_conflict = kwargs.pop("on_conflict", "overwrite")

        source = cls._factories[source_name](**kwargs)

        return CatalogPipeline(source, on_conflict=on_conflict)

    @classmethod
    def list_sources(cls) -> list[str]:
        """List all registered source names.

        Example:
            >>> SourceRegistry.list_sources()
            ['filesystem', 'glob']
        """
        return list(cls._factories.keys())

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all platforms.

        Every package under platforms/ is imported, which triggers its
        auto-registration. Import errors propagate.
        """
        platforms_dir = Path(__file__).parent / "platforms"

        if not platforms_dir.exists():
            return

        for platform_path in sorted(platforms_dir.iterdir()):
            if not platform_path.is_dir():
                continue

            if not (platform_path / "__init__.py").exists():
                continue

            importlib.import_module(f".platforms.{platform_path.name}", package="assets_catalog")
