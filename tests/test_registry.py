"""Tests for the source registry and pipeline wiring."""

from unittest.mock import Mock

import pytest

from assets_catalog import CatalogPipeline, SourceRegistry
from assets_catalog.core.tree import to_plain
from assets_catalog.core.types import AssetEntry, AssetMeta


def make_meta(path: str) -> AssetMeta:
    return AssetMeta(type="image", ext=".png", mime="image/png", path=path)


class TestSourceRegistry:
    """Test factory registration and lookup."""

    def test_platforms_are_discovered(self) -> None:
        sources = SourceRegistry.list_sources()

        assert "filesystem" in sources
        assert "glob" in sources

    def test_platform_import_errors_propagate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a broken platform package is not silently skipped."""

        def broken_import(name, package=None):
            raise ImportError(f"cannot import {name}")

        monkeypatch.setattr("assets_catalog.registry.importlib.import_module", broken_import)

        with pytest.raises(ImportError, match="cannot import .platforms."):
            SourceRegistry.discover_platforms()

    def test_unknown_source(self) -> None:
        with pytest.raises(ValueError, match="Unknown source: 'cdn'"):
            SourceRegistry.create_pipeline("cdn")

    def test_custom_factory(self) -> None:
        source = Mock()
        SourceRegistry.register_factory("mock", lambda **kwargs: source)
        try:
            pipeline = SourceRegistry.create_pipeline("mock", on_conflict="error")
        finally:
            SourceRegistry._factories.pop("mock")

        assert pipeline.source is source
        assert pipeline.on_conflict == "error"


class TestCatalogPipeline:
    """Test the source-agnostic pipeline."""

    def test_build_tree_folds_in_order(self) -> None:
        source = Mock()
        source.list_entries.return_value = [
            AssetEntry(segments=["b", "x"], meta=make_meta("/b/x.png")),
            AssetEntry(segments=["a"], meta=make_meta("/a.png")),
            AssetEntry(segments=["b", "x"], meta=make_meta("/b/x2.png")),
        ]

        tree = to_plain(CatalogPipeline(source).build_tree())

        assert list(tree) == ["b", "a"]
        assert tree["b"]["x"]["path"] == "/b/x2.png"

    def test_run_delegates_to_transformer(self) -> None:
        source = Mock()
        source.list_entries.return_value = []
        source.get_transformer.return_value.transform.return_value = "output"

        result = CatalogPipeline(source).run(out_file="/tmp/x.ts")

        assert result == "output"
        _, kwargs = source.get_transformer.return_value.transform.call_args
        assert kwargs == {"out_file": "/tmp/x.ts"}
