"""Tests for runtime composition from glob results."""

from unittest.mock import Mock

from assets_catalog import SourceRegistry
from assets_catalog.core.tree import to_plain
from assets_catalog.platforms.glob import GlobSource, resolved_path, strip_base_dir
from assets_catalog.runtime import compose, create_assets


GLOB_RESULT = {
    "/src/assets/icons/logo.png": "/assets/logo.4f2a.png",
    "/src/assets/icons/my-icon.svg": "/assets/my-icon.91bc.svg",
    "/src/assets/fonts/Inter.woff2": "/assets/Inter.0a1b.woff2",
    "/src/assets/data/levels.json": "/assets/levels.77aa.json",
}


class TestStripBaseDir:
    """Test base directory trimming."""

    def test_strips_prefix_and_slashes(self) -> None:
        assert strip_base_dir("/src/assets/icons/logo.png", "/src/assets") == "icons/logo.png"

    def test_prefix_with_trailing_slash(self) -> None:
        assert strip_base_dir("/src/assets/logo.png", "/src/assets/") == "logo.png"

    def test_non_matching_prefix(self) -> None:
        assert strip_base_dir("/public/logo.png", "/src/assets") == "public/logo.png"

    def test_no_base_dir(self) -> None:
        assert strip_base_dir("///logo.png", "") == "logo.png"


class TestResolvedPath:
    """Test the embedded path choice."""

    def test_uses_resolved_url(self) -> None:
        assert resolved_path("/src/a.png", "/assets/a.123.png") == "/assets/a.123.png"

    def test_falls_back_to_virtual_path(self) -> None:
        assert resolved_path("/src/a.png", Mock()) == "/src/a.png"
        assert resolved_path("/src/a.png", "") == "/src/a.png"


class TestGlobSource:
    """Test entry creation from glob results."""

    def test_segments_have_no_anchor_trim(self) -> None:
        """Test that only base_dir trims the path."""
        source = GlobSource({"/src/assets/ui/assets/btn.png": "/x.png"}, "/src")

        (entry,) = source.list_entries()

        assert entry.segments == ["assets", "ui", "assets", "btn"]

    def test_meta_from_extension_table(self) -> None:
        source = GlobSource({"/src/assets/data/levels.json": "/assets/levels.77aa.json"}, "/src/assets")

        (entry,) = source.list_entries()

        assert entry.meta == {
            "type": "application",
            "ext": ".json",
            "mime": "application/json",
            "path": "/assets/levels.77aa.json",
        }

    def test_meta_ignores_resolved_url_shape(self) -> None:
        """Test that a data URL doesn't change the inferred extension."""
        source = GlobSource({"/a/logo.png": "data:image/png;base64,AAAA"}, "/a")

        (entry,) = source.list_entries()

        assert entry.meta["ext"] == ".png"
        assert entry.meta["path"] == "data:image/png;base64,AAAA"

    def test_unknown_extension(self) -> None:
        source = GlobSource({"/a/scene.glb": "/scene.glb"}, "/a")

        (entry,) = source.list_entries()

        assert entry.meta["mime"] == "application/octet-stream"


class TestCompose:
    """Test lock-step tree building."""

    def test_trees_are_parallel(self) -> None:
        meta_tree, assets_tree = compose(GLOB_RESULT, "/src/assets")

        meta = to_plain(meta_tree)
        assets = to_plain(assets_tree)

        assert list(meta) == list(assets) == ["icons", "fonts", "data"]
        assert assets["icons"]["logo"] == "/assets/logo.4f2a.png"
        assert meta["icons"]["logo"]["path"] == assets["icons"]["logo"]
        assert meta["fonts"]["Inter"]["type"] == "font"

    def test_matches_registry_pipeline(self) -> None:
        """Test that compose and the glob pipeline agree."""
        pipeline = SourceRegistry.create_pipeline("glob", files=GLOB_RESULT, base_dir="/src/assets")

        meta_tree, assets_tree = pipeline.run()

        assert (to_plain(meta_tree), to_plain(assets_tree)) == tuple(
            to_plain(t) for t in compose(GLOB_RESULT, "/src/assets")
        )

    def test_collision_last_wins(self) -> None:
        meta_tree, assets_tree = compose({"/a/logo.png": "/1.png", "/a/logo.svg": "/2.svg"}, "/a")

        assert to_plain(assets_tree) == {"logo": "/2.svg"}
        assert to_plain(meta_tree)["logo"]["mime"] == "image/svg+xml"

    def test_empty(self) -> None:
        meta_tree, assets_tree = compose({})

        assert to_plain(meta_tree) == {}
        assert to_plain(assets_tree) == {}


class TestCreateAssets:
    """Test the dictionary-returning helper."""

    def test_returns_plain_dicts(self) -> None:
        catalog = create_assets(GLOB_RESULT, "/src/assets")

        assert set(catalog) == {"assetMeta", "assets"}
        assert catalog["assets"]["icons"]["my-icon"] == "/assets/my-icon.91bc.svg"
        assert catalog["assetMeta"]["data"]["levels"]["mime"] == "application/json"

    def test_is_stateless(self) -> None:
        assert create_assets(GLOB_RESULT, "/src/assets") == create_assets(GLOB_RESULT, "/src/assets")
