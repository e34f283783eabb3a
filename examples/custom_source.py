"""Template for implementing a custom source.

This example demonstrates the complete pattern for creating a custom source:
- Source implementation producing catalog entries
- Reusing an existing transformer
- Registration with SourceRegistry

Here the assets come from a CDN listing instead of a local directory.
"""

import sys
from typing import Any

from assets_catalog import SourceRegistry
from assets_catalog.core.metadata import infer_meta
from assets_catalog.core.segments import segment
from assets_catalog.core.types import AssetEntry
from assets_catalog.platforms.glob import RuntimeTransformer
from assets_catalog.sources.base import Source
from assets_catalog.transformers.base import Transformer


# Step 1: Implement Source interface
class CdnListingSource(Source):
    """Source over a list of object keys published on a CDN."""

    def __init__(self, base_url: str, keys: list[str]):
        self.base_url = base_url.rstrip("/")
        self.keys = keys

    def describe(self) -> str:
        return self.base_url

    def list_entries(self) -> list[AssetEntry]:
        entries = []
        for key in sorted(self.keys):
            meta = infer_meta(key, mime_lookup=None)
            meta["path"] = f"{self.base_url}/{key}"
            entries.append(AssetEntry(segments=segment(key, anchor=None), meta=meta))
        return entries

    def get_transformer(self) -> Transformer:
        # Absolute URLs need no rewriting, so reuse the runtime transformer
        return RuntimeTransformer()


# Step 2: Register with SourceRegistry
def create_cdn_source(base_url: str, keys: list[str], **kwargs: Any) -> CdnListingSource:
    """Factory function for creating CdnListingSource."""
    return CdnListingSource(base_url, keys)


SourceRegistry.register_factory("cdn", create_cdn_source)


# Step 3: Use your source
def main():
    """Example usage of custom source."""
    print("Custom Source Example", file=sys.stderr)
    print("=" * 50, file=sys.stderr)

    pipeline = SourceRegistry.create_pipeline(
        "cdn",
        base_url="https://cdn.example.com/static",
        keys=["icons/logo.svg", "sound/beep.mp3", "fonts/Inter.woff2"],
    )

    meta_tree, assets_tree = pipeline.run()

    print(f"\n✓ Built catalog for {pipeline.source.describe()}", file=sys.stderr)
    print(f"  Top-level keys: {', '.join(assets_tree.children)}", file=sys.stderr)


if __name__ == "__main__":
    main()
