"""Basic filesystem catalog example.

This example demonstrates how to:
- Scan a local asset directory
- Inspect the metadata tree
- Generate and save the TypeScript module
"""

import sys
from collections import Counter
from pathlib import Path

from assets_catalog import SourceRegistry
from assets_catalog.core.tree import iter_leaves
from assets_catalog.platforms.filesystem import write_module


def main():
    # Scan a directory (change this to your asset directory)
    asset_dir = Path("src/assets")
    out_file = Path("src/lib/assets.ts").resolve()

    if not asset_dir.exists():
        print(f"Directory not found: {asset_dir}", file=sys.stderr)
        print("Please update the asset_dir variable in this script", file=sys.stderr)
        return

    print(f"Scanning directory: {asset_dir.resolve()}", file=sys.stderr)

    pipeline = SourceRegistry.create_pipeline("filesystem", path=asset_dir, input_dir=str(asset_dir))

    # Summarize the tree before rendering
    tree = pipeline.build_tree()
    counts = Counter(meta["type"] for _, meta in iter_leaves(tree))

    print("\n✓ Catalog built", file=sys.stderr)
    for asset_type, count in counts.most_common():
        print(f"  {asset_type}: {count}", file=sys.stderr)

    # Render and save
    code = pipeline.run(out_file=out_file)
    write_module(out_file, code)

    print(f"\nModule saved to {out_file}", file=sys.stderr)


if __name__ == "__main__":
    main()
