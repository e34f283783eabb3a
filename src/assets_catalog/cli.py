"""Command-line interface for the asset catalog generator.

This module provides the CLI entry point for generating a TypeScript
asset module from an asset directory, once or continuously.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .core.segments import DEFAULT_ANCHOR
from .core.tree import iter_leaves
from .platforms.filesystem import write_module
from .registry import SourceRegistry
from .watch import DirectoryWatcher

DEFAULT_INPUT_DIR = "src/assets"
DEFAULT_OUT_FILE = "src/lib/assets.ts"


def format_timestamp(now: datetime) -> str:
    """Format a timestamp like "10/19/2026, 3:04:05 PM"."""
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now.minute:02d}:{now.second:02d} {meridiem}"


def generate_assets_module(
    input_dir: str = DEFAULT_INPUT_DIR,
    out_file: str = DEFAULT_OUT_FILE,
    cwd: Optional[Path] = None,
    silent: bool = False,
    anchor: Optional[str] = DEFAULT_ANCHOR,
    strict: bool = False,
    skip_hidden: bool = False,
    validate: bool = True,
    now: Optional[datetime] = None,
) -> Path:
    """Scan an asset directory and write the generated module.

    Args:
        input_dir: Asset directory, relative to ``cwd`` or absolute
        out_file: Output module path, relative to ``cwd`` or absolute
        cwd: Base directory for relative paths (defaults to the process cwd)
        silent: Suppress progress messages
        anchor: Directory name that relocates the tree root, or None
        strict: Fail on key collisions instead of keeping the last file
        skip_hidden: Ignore dot-files and dot-directories
        validate: Check the tree against the JSON schema before rendering
        now: Timestamp for the header (defaults to the current time)

    Returns:
        Absolute path of the written module

    Raises:
        ValueError: If the input directory is invalid, keys collide in
            strict mode, or validation fails
        OSError: If the output can't be written
    """
    project_root = (cwd or Path.cwd()).resolve()
    root_dir = (project_root / input_dir).resolve()
    out_path = (project_root / out_file).resolve()

    if not silent:
        print(f"Scanning directory: {root_dir}", file=sys.stderr)

    pipeline = SourceRegistry.create_pipeline(
        "filesystem",
        path=root_dir,
        input_dir=input_dir,
        anchor=anchor,
        skip_hidden=skip_hidden,
        on_conflict="error" if strict else "overwrite",
    )

    tree = pipeline.build_tree()

    if not silent:
        print(f"Found {sum(1 for _ in iter_leaves(tree))} assets", file=sys.stderr)

    content = pipeline.source.get_transformer().transform(
        tree,
        out_file=out_path,
        generated_at=format_timestamp(now or datetime.now()),
        validate=validate,
    )
    write_module(out_path, content)

    if not silent:
        print(f"✓ Generated manifest: {out_path}", file=sys.stderr)

    return out_path


def watch_and_generate(
    input_dir: str = DEFAULT_INPUT_DIR,
    out_file: str = DEFAULT_OUT_FILE,
    cwd: Optional[Path] = None,
    **kwargs,
) -> None:
    """Generate once, then regenerate whenever the asset directory changes.

    Blocks until interrupted with Ctrl+C. Failed regenerations are
    reported and watching continues.

    Args:
        input_dir: Asset directory, relative to ``cwd`` or absolute
        out_file: Output module path, relative to ``cwd`` or absolute
        cwd: Base directory for relative paths
        **kwargs: Options passed to :func:`generate_assets_module`
    """
    project_root = (cwd or Path.cwd()).resolve()
    root_dir = (project_root / input_dir).resolve()
    out_path = (project_root / out_file).resolve()

    print("Watch mode started", file=sys.stderr)
    print(f"Watching directory: {root_dir}", file=sys.stderr)
    print(f"Output file: {out_path}", file=sys.stderr)
    print("Tip: Press Ctrl+C to stop watching\n", file=sys.stderr)

    generate_assets_module(input_dir, out_file, cwd=project_root, **kwargs)

    regen_kwargs = {**kwargs, "silent": True}

    def regenerate() -> None:
        now = format_timestamp(datetime.now())
        print(f"\n[{now}] File change detected, regenerating...", file=sys.stderr)
        try:
            generate_assets_module(input_dir, out_file, cwd=project_root, **regen_kwargs)
            print(f"[{now}] ✓ Manifest updated", file=sys.stderr)
        except Exception as e:
            print(f"✗ Generation failed: {e}", file=sys.stderr)

    watcher = DirectoryWatcher(root_dir, regenerate, exclude=(out_path,))
    try:
        watcher.run()
    except KeyboardInterrupt:
        print("\n\nStopping watch mode", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="assets-catalog",
        description="Generate a typed TypeScript asset catalog from a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage (src/assets -> src/lib/assets.ts)
  assets-catalog

  # Custom locations
  assets-catalog --input public/static --out src/generated/assets.ts

  # Regenerate on every change
  assets-catalog --watch
        """,
    )

    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT_DIR,
        help=f"Asset directory to scan (default: {DEFAULT_INPUT_DIR})",
    )

    parser.add_argument(
        "--out",
        default=DEFAULT_OUT_FILE,
        help=f"Generated module path (default: {DEFAULT_OUT_FILE})",
    )

    parser.add_argument(
        "--watch", "-w", action="store_true", help="Watch the input directory and regenerate on change"
    )

    parser.add_argument(
        "--no-anchor",
        action="store_true",
        help=f"Keep path segments before the last '{DEFAULT_ANCHOR}' directory",
    )

    parser.add_argument(
        "--strict", action="store_true", help="Fail when two files map to the same key"
    )

    parser.add_argument(
        "--skip-hidden", action="store_true", help="Ignore files and directories starting with '.'"
    )

    parser.add_argument("--quiet", "-q", action="store_true", help="Only print errors")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the catalog generator."""
    args = build_parser().parse_args(argv)

    options = {
        "anchor": None if args.no_anchor else DEFAULT_ANCHOR,
        "strict": args.strict,
        "skip_hidden": args.skip_hidden,
    }

    try:
        if args.watch:
            watch_and_generate(args.input, args.out, **options)
        else:
            generate_assets_module(args.input, args.out, silent=args.quiet, **options)
    except Exception as e:
        print(f"Error: Failed to generate manifest: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
