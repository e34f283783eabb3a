"""Filesystem transformer for module generation.

This module converts a scanned metadata tree into the source of the
generated TypeScript module and writes it to disk.
"""

import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from ...core.codegen import render_module
from ...core.paths import to_relative
from ...core.types import Branch
from ...core.validator import validate_tree_with_error_details
from ...transformers.base import Transformer


def write_module(out_path: Path, content: str) -> None:
    """Write generated source, replacing the previous file atomically.

    The parent directory is created if needed. Content goes to a
    temporary file next to the target first, so a failed write never
    leaves a truncated module behind.

    Args:
        out_path: Absolute path of the output file
        content: Module source
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=out_path.parent, prefix=f".{out_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_name, out_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class ModuleTransformer(Transformer):
    """Transformer for filesystem sources.

    Rewrites leaf paths relative to the output module and renders the
    module source.
    """

    def transform(self, tree: Branch, **kwargs: Any) -> str:
        """Render a metadata tree as module source.

        Args:
            tree: Metadata tree with absolute leaf paths
            **kwargs: ``out_file`` (required) path of the generated module,
                ``generated_at`` optional header timestamp,
                ``validate`` check the tree against the schema (default True)

        Returns:
            Module source text

        Raises:
            ValueError: If validation is enabled and the tree is invalid
        """
        out_file = kwargs["out_file"]
        generated_at: Optional[str] = kwargs.get("generated_at")
        validate = kwargs.get("validate", True)

        relative_tree = to_relative(tree, out_file)

        if validate:
            is_valid, error_msg = validate_tree_with_error_details(relative_tree)
            if not is_valid:
                raise ValueError(f"Asset tree validation failed: {error_msg}")

        return render_module(relative_tree, generated_at)
