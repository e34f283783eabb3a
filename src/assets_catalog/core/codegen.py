"""TypeScript code generation for asset catalogs.

This module renders a metadata tree into the source of a TypeScript
module exporting ``assetMeta``, ``assets`` and their type aliases.
Output depends only on the tree, so identical trees give identical text.
"""

import re
from collections.abc import Sequence
from typing import Any, Optional

from .types import AssetMeta, Branch, Leaf, Node

META_NAME = "assetMeta"
ASSETS_NAME = "assets"
META_TYPE_NAME = "AssetMetaTree"
ASSETS_TYPE_NAME = "AssetsTree"

INDENT = "  "

IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class Expression(str):
    """Raw TypeScript expression emitted without quoting."""


def quote(value: str) -> str:
    """Render a single-quoted string literal.

    Only backslashes and single quotes are escaped.
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def is_identifier(key: str) -> bool:
    return IDENTIFIER_RE.fullmatch(key) is not None


def format_key(key: str) -> str:
    """Render an object key, bare when it is a valid identifier."""
    return key if is_identifier(key) else quote(key)


def access_expression(root: str, segments: Sequence[str]) -> str:
    """Build a property access chain.

    Example:
        ("assetMeta", ["icons", "my-file"]) -> "assetMeta.icons['my-file']"
    """
    parts = [root]
    for key in segments:
        parts.append(f".{key}" if is_identifier(key) else f"[{quote(key)}]")
    return "".join(parts)


def to_ts_literal(value: Any, indent: int = 0) -> str:
    """Convert a plain Python value into TypeScript source.

    Dicts become object literals, lists/tuples array literals and
    :class:`Expression` values are emitted verbatim.

    Args:
        value: Value to render
        indent: Current nesting level

    Returns:
        TypeScript source for the value
    """
    pad = INDENT * indent

    if value is None:
        return "null"
    if isinstance(value, Expression):
        return str(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = ",\n".join(INDENT * (indent + 1) + to_ts_literal(v, indent + 1) for v in value)
        return f"[\n{items}\n{pad}]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [
            f"{INDENT * (indent + 1)}{format_key(str(k))}: {to_ts_literal(v, indent + 1)}"
            for k, v in value.items()
        ]
        return "{\n" + ",\n".join(lines) + f"\n{pad}}}"

    return to_ts_literal(str(value), indent)


def url_expression(path: str) -> Expression:
    """Resolve ``path`` against the generated module's own URL."""
    return Expression(f"new URL({quote(path)}, import.meta.url).href")


def _meta_literal(node: Node) -> Any:
    if isinstance(node, Leaf):
        meta: AssetMeta = node.value
        return {
            "type": meta["type"],
            "ext": meta["ext"],
            "mime": meta["mime"],
            "path": url_expression(meta["path"]),
        }
    return {key: _meta_literal(child) for key, child in node.children.items()}


def _assets_literal(node: Node, prefix: tuple[str, ...] = ()) -> Any:
    if isinstance(node, Leaf):
        return Expression(access_expression(META_NAME, prefix) + ".path")
    return {key: _assets_literal(child, prefix + (key,)) for key, child in node.children.items()}


def render(meta_tree: Branch) -> str:
    """Render the TypeScript declarations for a metadata tree.

    Leaf paths should already be relative to the generated module
    (see :func:`assets_catalog.core.paths.to_relative`).

    Args:
        meta_tree: Metadata tree with relative leaf paths

    Returns:
        Module source: both constants and both type aliases
    """
    meta_code = to_ts_literal(_meta_literal(meta_tree))
    assets_code = to_ts_literal(_assets_literal(meta_tree))

    return (
        f"export const {META_NAME} = {meta_code} as const\n"
        "\n"
        f"export const {ASSETS_NAME} = {assets_code} as const\n"
        "\n"
        f"export type {META_TYPE_NAME} = typeof {META_NAME}\n"
        f"export type {ASSETS_TYPE_NAME} = typeof {ASSETS_NAME}\n"
    )


def render_module(meta_tree: Branch, generated_at: Optional[str] = None) -> str:
    """Render a complete module, with a timestamp header when given."""
    code = render(meta_tree)
    if generated_at is None:
        return code
    return f"// Generated at: {generated_at}\n\n{code}"
