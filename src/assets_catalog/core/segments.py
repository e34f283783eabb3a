"""Path segmentation.

Turns a file path into the list of tree keys used to place the file
in the catalog: directory names followed by the extension-less file name.
"""

from typing import Optional

DEFAULT_ANCHOR = "assets"


def normalize_separators(path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return path.replace("\\", "/")


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split a file name into its key and extension.

    Example:
        "logo.png" -> ("logo", ".png")
        ".env" -> (".env", "")

    Args:
        file_name: Bare file name (no directories)

    Returns:
        Tuple of (file_key, extension); extension keeps its original case
    """
    dot = file_name.rfind(".")
    if dot <= 0:
        return file_name, ""
    return file_name[:dot], file_name[dot:]


def join_root(input_dir: str, relative_path: str) -> str:
    """Prefix a root-relative path with the scanned input directory.

    Example:
        ("src/assets/", "sound/beep.mp3") -> "src/assets/sound/beep.mp3"
    """
    prefix = normalize_separators(input_dir).rstrip("/")
    relative = normalize_separators(relative_path).lstrip("/")
    if not prefix:
        return relative
    return f"{prefix}/{relative}"


def segment(path_with_root: str, anchor: Optional[str] = DEFAULT_ANCHOR) -> list[str]:
    """Split a path into tree keys.

    Empty components (from doubled or trailing slashes) and "." are
    dropped. When ``anchor`` occurs among the directory segments, only
    the ones after its last occurrence are kept.

    Example:
        "src/assets/sound/beep.mp3" -> ["sound", "beep"]

    Args:
        path_with_root: File path including the scanned root prefix
        anchor: Directory name that relocates the tree root, or None

    Returns:
        List of non-empty segments, file key last
    """
    parts = [p for p in normalize_separators(path_with_root).split("/") if p and p != "."]
    if not parts:
        return []

    file_key, _ = split_file_name(parts.pop())

    # Only directories can anchor; a file named after the anchor stays put
    if anchor and anchor in parts:
        last = len(parts) - 1 - parts[::-1].index(anchor)
        parts = parts[last + 1 :]

    return [*parts, file_key]
