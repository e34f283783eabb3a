"""Metadata inference for asset files.

This module maps a file path to its extension, MIME type and coarse
asset type. Nothing is read from disk; only the path is inspected.
"""

import mimetypes
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Optional

from .types import AssetMeta, AssetType

DEFAULT_MIME = "application/octet-stream"

# Major MIME components that map directly onto an asset type
KNOWN_MAJOR_TYPES = frozenset({"image", "audio", "video", "font", "application", "text"})

# Fallback table for common web asset extensions
COMMON_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        # Images
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".webp": "image/webp",
        ".svg": "image/svg+xml",
        ".ico": "image/x-icon",
        ".bmp": "image/bmp",
        # Audio
        ".mp3": "audio/mpeg",
        ".wav": "audio/wav",
        ".ogg": "audio/ogg",
        ".m4a": "audio/mp4",
        ".flac": "audio/flac",
        # Video
        ".mp4": "video/mp4",
        ".webm": "video/webm",
        ".ogv": "video/ogg",
        ".mov": "video/quicktime",
        ".avi": "video/x-msvideo",
        # Fonts
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".ttf": "font/ttf",
        ".otf": "font/otf",
        ".eot": "application/vnd.ms-fontobject",
        # Text and code
        ".json": "application/json",
        ".txt": "text/plain",
        ".xml": "application/xml",
        ".html": "text/html",
        ".css": "text/css",
        ".js": "application/javascript",
        ".ts": "application/typescript",
    }
)

MimeLookup = Callable[[str], Optional[str]]

# Compressed files are described by their encoding, not their content
ENCODING_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "gzip": "application/gzip",
        "bzip2": "application/x-bzip2",
        "xz": "application/x-xz",
        "br": "application/x-brotli",
        "compress": "application/x-compress",
    }
)

# Python's built-in table only; host files such as /etc/mime.types are not read
MIME_REGISTRY = mimetypes.MimeTypes(filenames=())


def lookup_mime(path: str, registry: mimetypes.MimeTypes = MIME_REGISTRY) -> Optional[str]:
    """Resolve a MIME type from the file name.

    Example:
        "beep.mp3" -> "audio/mpeg", "backup.tar.gz" -> "application/gzip"

    Args:
        path: File path or name
        registry: MIME registry to consult

    Returns:
        MIME string, or None if the registry doesn't know the extension
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    mime_type, encoding = registry.guess_type(name, strict=False)
    if encoding is not None:
        return ENCODING_MIME_TYPES.get(encoding)
    return mime_type


def extension_of(path: str) -> str:
    """Extract the lowercased, dot-prefixed extension of a path.

    A name starting with a dot and containing no other dot
    (e.g. ``.gitignore``) has no extension.

    Args:
        path: File path (either separator style)

    Returns:
        Extension such as ".png", or "" if there is none
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot:].lower()


def classify_mime(mime: str) -> AssetType:
    """Derive the coarse asset type from a MIME string.

    Example:
        "audio/mpeg" -> "audio", "model/gltf+json" -> "other"
    """
    major = mime.split("/", 1)[0].strip().lower()
    if major in KNOWN_MAJOR_TYPES:
        return major  # type: ignore[return-value]
    return "other"


def infer_meta(
    path: str,
    mime_lookup: Optional[MimeLookup] = lookup_mime,
    table: Mapping[str, str] = COMMON_MIME_TYPES,
) -> AssetMeta:
    """Build the metadata record for a file path.

    The MIME type comes from ``mime_lookup`` first, then from ``table``,
    and finally falls back to application/octet-stream. Pass
    ``mime_lookup=None`` to resolve from the table alone.

    Args:
        path: File path; kept verbatim as the record's ``path``
        mime_lookup: Optional MIME resolver for the full path
        table: Extension to MIME mapping used as fallback

    Returns:
        AssetMeta for the path
    """
    ext = extension_of(path)

    mime_type = mime_lookup(path) if mime_lookup is not None else None
    if not mime_type:
        mime_type = table.get(ext) or DEFAULT_MIME

    return AssetMeta(
        type=classify_mime(mime_type),
        ext=ext,
        mime=mime_type,
        path=path,
    )
