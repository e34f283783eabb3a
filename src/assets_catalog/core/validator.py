"""JSON Schema validation for asset metadata trees.

This module loads the bundled JSON Schema and validates metadata trees
before they are rendered into code.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .tree import to_plain
from .types import Branch

# Path to the schema file (shipped next to this module)
SCHEMA_PATH = Path(__file__).parent / "schemas" / "asset_tree.schema.json"


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_tree(tree: Branch) -> None:
    """Validate a metadata tree against the JSON Schema.

    Args:
        tree: The metadata tree to validate

    Raises:
        ValidationError: If the tree doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=to_plain(tree), schema=schema)


def validate_tree_with_error_details(tree: Branch) -> tuple[bool, str | None]:
    """Validate a metadata tree and return detailed error information.

    Args:
        tree: The metadata tree to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_tree(tree)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        error_msg = f"Validation error at {error_path}: {e.message}"

        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"

        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
