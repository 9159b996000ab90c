"""Load and validate JSON instances against bundled schemas.

Usage::

    from divcheck.contracts.load import validate_instance

    validate_instance(result_dict, "division_result.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename.

    Raises ``FileNotFoundError`` for an unknown schema name.
    """
    path = resources.files("divcheck") / SCHEMA_DIR / name
    if not path.is_file():
        raise FileNotFoundError(f"unknown schema: {name}")
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)
