"""Canonical JSON serialization — single dump path for CLI output.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - Compact single-line output in CI mode
"""

from __future__ import annotations

import json
from typing import Any, Mapping


def stable_json_dumps(
    obj: Mapping[str, Any], *, ci_mode: bool = False, indent: int | None = 2
) -> str:
    s = json.dumps(
        obj,
        indent=None if ci_mode else indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return s + "\n"
