from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional

GGE4_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# "... (204) ..." : numeric code embedded in a plain-text gateway error
EMBEDDED_CODE_RE = re.compile(r"\((\d+)\)")


def gge4_timestamp(now: Optional[datetime] = None) -> str:
    """UTC time in the ISO-8601 form expected by the X-GGe4-Date header."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(GGE4_DATE_FORMAT)


def extract_embedded_code(text: str) -> Optional[int]:
    match = EMBEDDED_CODE_RE.search(text or "")
    return int(match.group(1)) if match else None


def find_value(tree: Any, key: str) -> Any:
    """Depth-first search of ``key`` in a decoded JSON tree.

    Entries are visited in insertion order; a nested object is searched
    completely before its next sibling. The first exact match wins whatever
    its value (0, "" and False included). Returns None when the key does not
    appear anywhere.
    """
    if not isinstance(tree, (dict, list)):
        return None

    # one iterator per open container; a child is pushed before its siblings
    stack = [_entries(tree)]
    while stack:
        for k, value in stack[-1]:
            if k == key:
                return value
            if isinstance(value, (dict, list)):
                stack.append(_entries(value))
                break
        else:
            stack.pop()
    return None


def _entries(node):
    return iter(node.items() if isinstance(node, dict) else enumerate(node))


def as_int(value: Any) -> Optional[int]:
    """Coerce a response value ("100", 100, true) to int, None if impossible."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def as_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
