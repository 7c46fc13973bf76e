"""Decoding of ``application/x-www-form-urlencoded`` bodies and query strings.

Repeated keys are folded into a single comma-joined value, which is how
checkbox groups such as ``foodId`` reach the handlers. Values that contain
commas themselves therefore do not survive a repeated key.
"""

from __future__ import annotations

import re
from urllib.parse import unquote_plus

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode(component: str) -> str:
    if _MALFORMED_ESCAPE.search(component):
        return component
    try:
        return unquote_plus(component, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return component


def parse_form(raw: str | None) -> dict[str, str]:
    result: dict[str, str] = {}
    if not raw:
        return result

    for pair in raw.split("&"):
        if not pair:
            continue
        raw_key, separator, raw_value = pair.partition("=")
        key = _decode(raw_key)
        value = _decode(raw_value) if separator else ""
        if key in result:
            result[key] = f"{result[key]},{value}"
        else:
            result[key] = value
    return result


def split_values(value: str | None) -> list[str]:
    if not value:
        return []
    return [part for part in (piece.strip() for piece in value.split(",")) if part]
