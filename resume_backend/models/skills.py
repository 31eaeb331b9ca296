"""Skill list input parsing.

The upload form sends ``skills`` either as a JSON array (the current UI) or
as a comma-separated string (older clients).  The raw text is resolved into
one of two tagged inputs and then normalized by a single function, so the
fallback order lives in exactly one place:

1. the text parses as a JSON array of strings -> ``RawJsonArray``
2. anything else -> ``RawCsv`` (split on commas)
"""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class RawCsv:
    """Comma-separated skill list, e.g. ``"Java,SQL"``."""
    text: str


@dataclass(frozen=True)
class RawJsonArray:
    """JSON-encoded array of skills, e.g. ``'["Java","SQL"]'``."""
    text: str


RawSkills = RawCsv | RawJsonArray


def parse_raw_skills(text: str | None) -> RawSkills:
    """Tag the raw form value as a JSON array when it is one, else as CSV."""
    text = text or ""
    try:
        decoded = json.loads(text)
    except ValueError:
        return RawCsv(text)
    if isinstance(decoded, list) and all(isinstance(item, str) for item in decoded):
        return RawJsonArray(text)
    return RawCsv(text)


def normalize_skills(raw: RawSkills) -> list[str]:
    """Return the trimmed, non-empty skills in input order.

    Duplicates are kept.
    """
    if isinstance(raw, RawJsonArray):
        items = json.loads(raw.text)
    else:
        items = raw.text.split(",")
    return [item.strip() for item in items if item.strip()]
