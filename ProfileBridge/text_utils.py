from __future__ import annotations

import re
from typing import Any, List, Tuple

from unidecode import unidecode

from .config import ORCID_ID_PREFIXES
from .exceptions import DECODE_ERRORS, NUMERIC_ERRORS, PARSE_ERRORS


__all__ = [
    "safe_get_nested",
    "safe_get_list",
    "safe_get_str",
    "parse_leading_int",
    "join_name",
    "split_name",
    "strip_accents",
    "fold_text",
    "clean_orcid_id",
]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def safe_get_nested(obj: Any, *keys: str, default=None) -> Any:
    """
    Safely get a nested dictionary value with null-safety, traversing multiple keys
    and returning a default if any key is missing.
    """
    current = obj
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current if current is not None else default


def safe_get_list(obj: Any, *keys: str) -> List[Any]:
    """
    Get a nested list, returning an empty list when the path is missing or the
    value found there is not a list.
    """
    value = safe_get_nested(obj, *keys)
    return value if isinstance(value, list) else []


def safe_get_str(obj: Any, *keys: str) -> str:
    """
    Get a nested scalar as a string. Missing values, nested objects, and empty
    strings all resolve to "".
    """
    value = safe_get_nested(obj, *keys)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def parse_leading_int(value: Any, default: int = 0) -> int:
    """
    Parse the integer at the start of a value the way ORCID date parts are
    read: "2023" and "2023-05" give 2023, anything without leading digits
    gives the default.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if value is None:
        return default
    m = _LEADING_INT_RE.match(str(value))
    if not m:
        return default
    try:
        return int(m.group(1))
    except NUMERIC_ERRORS:
        return default


def join_name(given: str, family: str) -> str:
    """
    Join given and family names with a single space, trimming the result.
    """
    return f"{given or ''} {family or ''}".strip()


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a display name on single spaces: the first token is the given name
    and the remaining tokens, rejoined with spaces, are the family name.

    A single-token name has an empty family name. Multi-part given names
    ("Ana Maria Silva") end up partly in the family name; callers that need
    a better split should edit the record by hand.
    """
    given, *family_parts = (name or "").split(" ")
    return given, " ".join(family_parts)


def strip_accents(s: str) -> str:
    """
    Remove accents and diacritics from a string so text typed without them
    still matches.

    Uses unidecode library for comprehensive Unicode to ASCII transliteration.
    """
    try:
        return unidecode(s)
    except PARSE_ERRORS + DECODE_ERRORS:
        return s


def fold_text(s: Any) -> str:
    """
    Normalize text for case- and accent-insensitive substring matching.
    """
    if not s:
        return ""
    return strip_accents(str(s)).lower()


def clean_orcid_id(orcid_id: str) -> str:
    """
    Reduce an ORCID iD given as a bare id or as an orcid.org URL to the bare
    "0000-0000-0000-0000" form used in request paths.
    """
    value = (orcid_id or "").strip()
    for prefix in ORCID_ID_PREFIXES:
        if value.startswith(prefix):
            value = value[len(prefix):]
            break
    return value.strip("/")
