"""
Naming and text helpers for category files and records.
"""
import json
import re
from typing import Any, Optional

_JSON_SUFFIX = re.compile(r"\.json$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def is_json_file(name: str) -> bool:
    """Check if a file name ends in .json (any case)."""
    return bool(_JSON_SUFFIX.search(name))


def category_base(file_name: str) -> str:
    """Strip a trailing .json extension: 'Bebidas.JSON' -> 'Bebidas'."""
    return _JSON_SUFFIX.sub("", file_name)


def bucket_category(base: str, bucket_key: str) -> str:
    """
    Category name for a bucket inside an object-shaped file.
    'lacteos' + 'Quesos  Duros' -> 'lacteos_quesos_duros'
    """
    return _WHITESPACE.sub("_", f"{base}_{bucket_key}".lower())


def record_id(category: str, index: int) -> str:
    return f"{category}:{index}"


def fuse_text(record: Any) -> Optional[str]:
    """
    Flatten a record into lowercase JSON text for substring search.
    Returns None if the record cannot be serialized.
    """
    try:
        return json.dumps(record, ensure_ascii=False, separators=(",", ":")).lower()
    except (TypeError, ValueError):
        return None
