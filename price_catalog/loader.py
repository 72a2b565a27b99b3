"""
Reading and normalizing one category file.

A source file may hold:
- a list of records                      -> one category named after the file
- an object with list values (buckets)   -> one category per bucket
- an object without list values          -> its values become the record list
Anything else, or a file that cannot be read, is an empty list.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .models import ParsedDocument
from .pricing import with_tax
from .utils import bucket_category, category_base, record_id

logger = logging.getLogger(__name__)

RESERVED_KEYS = ("_id", "_category", "price_with_tax")


def _reject_constant(name: str):
    """NaN and Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def detect_shape(parsed: Any) -> ParsedDocument:
    """Classify a parsed JSON value as a flat list or a set of named buckets."""
    if isinstance(parsed, list):
        return ParsedDocument(kind="list", items=parsed)

    if isinstance(parsed, dict):
        buckets = {k: v for k, v in parsed.items() if isinstance(v, list)}
        if buckets:
            return ParsedDocument(kind="buckets", buckets=buckets)
        return ParsedDocument(kind="list", items=list(parsed.values()))

    return ParsedDocument.empty()


def read_flexible(path: Union[str, Path]) -> ParsedDocument:
    """Read one JSON file and detect its shape. Never raises on bad input."""
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError) as e:
        logger.error(f"Reading JSON failed: {path}: {e}")
        return ParsedDocument.empty()
    return detect_shape(data)


def enrich(item: Any, category: str, index: int, tax_rate: float) -> Dict[str, Any]:
    """
    Copy a raw record and add _id, _category and price_with_tax.
    Source keys with the same names are overwritten.
    Non-object items keep no fields of their own.
    """
    if isinstance(item, dict):
        record = dict(item)
        collisions = [k for k in RESERVED_KEYS if k in record]
        if collisions:
            logger.debug(f"[{category}:{index}] Overwriting reserved keys: {collisions}")
        price = record.get("price")
    else:
        # scalars and lists have no fields to copy
        record = {}
        price = None

    record["_id"] = record_id(category, index)
    record["_category"] = category
    record["price_with_tax"] = with_tax(price, tax_rate)
    return record


def enrich_rows(rows: List[Any], category: str, tax_rate: float) -> List[Dict[str, Any]]:
    return [enrich(item, category, idx, tax_rate) for idx, item in enumerate(rows)]


def load_file(path: Union[str, Path], tax_rate: float) -> Dict[str, List[Dict[str, Any]]]:
    """Load one source file into {category: [enriched records]}."""
    path = Path(path)
    base = category_base(path.name)
    doc = read_flexible(path)

    if doc.kind == "buckets":
        categories = {}
        for bucket, rows in doc.buckets.items():
            cat = bucket_category(base, bucket)
            if cat in categories:
                logger.warning(f"Category '{cat}' from bucket '{bucket}' in {path.name} replaces an earlier one")
            categories[cat] = enrich_rows(rows, cat, tax_rate)
        return categories

    return {base: enrich_rows(doc.items, base, tax_rate)}
