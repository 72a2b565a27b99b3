"""
Catalog building and querying.

build_catalog() reads every category file on each call and returns a fresh
map; there is no process-wide cache. The cost is one directory scan plus a
full JSON parse per request, which is acceptable for a catalog that rarely
changes on disk.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import UnknownCategoryError
from .loader import load_file
from .utils import fuse_text, is_json_file

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 1000

CategoryMap = Dict[str, List[Dict[str, Any]]]


def list_source_files(dir_path: Union[str, Path]) -> List[Path]:
    """Return the .json files in dir_path sorted by name."""
    directory = Path(dir_path)
    if not directory.is_dir():
        return []
    files = [p for p in directory.iterdir() if p.is_file() and is_json_file(p.name)]
    return sorted(files, key=lambda p: p.name)


def build_catalog(dir_path: Union[str, Path], tax_rate: float) -> CategoryMap:
    """
    Build {category: [records]} from all category files in dir_path.

    Files are processed in name order. When two files (or buckets) produce
    the same category name, the later one replaces the earlier one.
    A missing directory gives an empty catalog.
    """
    db: CategoryMap = {}
    files = list_source_files(dir_path)
    if not files:
        logger.info(f"No category files found in {dir_path}")
        return db

    for path in files:
        for category, records in load_file(path, tax_rate).items():
            if category in db:
                logger.warning(f"Category '{category}' from {path.name} replaces an earlier one")
            db[category] = records

    logger.info(f"Loaded {len(db)} categories from {len(files)} files in {dir_path}")
    return db


def list_categories(db: CategoryMap) -> List[str]:
    return list(db.keys())


def get_category(db: CategoryMap, name: str) -> List[Dict[str, Any]]:
    """Return the records of one category; raise UnknownCategoryError if absent."""
    category = (name or "").strip()
    if not category or category not in db:
        raise UnknownCategoryError(category)
    return db[category]


def search(db: CategoryMap, query: str, limit: int = MAX_SEARCH_RESULTS) -> List[Dict[str, Any]]:
    """
    Case-insensitive substring search over the JSON text of every record.

    Results follow category order, then record order, and stop at `limit`.
    Records that cannot be serialized are skipped.
    """
    q = (query or "").lower().strip()
    if not q:
        return []

    results: List[Dict[str, Any]] = []
    for category, records in db.items():
        for record in records:
            text = fuse_text(record)
            if text is None:
                logger.debug(f"Skipping unserializable record in '{category}'")
                continue
            if q in text:
                results.append(record)
                if len(results) >= limit:
                    return results
    return results
