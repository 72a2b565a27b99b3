"""Read-only price catalog built from a directory of JSON files."""
from .catalog import build_catalog, get_category, list_categories, search
from .pricing import with_tax

__all__ = ["build_catalog", "get_category", "list_categories", "search", "with_tax"]
