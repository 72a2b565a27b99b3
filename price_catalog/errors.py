"""
Custom errors for the price catalog.
Raised by the configuration layer and by category access; the web layer
turns them into structured JSON responses.
"""


class CatalogError(Exception):
    """Generic catalog error."""
    pass


class ConfigError(CatalogError):
    """Invalid environment configuration (e.g. negative TAX_RATE)."""
    pass


class UnknownCategoryError(CatalogError):
    """Requested category is empty or not present in the current catalog."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unknown category: {category!r}")
