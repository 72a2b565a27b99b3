"""
Environment-driven configuration for the price catalog service.
"""
import math
import os
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import CatalogConfig

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_TAX_RATE = "0.115"
DEFAULT_SEARCH_LIMIT = "1000"


class Settings:
    """Configuration loaded from environment variables."""

    @classmethod
    def _get_price_dir(cls) -> Path:
        raw = os.getenv("PRICE_DIR", "").strip()
        if raw:
            return Path(raw)
        return Path(os.getcwd()) / "categorias_precios"

    @classmethod
    def _get_tax_rate(cls) -> float:
        raw = os.getenv("TAX_RATE", DEFAULT_TAX_RATE).strip() or DEFAULT_TAX_RATE
        try:
            return float(raw)
        except ValueError:
            raise ConfigError(f"TAX_RATE must be a number, got {raw!r}")

    @classmethod
    def _get_search_limit(cls) -> int:
        raw = os.getenv("SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT).strip() or DEFAULT_SEARCH_LIMIT
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"SEARCH_LIMIT must be an integer, got {raw!r}")

    @classmethod
    def _get_static_dir(cls) -> Path:
        raw = os.getenv("STATIC_DIR", "").strip()
        return Path(raw) if raw else PROJECT_ROOT / "public"

    @classmethod
    def _get_port(cls) -> int:
        return int(os.getenv("PORT", "10000"))

    # Properties that read from environment each time
    @property
    def PRICE_DIR(self) -> Path:
        return self._get_price_dir()

    @property
    def TAX_RATE(self) -> float:
        return self._get_tax_rate()

    @property
    def SEARCH_LIMIT(self) -> int:
        return self._get_search_limit()

    @property
    def STATIC_DIR(self) -> Path:
        return self._get_static_dir()

    @property
    def PORT(self) -> int:
        return self._get_port()

    def validate(self) -> None:
        """Validate settings before the service starts."""
        tax_rate = self.TAX_RATE
        if not math.isfinite(tax_rate) or tax_rate < 0:
            raise ConfigError(f"TAX_RATE must be a non-negative finite fraction, got {tax_rate}")
        if self.SEARCH_LIMIT < 1:
            raise ConfigError(f"SEARCH_LIMIT must be at least 1, got {self.SEARCH_LIMIT}")

    def snapshot(self) -> CatalogConfig:
        """
        Freeze the current environment into a CatalogConfig.

        Called once by the app factory; request handlers only ever see the
        snapshot, so TAX_RATE cannot change for the lifetime of the process.
        """
        self.validate()
        try:
            return CatalogConfig(
                price_dir=self.PRICE_DIR,
                tax_rate=self.TAX_RATE,
                search_limit=self.SEARCH_LIMIT,
                static_dir=self.STATIC_DIR,
            )
        except ValidationError as e:
            raise ConfigError(str(e)) from e


settings = Settings()
