"""
Pydantic v2 models for parsed source documents and runtime configuration.
"""
from pathlib import Path
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ParsedDocument(BaseModel):
    """Shape of one parsed source file: a flat list or named buckets."""
    kind: Literal["list", "buckets"] = "list"
    items: List[Any] = Field(default_factory=list)
    buckets: Dict[str, List[Any]] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ParsedDocument":
        return cls(kind="list", items=[])


class CatalogConfig(BaseModel):
    """Configuration snapshot taken once at startup."""
    model_config = ConfigDict(frozen=True)

    price_dir: Path
    tax_rate: float = Field(default=0.115, ge=0.0)
    search_limit: int = Field(default=1000, ge=1)
    static_dir: Path
