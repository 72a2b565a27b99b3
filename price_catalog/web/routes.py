import logging
from pathlib import Path

from flask import Blueprint, abort, current_app, request, send_from_directory

from ..catalog import build_catalog, get_category, list_categories, search
from ..errors import UnknownCategoryError
from ..models import CatalogConfig

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)
static_site = Blueprint("static_site", __name__)


def _config() -> CatalogConfig:
    return current_app.config["CATALOG"]


def _load_db():
    """Fresh catalog for this request."""
    cfg = _config()
    return build_catalog(cfg.price_dir, cfg.tax_rate)


# --- errors ---

@api.errorhandler(UnknownCategoryError)
def unknown_category(e: UnknownCategoryError):
    logger.info("Unknown category requested: %r", e.category)
    return {"ok": False, "error": "Unknown category"}, 400


@api.errorhandler(Exception)
def internal_error(e: Exception):
    logger.exception("API handler failed: %s", e)
    return {"ok": False, "error": "Internal Server Error"}, 500


# --- routes ---

@api.get("/health")
def health():
    return {"ok": True}, 200


@api.get("/api/categories")
def categories():
    db = _load_db()
    return {"ok": True, "categories": list_categories(db)}, 200


@api.get("/api/items")
def items():
    category = str(request.args.get("category", "")).strip()
    db = _load_db()
    return {"ok": True, "items": get_category(db, category)}, 200


@api.get("/api/search")
def search_items():
    q = str(request.args.get("q", "")).lower().strip()
    if not q:
        return {"ok": True, "items": []}, 200
    db = _load_db()
    return {"ok": True, "items": search(db, q, limit=_config().search_limit)}, 200


# --- static fallback ---

@static_site.get("/", defaults={"path": ""})
@static_site.get("/<path:path>")
def static_fallback(path: str):
    """Serve a file from STATIC_DIR, or index.html for any other path."""
    root = Path(_config().static_dir)
    if path and (root / path).is_file():
        return send_from_directory(root, path)
    if (root / "index.html").is_file():
        return send_from_directory(root, "index.html")
    abort(404)
