import logging
from typing import Optional

from flask import Flask
from dotenv import load_dotenv

from ..models import CatalogConfig
from ..settings import settings


def create_app(config: Optional[CatalogConfig] = None) -> Flask:
    # load env vars
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    if config is None:
        config = settings.snapshot()

    app = Flask(__name__, static_folder=None)
    app.config["CATALOG"] = config
    # keep record fields in source order
    app.json.sort_keys = False

    from . import routes
    app.register_blueprint(routes.api)
    app.register_blueprint(routes.static_site)

    app.logger.info(
        "Catalog dir=%s tax_rate=%s static=%s",
        config.price_dir, config.tax_rate, config.static_dir,
    )
    return app
