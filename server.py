import logging

from price_catalog.settings import settings
from price_catalog.web import create_app

app = create_app()
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    port = settings.PORT
    logger.info(f"[OK] Price catalog online at http://localhost:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)
