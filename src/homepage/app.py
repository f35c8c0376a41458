"""Flask preview server for the generated homepage."""
import logging
from typing import Optional

from flask import Flask, Response, jsonify

from .config import Config
from .page import build_page

logger = logging.getLogger(__name__)

def create_app(config: Optional[Config] = None) -> Flask:
    """Create the preview app.

    The bibliography is re-read on every request to '/', so edits to the
    .bib file show up on reload.
    """
    config = (config or Config()).validate()
    app = Flask(__name__, static_folder=config.get_static_folder(), static_url_path="/static")
    app.config["HOMEPAGE"] = config

    @app.route("/")
    def index():
        return Response(build_page(config), mimetype="text/html")

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    logger.info(f"Preview app created for site root {config.SITE_ROOT}")
    return app
