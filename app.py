# app.py
import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from werkzeug.serving import make_server

load_dotenv()

DEFAULT_PORT = 3000


def create_app():
    app = Flask(__name__)
    app.logger.setLevel(logging.INFO)

    # Health checks and the banner are read-only, so any origin may call them
    CORS(app, resources={r"/*": {"origins": "*"}})

    # Import blueprints AFTER app is created to avoid circular import issues
    from routes.health import health_bp
    from routes.index import index_bp

    app.register_blueprint(index_bp)
    app.register_blueprint(health_bp)

    return app


app = create_app()


def get_port():
    """
    Listen port from PORT, or DEFAULT_PORT when unset, empty or unusable.
    """
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError:
        app.logger.warning("PORT=%r is not a number, using %s", raw, DEFAULT_PORT)
        return DEFAULT_PORT

    if not 0 < port < 65536:
        app.logger.warning("PORT=%s is out of range, using %s", port, DEFAULT_PORT)
        return DEFAULT_PORT

    return port


def main():
    server = make_server("0.0.0.0", get_port(), app)
    app.logger.info("Customer service listening on port %s", server.port)
    server.serve_forever()


if __name__ == "__main__":
    main()
