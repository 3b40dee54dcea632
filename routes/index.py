# routes/index.py
import os

from flask import Blueprint

index_bp = Blueprint("index", __name__)

SERVICE_VERSION = "1.0.0"


def get_environment():
    """
    Deployment label for the banner. APP_ENV wins; NODE_ENV is still honoured
    so older deployment manifests keep reporting the right environment.
    """
    return os.environ.get("APP_ENV") or os.environ.get("NODE_ENV") or "development"


@index_bp.route("/", methods=["GET"])
def index():
    body = f"Customer Service - Version: {SERVICE_VERSION} - Environment: {get_environment()}"
    return body, 200, {"Content-Type": "text/plain; charset=utf-8"}
