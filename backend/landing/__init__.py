import logging

from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .application.landing.store import SqlPageConfigStore
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers


def create_app(config_name: str = "development", store=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger(__name__).setLevel(level)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # Tables must be known to the metadata before migrations run
    from .models import tenant, system_branding, account_branding, landing_page  # noqa: F401

    # -------------------------------------------------
    # Page configuration store
    # -------------------------------------------------
    app.extensions["landing_store"] = store or SqlPageConfigStore()

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    return app
