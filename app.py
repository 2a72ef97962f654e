from __future__ import annotations
import os
from flask import Flask
from config import config_map, database_uri
from extensions import db, migrate

def register_blueprints(app: Flask) -> None:
    from blueprints.core import bp as core_bp
    from blueprints.bookings import bp as bookings_bp
    from blueprints.verify import bp as verify_bp

    # core без префикса → '/health' в корне
    app.register_blueprint(core_bp)
    app.register_blueprint(bookings_bp, url_prefix="/api")
    app.register_blueprint(verify_bp, url_prefix="/api")

def create_app(config_name: str | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    cfg_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config_map[cfg_name])
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = database_uri()
    # без явной настройки хранилища не стартуем
    if not app.config["SQLALCHEMY_DATABASE_URI"]:
        raise RuntimeError(
            "Store is not configured: set DATABASE_URL or DB_HOST, DB_USER, DB_PASSWORD and DB_NAME"
        )
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    db.init_app(app)
    migrate.init_app(app, db)
    register_blueprints(app)
    return app
