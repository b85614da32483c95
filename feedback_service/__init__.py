from flask import Flask
from feedback_service.extensions import db, migrate, cors
from feedback_service.routes import register_routes
from feedback_service import models  # noqa: F401  registers tables for create_all/migrate

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", "*"),
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "OPTIONS"])

    register_routes(app)

    return app
