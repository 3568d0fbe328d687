"""
Catalog Admin - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask

from catalog_admin.config import Config
from catalog_admin.extensions import db, login_manager


def create_app(config_class=Config, image_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        image_store: blob store replacing Cloudinary (used by tests)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from catalog_admin.logging_config import configure_logging
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    from catalog_admin.auth.session import init_session
    from catalog_admin.services.uploads import init_uploads
    init_session(app)
    init_uploads(app, store=image_store)

    # Register blueprints
    from catalog_admin.auth import auth_bp
    from catalog_admin.dashboard import dashboard_bp
    from catalog_admin.products import products_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(products_bp)

    from catalog_admin.errors import register_error_handlers
    from catalog_admin.cli import register_commands
    register_error_handlers(app)
    register_commands(app)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app
