"""
Flask Extensions

The admin session is a self-contained encrypted cookie; Flask-Login only
resolves it into `current_user` for each request.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager, fed by the admin session cookie (see catalog_admin.auth.session)
login_manager = LoginManager()
