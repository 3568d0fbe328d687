"""
Auth Blueprint

Admin login and logout. The admin session is a signed, encrypted cookie
issued by the SessionManager; nothing about it is stored server-side.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from catalog_admin.auth import routes  # noqa: E402, F401
