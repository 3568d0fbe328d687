"""
Products Blueprint

Catalog CRUD for signed-in admins.
"""

from flask import Blueprint

products_bp = Blueprint('products', __name__)

from catalog_admin.products import routes  # noqa: E402, F401
