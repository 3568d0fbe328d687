"""
Dashboard Routes
"""

from flask import current_app, redirect, render_template, url_for

from catalog_admin.auth.decorators import get_admin
from catalog_admin.dashboard import dashboard_bp
from catalog_admin.dashboard.services import get_dashboard_stats


@dashboard_bp.route('/')
def index():
    """Catalog overview; sends anonymous visitors to the login page."""
    admin = get_admin()
    if admin is None:
        return redirect(url_for('auth.login'))

    stats, recent_products = get_dashboard_stats(current_app.config['RECENT_PRODUCTS_LIMIT'])
    return render_template('dashboard/index.html',
                           admin=admin,
                           stats=stats,
                           recent_products=recent_products)
