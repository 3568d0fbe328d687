"""
Dashboard Services

Catalog totals for the dashboard.
"""

from catalog_admin.services import catalog


def get_dashboard_stats(recent_limit=5):
    """Totals plus the most recently created products."""
    return {
        'total_products': catalog.count_products(),
        'total_admins': catalog.count_admins(),
        'total_images': catalog.count_images(),
    }, catalog.list_products(limit=recent_limit)
