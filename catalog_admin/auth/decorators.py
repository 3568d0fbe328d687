"""
Route Guard

Every protected view is decorated individually; there is no global filter.
"""

from functools import wraps

from flask import redirect, request, url_for
from flask_login import current_user

from catalog_admin.auth.identity import AdminIdentity


def get_admin():
    """Return the signed-in AdminIdentity, or None."""
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return None


def login_redirect():
    """Redirect to the login page, remembering where the admin was headed."""
    return redirect(url_for('auth.login', redirectTo=request.path))


def require_admin():
    """Return the signed-in admin, or a redirect response to the login page."""
    admin = get_admin()
    if admin is None:
        return login_redirect()
    return admin


def admin_required(f):
    """Decorator to ensure the request carries a valid admin session.

    Unauthenticated requests are redirected to /login?redirectTo=<path>
    before the view body runs.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        result = require_admin()
        if not isinstance(result, AdminIdentity):
            return result
        return f(*args, **kwargs)
    return wrapper


def is_safe_redirect(target):
    """Only local absolute paths are accepted as post-login targets.

    The logout path is refused too: it only answers POST, and the browser
    follows the post-login redirect with a GET.
    """
    if not target or not target.startswith('/') or target.startswith('//') or '\\' in target:
        return False
    path = target.split('?', 1)[0].split('#', 1)[0]
    return path.rstrip('/') != url_for('auth.logout')
