"""
Auth Routes

Admin login and logout.
"""

from flask import render_template, request, redirect, url_for, flash

from catalog_admin.auth import auth_bp
from catalog_admin.auth.credentials import attempt_login
from catalog_admin.auth.decorators import admin_required, get_admin, is_safe_redirect
from catalog_admin.auth.session import get_session_manager


def _redirect_target():
    target = request.values.get('redirectTo', '').strip()
    if is_safe_redirect(target):
        return target
    return url_for('products.list_products')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page"""
    redirect_to = _redirect_target()

    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')

        result = attempt_login(email, password, redirect_to)
        if not result.ok:
            return render_template('auth/login.html',
                                   error=result.error,
                                   email=email.strip(),
                                   redirect_to=redirect_to), 400

        manager = get_session_manager()
        response = redirect(result.redirect_to)
        manager.set_cookie(response, manager.issue(result.admin))
        return response

    if get_admin() is not None:
        return redirect(redirect_to)

    return render_template('auth/login.html', error=None, email='', redirect_to=redirect_to)


@auth_bp.route('/logout', methods=['POST'])
@admin_required
def logout():
    """Clear the admin session cookie."""
    response = redirect(url_for('auth.login'))
    get_session_manager().destroy(response)
    flash('You have been logged out successfully.', 'info')
    return response
