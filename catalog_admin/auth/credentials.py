"""
Credential Verifier

Checks an email/password pair against the stored Admin records.
"""

import logging
from collections import namedtuple

from werkzeug.security import check_password_hash

from catalog_admin.auth.identity import AdminIdentity
from catalog_admin.services.catalog import find_admin_by_email

logger = logging.getLogger(__name__)

# Shown for both unknown accounts and wrong passwords so the login form
# does not reveal which emails exist.
GENERIC_LOGIN_ERROR = 'Invalid email or password.'
MISSING_INPUT_ERROR = 'Please enter your email and password.'


class AuthenticationError(Exception):
    """Base class for login failures."""
    user_message = GENERIC_LOGIN_ERROR


class MissingInput(AuthenticationError):
    user_message = MISSING_INPUT_ERROR


class AccountNotFound(AuthenticationError):
    pass


class InvalidCredentials(AuthenticationError):
    pass


def verify_credentials(email, password):
    """Return the AdminIdentity for a matching email/password pair.

    Raises:
        MissingInput: either field is empty.
        AccountNotFound: no admin has this email (exact match).
        InvalidCredentials: the password does not match the stored hash.
    """
    email = (email or '').strip()
    if not email or not password:
        raise MissingInput('email and password are required')

    admin = find_admin_by_email(email)
    if admin is None:
        raise AccountNotFound(email)

    if not check_password_hash(admin.password_hash, password):
        raise InvalidCredentials(email)

    return AdminIdentity.from_model(admin)


LoginResult = namedtuple('LoginResult', ['ok', 'admin', 'redirect_to', 'error'])


def attempt_login(email, password, redirect_to):
    """Run the credential check and describe the outcome as a value.

    The route turns a successful result into a redirect carrying a fresh
    session cookie, and a failed one into a 400 with the form re-rendered.
    """
    try:
        admin = verify_credentials(email, password)
    except AuthenticationError as e:
        logger.info('Admin login failed for %r: %s', (email or '').strip(), type(e).__name__)
        return LoginResult(ok=False, admin=None, redirect_to=None, error=e.user_message)

    logger.info('Admin %s logged in', admin.email)
    return LoginResult(ok=True, admin=admin, redirect_to=redirect_to, error=None)
