"""
Admin Session Manager

The session is a self-contained cookie: the admin projection is encrypted
and authenticated with Fernet under a server-held secret. Nothing is stored
server-side, so a token stays valid until its expiry even across restarts.
"""

import base64
import hashlib
import json
import logging
import time
from datetime import timedelta

from cryptography.fernet import Fernet, InvalidToken, MultiFernet
from flask import current_app

from catalog_admin.auth.identity import AdminIdentity
from catalog_admin.extensions import login_manager

logger = logging.getLogger(__name__)


def _derive_key(secret):
    """Stretch an arbitrary secret string into a Fernet key."""
    digest = hashlib.sha256(secret.encode('utf-8')).digest()
    return base64.urlsafe_b64encode(digest)


class SessionManager:
    """Issues, reads and destroys admin session tokens.

    Args:
        secrets: list of secrets. The first one encrypts new tokens; every
            one of them is accepted when reading, which allows rotation.
        lifetime: absolute token lifetime, counted from issuance.
        cookie_name: name of the cookie carrying the token.
        secure: only send the cookie over HTTPS.
    """

    def __init__(self, secrets, lifetime=timedelta(days=7),
                 cookie_name='__admin_session', secure=False):
        if not secrets:
            raise ValueError('at least one session secret is required')
        self._fernet = MultiFernet([Fernet(_derive_key(s)) for s in secrets])
        self.lifetime = lifetime
        self.cookie_name = cookie_name
        self.secure = secure

    @classmethod
    def from_config(cls, config):
        return cls(
            secrets=config['SESSION_SECRETS'],
            lifetime=config['SESSION_LIFETIME'],
            cookie_name=config['ADMIN_SESSION_COOKIE_NAME'],
            secure=config['SESSION_COOKIE_SECURE'],
        )

    @property
    def max_age(self):
        return int(self.lifetime.total_seconds())

    def issue(self, admin, now=None):
        """Return a token carrying `admin` (an AdminIdentity)."""
        if now is None:
            now = int(time.time())
        payload = json.dumps({'admin': admin.to_dict()}).encode('utf-8')
        return self._fernet.encrypt_at_time(payload, int(now)).decode('ascii')

    def read(self, token, now=None):
        """Return the AdminIdentity in `token`, or None.

        Missing, expired, tampered and malformed tokens all read as
        "no session".
        """
        if not token:
            return None
        if now is None:
            now = int(time.time())
        try:
            payload = self._fernet.decrypt_at_time(token.encode('ascii'), self.max_age, int(now))
            return AdminIdentity.from_dict(json.loads(payload)['admin'])
        except InvalidToken:
            logger.debug('Rejected expired or tampered admin session token')
            return None
        except (UnicodeError, ValueError, KeyError, TypeError):
            logger.debug('Rejected malformed admin session token')
            return None

    def set_cookie(self, response, token):
        response.set_cookie(
            self.cookie_name,
            token,
            max_age=self.max_age,
            path='/',
            secure=self.secure,
            httponly=True,
            samesite='Lax',
        )
        return response

    def destroy(self, response):
        """Expire the session cookie on the client.

        There is no revocation list: a copy of the token taken before
        logout keeps working until it expires.
        """
        response.delete_cookie(
            self.cookie_name,
            path='/',
            secure=self.secure,
            httponly=True,
            samesite='Lax',
        )
        return response


def get_session_manager():
    return current_app.extensions['admin_session']


def init_session(app):
    """Attach a SessionManager to `app` and let Flask-Login read from it."""
    app.extensions['admin_session'] = SessionManager.from_config(app.config)

    # The cookie is the whole session; keep Flask-Login off the Flask session.
    login_manager.session_protection = None

    @login_manager.request_loader
    def load_admin_from_cookie(req):
        manager = get_session_manager()
        return manager.read(req.cookies.get(manager.cookie_name))

