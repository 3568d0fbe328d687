"""
Configuration settings for the Catalog Admin back-office
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _split_secrets(raw):
    return [s.strip() for s in raw.split(',') if s.strip()]


def _is_production():
    env = os.environ.get('APP_ENV') or os.environ.get('FLASK_ENV') or ''
    return env.lower() == 'production'


class Config:
    """Flask application configuration"""

    # Flask secret key (flash messages only; the admin session has its own secrets)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'catalog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin session cookie. The first secret signs new tokens, all of them
    # are accepted when reading, so secrets can be rotated.
    SESSION_SECRETS = _split_secrets(
        os.environ.get('SESSION_SECRETS')
        or os.environ.get('SESSION_SECRET')
        or 'default-secret-change-in-production'
    )
    ADMIN_SESSION_COOKIE_NAME = '__admin_session'
    SESSION_LIFETIME = timedelta(days=7)
    PRODUCTION = _is_production()
    SESSION_COOKIE_SECURE = PRODUCTION

    # Password hashing, fixed at setup time
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:600000'

    # Cloudinary image host
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET')
    UPLOAD_FOLDER_NAME = 'products'

    # Reject request bodies larger than 10 MB
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Number of products shown on the dashboard
    RECENT_PRODUCTS_LIMIT = 5


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_SECRETS = ['test-secret-primary', 'test-secret-previous']
    SESSION_COOKIE_SECURE = False
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    LOG_LEVEL = 'DEBUG'
