from decimal import Decimal
from types import SimpleNamespace

import pytest
from werkzeug.security import generate_password_hash

from catalog_admin import create_app
from catalog_admin.config import TestConfig
from catalog_admin.extensions import db
from catalog_admin.models import Admin
from catalog_admin.services import catalog


class FakeImageStore:
    """In-memory stand-in for Cloudinary."""

    def __init__(self):
        self.uploads = []
        self.deleted = []
        self.fail_uploads = False
        self.fail_deletes = set()
        self._next_id = 0

    def upload(self, data, folder):
        if self.fail_uploads:
            raise ConnectionError('blob store unreachable')
        self._next_id += 1
        public_id = f'{folder}/img{self._next_id}'
        self.uploads.append((data, folder))
        return {
            'secure_url': f'https://res.example.com/image/upload/{public_id}.jpg',
            'public_id': public_id,
        }

    def delete(self, public_id):
        self.deleted.append(public_id)
        if public_id in self.fail_deletes:
            raise ConnectionError('blob store unreachable')


@pytest.fixture()
def image_store():
    return FakeImageStore()


@pytest.fixture()
def app(image_store):
    app = create_app(TestConfig, image_store=image_store)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    with app.app_context():
        a = Admin(email='a@a.com', name='Catalog Admin',
                  password_hash=generate_password_hash('test123', method=app.config['PASSWORD_HASH_METHOD']))
        db.session.add(a)
        db.session.commit()
        return SimpleNamespace(id=a.id, email='a@a.com', name='Catalog Admin', password='test123')


@pytest.fixture()
def logged_in(client, admin):
    r = client.post('/login', data={'email': admin.email, 'password': admin.password})
    assert r.status_code == 302
    return client


@pytest.fixture()
def make_product(app, admin):
    def _make(name='Widget', price='19.99', description=None, images=0):
        with app.app_context():
            product = catalog.create_product(name, description, Decimal(price), admin_id=admin.id)
            for i in range(images):
                catalog.add_image(product, f'https://res.example.com/seed{i}.jpg', f'products/seed-{product.id}-{i}')
            return product.id
    return _make
