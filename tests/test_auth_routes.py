from urllib.parse import parse_qs, urlparse

from werkzeug.security import generate_password_hash

from catalog_admin import create_app
from catalog_admin.config import TestConfig
from catalog_admin.extensions import db
from catalog_admin.models import Admin

COOKIE = '__admin_session'


def _location(r):
    return urlparse(r.headers['Location'])


def test_unauthenticated_redirects_to_login_with_target(client):
    r = client.get('/products')
    assert r.status_code in (301, 302)
    location = _location(r)
    assert location.path == '/login'
    assert parse_qs(location.query)['redirectTo'] == ['/products']

    r = client.get('/products/3/edit')
    assert parse_qs(_location(r).query)['redirectTo'] == ['/products/3/edit']


def test_dashboard_redirects_to_plain_login(client):
    r = client.get('/')
    assert r.status_code in (301, 302)
    assert _location(r).path == '/login'
    assert _location(r).query == ''


def test_login_page_renders(client):
    r = client.get('/login?redirectTo=/products/new')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'name="redirectTo" value="/products/new"' in body


def test_login_success_sets_session_cookie(client, admin):
    r = client.post('/login', data={'email': 'a@a.com', 'password': 'test123'})
    assert r.status_code == 302
    assert _location(r).path == '/products'

    cookie_header = r.headers['Set-Cookie']
    assert cookie_header.startswith(f'{COOKIE}=')
    assert 'HttpOnly' in cookie_header
    assert 'SameSite=Lax' in cookie_header
    assert 'Max-Age=604800' in cookie_header
    assert 'Path=/' in cookie_header
    assert 'Secure' not in cookie_header

    r = client.get('/products')
    assert r.status_code == 200


def test_login_follows_redirect_to(client, admin):
    r = client.post('/login', data={'email': 'a@a.com', 'password': 'test123', 'redirectTo': '/products/new'})
    assert r.status_code == 302
    assert _location(r).path == '/products/new'


def test_login_ignores_external_redirect_to(client, admin):
    for target in ('https://evil.example.com/', '//evil.example.com', 'products'):
        r = client.post('/login', data={'email': 'a@a.com', 'password': 'test123', 'redirectTo': target})
        assert r.status_code == 302
        assert _location(r).path == '/products'
        assert _location(r).netloc in ('', 'localhost')


def test_login_never_redirects_to_logout(client, admin):
    for target in ('/logout', '/logout/', '/logout?next=/products'):
        r = client.post('/login', data={'email': 'a@a.com', 'password': 'test123', 'redirectTo': target})
        assert r.status_code == 302
        assert _location(r).path == '/products'

    r = client.post('/login', data={'email': 'a@a.com', 'password': 'test123', 'redirectTo': '/logout'},
                    follow_redirects=True)
    assert r.status_code == 200
    assert r.request.path == '/products'


def test_wrong_password_gets_generic_message(client, admin):
    r = client.post('/login', data={'email': 'a@a.com', 'password': 'wrong'})
    assert r.status_code == 400
    body = r.get_data(as_text=True)
    assert 'Invalid email or password.' in body
    assert 'value="a@a.com"' in body
    assert client.get_cookie(COOKIE) is None


def test_unknown_email_gets_same_message(client, admin):
    r = client.post('/login', data={'email': 'ghost@a.com', 'password': 'test123'})
    assert r.status_code == 400
    body = r.get_data(as_text=True)
    assert 'Invalid email or password.' in body
    assert 'not found' not in body.lower()


def test_missing_fields(client, admin):
    r = client.post('/login', data={'email': '', 'password': ''})
    assert r.status_code == 400
    assert 'Please enter your email and password.' in r.get_data(as_text=True)


def test_logged_in_admin_skips_login_page(logged_in):
    r = logged_in.get('/login')
    assert r.status_code == 302
    assert _location(r).path == '/products'


def test_logout_clears_session(logged_in):
    assert logged_in.get_cookie(COOKIE) is not None

    r = logged_in.post('/logout')
    assert r.status_code == 302
    assert _location(r).path == '/login'
    assert logged_in.get_cookie(COOKIE) is None

    r = logged_in.get('/products')
    assert r.status_code in (301, 302)
    assert _location(r).path == '/login'


def test_logout_requires_session(client):
    r = client.post('/logout')
    assert r.status_code in (301, 302)
    assert _location(r).path == '/login'


def test_tampered_cookie_is_unauthenticated(client, admin):
    client.set_cookie(COOKIE, 'gAAAAAB-forged-token')
    r = client.get('/products')
    assert r.status_code in (301, 302)


def test_session_survives_restart(client, admin, image_store):
    client.post('/login', data={'email': 'a@a.com', 'password': 'test123'})
    token = client.get_cookie(COOKIE).value

    # a fresh app with the same secrets accepts the token
    other = create_app(TestConfig, image_store=image_store).test_client()
    other.set_cookie(COOKIE, token)
    r = other.get('/products')
    assert r.status_code == 200


def test_production_cookie_is_secure(image_store):
    class ProductionConfig(TestConfig):
        PRODUCTION = True
        SESSION_COOKIE_SECURE = True

    app = create_app(ProductionConfig, image_store=image_store)
    with app.app_context():
        db.session.add(Admin(email='a@a.com', password_hash=generate_password_hash('test123', method='pbkdf2:sha256:1000')))
        db.session.commit()

    r = app.test_client().post('/login', data={'email': 'a@a.com', 'password': 'test123'})
    assert r.status_code == 302
    assert 'Secure' in r.headers['Set-Cookie']


def test_flash_cookie_is_separate_from_admin_session(app, logged_in, make_product):
    assert app.config['SESSION_COOKIE_NAME'] != COOKIE
    token = logged_in.get_cookie(COOKIE).value

    product_id = make_product()
    r = logged_in.post(f'/products/{product_id}/edit', data={'name': 'Renamed', 'price': '2'})
    assert r.status_code == 302
    assert logged_in.get_cookie(app.config['SESSION_COOKIE_NAME']) is not None
    assert logged_in.get_cookie(COOKIE).value == token
