import asyncio
from http import HTTPStatus

from jwt import decode
from sqlalchemy import select

from storefront_app.config import get_settings
from storefront_app.infrastructure.db.base import SessionLocal
from storefront_app.infrastructure.db.models import AdminUserModel


def _stored_password_hash(email):
    async def _fetch():
        async with SessionLocal() as session:
            result = await session.execute(select(AdminUserModel.password_hash).where(AdminUserModel.email == email))
            return result.scalar_one()

    return asyncio.run(_fetch())


def test_login_sets_session_cookie(client):
    response = client.post('/api/login', json={'email': 'admin@flabef.com', 'password': 'admin123'})

    assert response.status_code == HTTPStatus.OK
    data = response.json()
    assert data['message'] == 'Login successful'
    assert data['user']['email'] == 'admin@flabef.com'
    assert data['user']['role'] == 'super_admin'
    assert data['user']['fullName'] == 'Super Admin'

    settings = get_settings()
    token = response.cookies.get(settings.SESSION_COOKIE_NAME)
    assert token

    # valida o conteúdo do token assinado
    claims = decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.SECRET_ALGORITHM])
    assert claims['typ'] == 'session'
    assert 'sid' in claims
    assert 'exp' in claims
    assert 'role' not in claims


def test_login_email_is_case_insensitive(client):
    response = client.post('/api/login', json={'email': '  ADMIN@flabef.com ', 'password': 'admin123'})

    assert response.status_code == HTTPStatus.OK


def test_login_wrong_password(client):
    response = client.post('/api/login', json={'email': 'admin@flabef.com', 'password': 'wrong-pass'})

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'error': 'Invalid credentials'}


def test_login_unknown_email_same_message(client):
    response = client.post('/api/login', json={'email': 'nobody@flabef.com', 'password': 'admin123'})

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'error': 'Invalid credentials'}


def test_login_error_translated(client):
    response = client.post(
        '/api/login',
        json={'email': 'admin@flabef.com', 'password': 'wrong-pass'},
        headers={'Accept-Language': 'es-PE,es;q=0.9'},
    )

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'error': 'Credenciales inválidas'}


def test_login_missing_fields_is_400(client):
    response = client.post('/api/login', json={'email': 'admin@flabef.com'})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    data = response.json()
    assert data['error'] == 'Invalid request data'
    assert any(item['field'] == 'password' for item in data['details'])


def test_password_is_stored_hashed(client):
    stored = _stored_password_hash('admin@flabef.com')

    assert stored != 'admin123'
    assert stored.startswith('$argon2')


def test_current_user_requires_session(client):
    response = client.get('/api/auth/user')

    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'error': 'Unauthorized'}


def test_current_user_with_session(admin_client):
    response = admin_client.get('/api/auth/user')

    assert response.status_code == HTTPStatus.OK
    data = response.json()
    assert data['email'] == 'admin@flabef.com'
    assert data['role'] == 'super_admin'
    assert set(data) == {'id', 'email', 'role', 'fullName'}


def test_tampered_cookie_is_rejected(client):
    client.cookies.set(get_settings().SESSION_COOKIE_NAME, 'not-a-valid-token')

    response = client.get('/api/auth/user')

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_logout_destroys_session(admin_client):
    token = admin_client.cookies.get(get_settings().SESSION_COOKIE_NAME)

    response = admin_client.post('/api/logout')
    assert response.status_code == HTTPStatus.OK
    assert response.json() == {'message': 'Logged out'}

    # mesmo reenviando o cookie antigo, a sessão não existe mais
    admin_client.cookies.set(get_settings().SESSION_COOKIE_NAME, token)
    response = admin_client.get('/api/auth/user')
    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_logout_without_session(client):
    response = client.post('/api/logout')

    assert response.status_code == HTTPStatus.OK


def test_inactive_admin_cannot_login(admin_client, create_admin):
    created = create_admin(email='old@flabef.com', documentNumber='33334444')
    response = admin_client.put(f"/api/admins/{created['id']}", json={'isActive': False})
    assert response.status_code == HTTPStatus.OK

    response = admin_client.post('/api/login', json={'email': 'old@flabef.com', 'password': 'secret123'})
    assert response.status_code == HTTPStatus.UNAUTHORIZED


# -------------------------------------------------------------------------
# Sessões acompanham o estado atual da conta
# -------------------------------------------------------------------------
PRODUCT = {
    'name': 'Mochila Deportiva Negra',
    'description': 'Mochila resistente',
    'price': '89.99',
    'category': 'mochilas',
    'image': 'https://example.com/mochila.jpg',
}


def _session_token(client):
    return client.cookies.get(get_settings().SESSION_COOKIE_NAME)


def _use_session(client, token):
    client.cookies.clear()
    client.cookies.set(get_settings().SESSION_COOKIE_NAME, token)


def _editor_and_root_tokens(client, login_as):
    root_token = _session_token(client)
    login_as('editor@flabef.com', 'secret123')
    editor_token = _session_token(client)
    _use_session(client, root_token)
    return editor_token


def test_deactivated_admin_loses_open_session(admin_client, create_admin, login_as):
    created = create_admin()
    editor_token = _editor_and_root_tokens(admin_client, login_as)

    response = admin_client.put(f"/api/admins/{created['id']}", json={'isActive': False})
    assert response.status_code == HTTPStatus.OK

    _use_session(admin_client, editor_token)
    assert admin_client.post('/api/products', json=PRODUCT).status_code == HTTPStatus.UNAUTHORIZED
    assert admin_client.get('/api/auth/user').status_code == HTTPStatus.UNAUTHORIZED


def test_deleted_admin_loses_open_session(admin_client, create_admin, login_as):
    created = create_admin()
    editor_token = _editor_and_root_tokens(admin_client, login_as)

    assert admin_client.delete(f"/api/admins/{created['id']}").status_code == HTTPStatus.NO_CONTENT

    _use_session(admin_client, editor_token)
    response = admin_client.get('/api/auth/user')
    assert response.status_code == HTTPStatus.UNAUTHORIZED
    assert response.json() == {'error': 'Unauthorized'}


def test_role_change_applies_to_open_session(admin_client, create_admin, login_as):
    created = create_admin()
    editor_token = _editor_and_root_tokens(admin_client, login_as)

    response = admin_client.put(f"/api/admins/{created['id']}", json={'role': 'viewer'})
    assert response.status_code == HTTPStatus.OK

    _use_session(admin_client, editor_token)
    assert admin_client.get('/api/auth/user').json()['role'] == 'viewer'
    assert admin_client.post('/api/products', json=PRODUCT).status_code == HTTPStatus.FORBIDDEN
