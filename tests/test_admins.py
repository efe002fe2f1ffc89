from http import HTTPStatus

import pytest


def test_list_admins_includes_root(admin_client):
    response = admin_client.get('/api/admins')

    assert response.status_code == HTTPStatus.OK
    admins = response.json()
    assert [admin['email'] for admin in admins] == ['admin@flabef.com']
    assert 'password' not in admins[0]
    assert 'passwordHash' not in admins[0]


def test_create_admin(admin_client, create_admin):
    created = create_admin(recoveryEmail='Editor.Backup@flabef.com')

    assert created['email'] == 'editor@flabef.com'
    assert created['role'] == 'editor'
    assert created['documentType'] == 'DNI'
    assert created['recoveryEmail'] == 'editor.backup@flabef.com'
    assert created['isActive'] is True
    assert created['createdById'] == admin_client.get('/api/auth/user').json()['id']


def test_create_admin_defaults(admin_client):
    response = admin_client.post(
        '/api/admins',
        json={'email': 'new@flabef.com', 'password': 'secret123', 'fullName': 'New One'},
    )

    assert response.status_code == HTTPStatus.CREATED
    assert response.json()['role'] == 'viewer'
    assert response.json()['documentType'] == 'DNI'


def test_duplicate_email_conflict(admin_client, create_admin):
    create_admin()

    response = admin_client.post(
        '/api/admins',
        json={'email': 'EDITOR@flabef.com', 'password': 'secret123', 'fullName': 'Dup'},
    )

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.json() == {'error': 'Email already registered'}


def test_duplicate_document_conflict(admin_client, create_admin):
    create_admin()

    response = admin_client.post(
        '/api/admins',
        json={'email': 'other@flabef.com', 'password': 'secret123', 'fullName': 'Dup', 'documentNumber': '11112222'},
    )

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.json() == {'error': 'Document number already registered'}


@pytest.mark.parametrize(
    'overrides',
    [
        {'role': 'owner'},
        {'documentType': 'XYZ'},
        {'password': '123'},
        {'email': 'not-an-email'},
    ],
)
def test_create_admin_invalid_payload(admin_client, overrides):
    payload = {'email': 'x@flabef.com', 'password': 'secret123', 'fullName': 'X', **overrides}

    response = admin_client.post('/api/admins', json=payload)

    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_dni_must_have_8_characters(admin_client):
    response = admin_client.post(
        '/api/admins',
        json={'email': 'x@flabef.com', 'password': 'secret123', 'fullName': 'X', 'documentNumber': '123'},
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'error': 'DNI must be exactly 8 characters'}


def test_passport_has_free_length(admin_client):
    response = admin_client.post(
        '/api/admins',
        json={
            'email': 'x@flabef.com',
            'password': 'secret123',
            'fullName': 'X',
            'documentType': 'passport',
            'documentNumber': 'AB123',
        },
    )

    assert response.status_code == HTTPStatus.CREATED
    assert response.json()['documentType'] == 'PASSPORT'


def test_partial_update(admin_client, create_admin):
    created = create_admin()

    response = admin_client.put(f"/api/admins/{created['id']}", json={'fullName': 'Renamed'})

    assert response.status_code == HTTPStatus.OK
    data = response.json()
    assert data['fullName'] == 'Renamed'
    assert data['email'] == created['email']
    assert data['role'] == created['role']
    assert data['documentNumber'] == created['documentNumber']


def test_update_password_is_hashed(admin_client, create_admin, login_as):
    created = create_admin()

    response = admin_client.put(f"/api/admins/{created['id']}", json={'password': 'brand-new'})
    assert response.status_code == HTTPStatus.OK

    login_as('editor@flabef.com', 'brand-new')


def test_update_empty_payload(admin_client, create_admin):
    created = create_admin()

    response = admin_client.put(f"/api/admins/{created['id']}", json={})

    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_update_to_existing_email_conflict(admin_client, create_admin):
    created = create_admin()

    response = admin_client.put(f"/api/admins/{created['id']}", json={'email': 'admin@flabef.com'})

    assert response.status_code == HTTPStatus.CONFLICT


def test_update_unknown_admin(admin_client):
    response = admin_client.put('/api/admins/9999', json={'fullName': 'Ghost'})

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'error': 'Admin not found'}


def test_delete_admin(admin_client, create_admin):
    created = create_admin()

    response = admin_client.delete(f"/api/admins/{created['id']}")
    assert response.status_code == HTTPStatus.NO_CONTENT

    response = admin_client.delete(f"/api/admins/{created['id']}")
    assert response.status_code == HTTPStatus.NOT_FOUND


def test_cannot_delete_self(admin_client):
    me = admin_client.get('/api/auth/user').json()

    response = admin_client.delete(f"/api/admins/{me['id']}")

    assert response.status_code == HTTPStatus.FORBIDDEN
    assert response.json() == {'error': 'You cannot delete your own account'}


def test_admin_management_requires_super_admin(admin_client, create_admin, login_as):
    create_admin()
    login_as('editor@flabef.com', 'secret123')

    assert admin_client.get('/api/admins').status_code == HTTPStatus.FORBIDDEN
    assert admin_client.post('/api/admins', json={}).status_code in (HTTPStatus.FORBIDDEN, HTTPStatus.BAD_REQUEST)


def test_admin_management_requires_session(client):
    assert client.get('/api/admins').status_code == HTTPStatus.UNAUTHORIZED


def test_password_whitespace_is_kept(admin_client, create_admin, login_as):
    create_admin(password=' secret123 ')

    response = admin_client.post('/api/login', json={'email': 'editor@flabef.com', 'password': 'secret123'})
    assert response.status_code == HTTPStatus.UNAUTHORIZED

    login_as('editor@flabef.com', ' secret123 ')
