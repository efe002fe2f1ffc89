import os
import tempfile
from pathlib import Path

# Configuração de teste precisa existir antes de importar a aplicação (engine e settings são criados no import)
DB_FILE = Path(tempfile.gettempdir()) / f'storefront_test_{os.getpid()}.db'

os.environ.update({
    'DATABASE_URL': f'sqlite+aiosqlite:///{DB_FILE}',
    'DB_AUTO_CREATE': 'true',
    'DB_RESET_ON_STARTUP': 'true',
    'SEED_SAMPLE_DATA': 'false',
    'SESSION_BACKEND': 'memory',
    'DEPLOYMENT_ENVIRONMENT': 'development',
    'LOG_LEVEL': 'DEBUG',
    'CART_SCOPE': 'global',
    'RECOVERY_DELIVERY_STRICT': 'false',
    'EMAIL_SERVER_SMTP_HOST': '',
    'SMS_GATEWAY_URL': '',
    'ROOT_AUTH_EMAIL': 'admin@flabef.com',
    'ROOT_AUTH_PASSWORD': 'admin123',
    'ROOT_AUTH_DOCUMENT_NUMBER': '87654321',
    'VERCEL': '1',
})

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from storefront_app.infrastructure.cache.session_store import memory_session_store  # noqa: E402
from storefront_app.interfaces.api.app import create_application  # noqa: E402

ROOT_EMAIL = 'admin@flabef.com'
ROOT_PASSWORD = 'admin123'


@pytest.fixture
def app():
    memory_session_store.clear()
    application = create_application()
    yield application
    application.dependency_overrides.clear()
    memory_session_store.clear()


@pytest.fixture
def client(app):
    # O lifespan recria as tabelas e o super_admin a cada teste
    with TestClient(app) as test_client:
        yield test_client


def login(client, email=ROOT_EMAIL, password=ROOT_PASSWORD):
    response = client.post('/api/login', json={'email': email, 'password': password})
    assert response.status_code == 200, response.text
    return response


@pytest.fixture
def admin_client(client):
    login(client)
    return client


@pytest.fixture
def create_admin(admin_client):
    def _create(**overrides):
        payload = {
            'email': 'editor@flabef.com',
            'password': 'secret123',
            'role': 'editor',
            'fullName': 'Editor',
            'documentType': 'DNI',
            'documentNumber': '11112222',
        }
        payload.update(overrides)
        response = admin_client.post('/api/admins', json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def login_as(client):
    def _login(email=ROOT_EMAIL, password=ROOT_PASSWORD):
        return login(client, email, password)

    return _login
