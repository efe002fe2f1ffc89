from http import HTTPStatus

from fastapi.testclient import TestClient

from storefront_app.interfaces.api.dependencies import get_product_service


def _broken_service():
    raise RuntimeError('database password is hunter2')


def test_unhandled_error_hides_details(app):
    app.dependency_overrides[get_product_service] = _broken_service

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/api/products')

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.json() == {'error': 'Internal server error'}
    assert 'hunter2' not in response.text


def test_unknown_route_keeps_plain_detail(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'error': 'Not Found'}


def test_invalid_json_body(client):
    response = client.post(
        '/api/contact',
        content='{not json',
        headers={'Content-Type': 'application/json'},
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()['error'] == 'Invalid request data'
