from http import HTTPStatus

import pytest

from storefront_app.application.catalog.use_cases import parse_quantity
from storefront_app.config import get_settings
from storefront_app.config.constants import CART_QUANTITY_MAX
from storefront_app.shared.errors import ValidationError

ITEM = {
    'productId': 'p-1',
    'productName': 'Camiseta Premium Negra',
    'productPrice': '29.99',
    'image': 'https://example.com/camiseta.jpg',
}


def test_cart_starts_empty(client):
    response = client.get('/api/cart')

    assert response.status_code == HTTPStatus.OK
    assert response.json() == []


def test_add_item_defaults_quantity(client):
    response = client.post('/api/cart', json=ITEM)

    assert response.status_code == HTTPStatus.CREATED
    data = response.json()
    assert data['quantity'] == 1
    assert data['productPrice'] == '29.99'
    assert client.get('/api/cart').json() == [data]


def test_same_product_creates_separate_lines(client):
    client.post('/api/cart', json=ITEM)
    client.post('/api/cart', json={**ITEM, 'quantity': 2})

    items = client.get('/api/cart').json()

    assert len(items) == 2
    assert sorted(item['quantity'] for item in items) == [1, 2]


def test_update_quantity(client):
    item = client.post('/api/cart', json=ITEM).json()

    response = client.patch(f"/api/cart/{item['id']}", json={'quantity': 3})

    assert response.status_code == HTTPStatus.OK
    assert response.json()['quantity'] == 3
    assert client.get(f"/api/cart/{item['id']}").json()['quantity'] == 3


@pytest.mark.parametrize(
    'body',
    [
        {'quantity': 0},
        {'quantity': -2},
        {'quantity': 1.5},
        {'quantity': '2'},
        {'quantity': True},
        {'quantity': CART_QUANTITY_MAX + 1},
        {'quantity': 10**20},
        {'quantity': 1e20},
        {},
        [3],
    ],
)
def test_invalid_quantity_leaves_item_unchanged(client, body):
    item = client.post('/api/cart', json={**ITEM, 'quantity': 2}).json()

    response = client.patch(f"/api/cart/{item['id']}", json=body)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'error': 'Invalid quantity'}
    assert client.get(f"/api/cart/{item['id']}").json()['quantity'] == 2


def test_update_unknown_item(client):
    response = client.patch('/api/cart/missing', json={'quantity': 1})

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'error': 'Cart item not found'}


def test_remove_item(client):
    item = client.post('/api/cart', json=ITEM).json()

    assert client.delete(f"/api/cart/{item['id']}").status_code == HTTPStatus.NO_CONTENT
    assert client.get('/api/cart').json() == []
    assert client.delete(f"/api/cart/{item['id']}").status_code == HTTPStatus.NOT_FOUND


def test_clear_cart(client):
    client.post('/api/cart', json=ITEM)
    client.post('/api/cart', json=ITEM)

    response = client.delete('/api/cart')

    assert response.status_code == HTTPStatus.NO_CONTENT
    assert client.get('/api/cart').json() == []


@pytest.mark.parametrize('quantity', [0, CART_QUANTITY_MAX + 1, 10**20])
def test_invalid_item_payload(client, quantity):
    response = client.post('/api/cart', json={**ITEM, 'quantity': quantity})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert client.get('/api/cart').json() == []


def test_session_scoped_carts_are_isolated(app, client, monkeypatch):
    monkeypatch.setattr(get_settings(), 'CART_SCOPE', 'session')
    cookie_name = get_settings().CART_COOKIE_NAME

    client.post('/api/cart', json=ITEM)
    assert client.cookies.get(cookie_name)
    assert len(client.get('/api/cart').json()) == 1

    # outro navegador (sem o cookie) vê um carrinho vazio
    client.cookies.clear()
    assert client.get('/api/cart').json() == []


@pytest.mark.parametrize('raw, expected', [(1, 1), (7, 7), (2.0, 2), (CART_QUANTITY_MAX, CART_QUANTITY_MAX)])
def test_parse_quantity_accepts_positive_integers(raw, expected):
    assert parse_quantity(raw) == expected


@pytest.mark.parametrize('raw', [0, -1, 1.5, '3', None, False, True, CART_QUANTITY_MAX + 1, 1e20])
def test_parse_quantity_rejects(raw):
    with pytest.raises(ValidationError):
        parse_quantity(raw)
