from http import HTTPStatus

import pytest

PRODUCT = {
    'name': 'Camiseta Premium Negra',
    'description': 'Camiseta 100% algodón',
    'price': '29.99',
    'category': 'camisetas',
    'image': 'https://example.com/camiseta.jpg',
    'featured': True,
}

FOOD_ITEM = {
    'name': 'Ceviche Mixto',
    'description': 'Pescado, camarón y calamar',
    'price': '35.00',
    'category': 'almuerzos',
    'image': 'https://example.com/ceviche.jpg',
}

IT_SERVICE = {
    'title': 'Soporte Técnico 24/7',
    'description': 'Asistencia técnica a cualquier hora',
    'features': ['Soporte remoto', 'Ticket de seguimiento'],
    'icon': 'Headphones',
}


def test_public_list_is_empty_without_seed(client):
    for path in ('/api/products', '/api/it-services', '/api/food-items'):
        response = client.get(path)
        assert response.status_code == HTTPStatus.OK
        assert response.json() == []


def test_create_product(admin_client):
    response = admin_client.post('/api/products', json=PRODUCT)

    assert response.status_code == HTTPStatus.CREATED
    data = response.json()
    assert data['id']
    assert data['name'] == PRODUCT['name']
    assert data['price'] == '29.99'
    assert data['featured'] is True
    assert data['inStock'] is True


def test_get_product(admin_client):
    created = admin_client.post('/api/products', json=PRODUCT).json()

    response = admin_client.get(f"/api/products/{created['id']}")

    assert response.status_code == HTTPStatus.OK
    assert response.json() == created


def test_get_unknown_product(client):
    response = client.get('/api/products/does-not-exist')

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'error': 'Product not found'}


def test_filter_products_by_category(admin_client):
    admin_client.post('/api/products', json=PRODUCT)
    admin_client.post('/api/products', json={**PRODUCT, 'name': 'Laptop', 'category': 'laptops'})

    laptops = admin_client.get('/api/products', params={'category': 'laptops'}).json()
    everything = admin_client.get('/api/products', params={'category': 'all'}).json()

    assert [item['name'] for item in laptops] == ['Laptop']
    assert len(everything) == 2


def test_partial_update_keeps_other_fields(admin_client):
    created = admin_client.post('/api/products', json=PRODUCT).json()

    response = admin_client.put(f"/api/products/{created['id']}", json={'price': '19.90'})

    assert response.status_code == HTTPStatus.OK
    data = response.json()
    assert data['price'] == '19.90'
    assert data['name'] == PRODUCT['name']
    assert data['category'] == PRODUCT['category']
    assert data['featured'] is True


def test_null_fields_do_not_overwrite(admin_client):
    created = admin_client.post('/api/products', json=PRODUCT).json()

    response = admin_client.put(f"/api/products/{created['id']}", json={'name': None, 'inStock': False})

    assert response.status_code == HTTPStatus.OK
    assert response.json()['name'] == PRODUCT['name']
    assert response.json()['inStock'] is False


def test_empty_update_is_rejected(admin_client):
    created = admin_client.post('/api/products', json=PRODUCT).json()

    response = admin_client.put(f"/api/products/{created['id']}", json={})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'error': 'At least one field must be provided for update'}


def test_update_unknown_product(admin_client):
    response = admin_client.put('/api/products/missing', json={'name': 'x'})

    assert response.status_code == HTTPStatus.NOT_FOUND


def test_delete_product(admin_client):
    created = admin_client.post('/api/products', json=PRODUCT).json()

    response = admin_client.delete(f"/api/products/{created['id']}")
    assert response.status_code == HTTPStatus.NO_CONTENT

    response = admin_client.get(f"/api/products/{created['id']}")
    assert response.status_code == HTTPStatus.NOT_FOUND

    response = admin_client.delete(f"/api/products/{created['id']}")
    assert response.status_code == HTTPStatus.NOT_FOUND


@pytest.mark.parametrize(
    'payload',
    [
        {**PRODUCT, 'price': '-1'},
        {**PRODUCT, 'price': '10.999'},
        {**PRODUCT, 'name': ''},
        {key: value for key, value in PRODUCT.items() if key != 'image'},
        {**PRODUCT, 'unknownField': 1},
    ],
)
def test_invalid_product_payload(admin_client, payload):
    response = admin_client.post('/api/products', json=payload)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()['error'] == 'Invalid request data'


def test_write_requires_session(client):
    response = client.post('/api/products', json=PRODUCT)

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_viewer_cannot_write(admin_client, create_admin, login_as):
    create_admin(email='viewer@flabef.com', role='viewer', documentNumber='55556666')
    login_as('viewer@flabef.com', 'secret123')

    response = admin_client.post('/api/products', json=PRODUCT)

    assert response.status_code == HTTPStatus.FORBIDDEN
    assert response.json() == {'error': 'Forbidden'}


def test_editor_can_write(admin_client, create_admin, login_as):
    create_admin()
    login_as('editor@flabef.com', 'secret123')

    response = admin_client.post('/api/food-items', json=FOOD_ITEM)

    assert response.status_code == HTTPStatus.CREATED


def test_food_items_crud(admin_client):
    created = admin_client.post('/api/food-items', json=FOOD_ITEM).json()
    assert created['available'] is True

    desayunos = admin_client.get('/api/food-items', params={'category': 'desayunos'}).json()
    assert desayunos == []

    response = admin_client.put(f"/api/food-items/{created['id']}", json={'available': False})
    assert response.json()['available'] is False
    assert response.json()['price'] == '35.00'

    assert admin_client.delete(f"/api/food-items/{created['id']}").status_code == HTTPStatus.NO_CONTENT
    assert admin_client.get('/api/food-items').json() == []


def test_it_services_crud(admin_client):
    created = admin_client.post('/api/it-services', json=IT_SERVICE).json()
    assert created['features'] == IT_SERVICE['features']
    assert created['available'] is True

    response = admin_client.put(f"/api/it-services/{created['id']}", json={'features': ['Respuesta inmediata']})
    assert response.status_code == HTTPStatus.OK
    assert response.json()['features'] == ['Respuesta inmediata']
    assert response.json()['title'] == IT_SERVICE['title']

    response = admin_client.get('/api/it-services/unknown')
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {'error': 'Service not found'}
