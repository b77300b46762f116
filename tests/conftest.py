import pytest

from salon_booking import create_app
from salon_booking.config import TestingConfig
from salon_booking.seed import seed_defaults
from salon_booking.storage.memory import MemoryStorage

ADMIN_PASSWORD = 'admin123'


@pytest.fixture
def app():
    app = create_app(TestingConfig, ADMIN_PASSWORD=ADMIN_PASSWORD)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_storage(app):
    return app.extensions['storage']


@pytest.fixture
def admin_token(client):
    response = client.post('/api/auth/login', json={'username': 'admin', 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.get_json()['token']


@pytest.fixture
def admin_headers(admin_token):
    return {'Authorization': f'Bearer {admin_token}'}


@pytest.fixture
def storage():
    """Seeded in-memory storage, usable without an application"""
    storage = MemoryStorage()
    seed_defaults(storage, admin_username='admin', admin_password=ADMIN_PASSWORD)
    return storage


def booking_payload(email='ana@example.com', name='Ana Silva', service_id=3,
                    date='2025-06-10T14:30', **extra):
    payload = {
        'serviceId': service_id,
        'date': date,
        'client': {'name': name, 'email': email, 'phone': '912345678'},
    }
    payload.update(extra)
    return payload
