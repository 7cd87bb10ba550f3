import pytest

from app import create_app
from config import TestingConfig
from models import db
from seed import seed_all


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        seed_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post('/login', data={'email': 'user@nextmail.com', 'password': '123456'})
    assert response.status_code == 302
    return client
