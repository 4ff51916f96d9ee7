# tests/conftest.py

import pytest

from app import create_app
from app.config import TestConfig
from db.extensions import db


class FakeRedis:
    """In-memory stand-in for the few redis commands the OTP service uses."""

    def __init__(self):
        self.store = {}
        self.expiries = {}

    def setex(self, key, seconds, value):
        self.store[key] = value
        self.expiries[key] = seconds

    def get(self, key):
        return self.store.get(key)

    def delete(self, key):
        self.store.pop(key, None)

    def ping(self):
        return True


VALID_PAYLOAD = {
    'aadhaar': '123456789012',
    'nameAsPerAadhaar': 'Ravi Kumar',
    'typeOfOrganisation': '1',
    'pan': 'ABCDE1234F',
    'mobile': '9876543210',
    'email': 'ravi.kumar@example.com',
    'socialCategory': 'General',
    'gender': 'M',
    'speciallyAbled': 'no',
    'nameOfEnterprise': 'Kumar Textiles',
    'majorActivity': 'Manufacturing',
}


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr('services.otp_service.redis_client', fake)
    return fake
