"""Shared test fixtures."""
import pytest
from datetime import datetime, timedelta

from clinic_api.api import create_app
from clinic_api.config import Settings
from clinic_api.store import ClinicStore


def get_future_date(days_ahead=7):
    """Generate a future date string in YYYY-MM-DD format."""
    future_date = datetime.now() + timedelta(days=days_ahead)
    return future_date.strftime("%Y-%m-%d")


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    return ClinicStore()


@pytest.fixture
def settings():
    return Settings(app_env="production", log_level="WARNING")


@pytest.fixture
def app(store, settings):
    app = create_app(store=store, settings=settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def patient(store):
    """A registered patient."""
    return store.patients.register("Juan Pérez", "juan@email.com", "3001234567")


@pytest.fixture
def other_patient(store):
    return store.patients.register("Ana López", "ana@email.com", "3109876543")


@pytest.fixture
def register_patient(client):
    """Factory that registers a patient over HTTP and returns its data."""
    counter = {"value": 0}

    def _register(name="Test Patient", email=None, phone="3001234567"):
        counter["value"] += 1
        email = email or f"patient{counter['value']}@email.com"
        response = client.post("/patients", json={"name": name, "email": email, "phone": phone})
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]

    return _register


@pytest.fixture
def future_date():
    """Date one week from today."""
    return get_future_date(7)
