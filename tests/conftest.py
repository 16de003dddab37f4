import pytest

from app.main import app
from app.db.session import get_store
from app.db.store import EmployeeStore


@pytest.fixture()
def store():
    """
    A fresh, empty store per test.

    Tests that want the demo data call tests.helpers.seed(store).
    """
    return EmployeeStore()


@pytest.fixture(autouse=True)
def override_get_store(store):
    def _get_store_override():
        return store

    app.dependency_overrides[get_store] = _get_store_override
    yield
    app.dependency_overrides.clear()
