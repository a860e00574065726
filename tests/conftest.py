import pytest
from fastapi.testclient import TestClient

from loanbook.main import app
from loanbook.services.ledger import LedgerService
from loanbook.store import JsonFileStore, get_store


@pytest.fixture(scope='function')
def store(tmp_path):
    """JSON store backed by a fresh temporary data directory."""
    store = JsonFileStore(tmp_path / 'data')
    store.ensure_all()
    return store


@pytest.fixture(scope='function')
def ledger(store):
    """Ledger service over the temporary store."""
    return LedgerService(store)


@pytest.fixture(scope='function')
def client(store):
    """Test client with the store dependency pointed at the temporary store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture(scope='function')
def alice(client):
    """Create customer Alice through the API."""
    response = client.post('/api/customers', json={'customerName': 'Alice'})
    assert response.status_code == 201
    return response.json()['customer']
