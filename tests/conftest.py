import pytest
import stripe
from typing import Generator
from fastapi.testclient import TestClient

from dashboard.app import app as fastapi_app
from tests.stripe_factories import FakeStripeList

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

# Aucun appel réseau vers Stripe pendant les tests
@pytest.fixture(autouse=True)
def _block_stripe_network(monkeypatch):
    def _blocked(**params):
        raise AssertionError(f"Appel Stripe non mocké: {params}")
    monkeypatch.setattr(stripe.PaymentLink, "list", _blocked)
    monkeypatch.setattr(stripe.checkout.Session, "list", _blocked)

@pytest.fixture
def fake_stripe(monkeypatch):
    """
    Installe de faux PaymentLink.list / checkout.Session.list.
    Usage: links, sessions = fake_stripe([page(...)], {"plink_1": [page(...)]})
    """
    def _install(link_pages, session_pages=None):
        links = FakeStripeList(link_pages)
        sessions = FakeStripeList(session_pages or {}, key="payment_link")
        monkeypatch.setattr(stripe.PaymentLink, "list", links)
        monkeypatch.setattr(stripe.checkout.Session, "list", sessions)
        return links, sessions
    return _install
