from datetime import datetime, timezone
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_db_client, get_payment_service
from app.main import app
from app.services.local_store import LocalStore
from app.services.payments import CheckoutSession
from app.utils.exceptions import PaymentError


class FakeCheckoutService:
    """In-memory stand-in for StripeCheckoutService."""

    def __init__(self):
        self.sessions: Dict[str, CheckoutSession] = {}
        self.fail_with: Optional[str] = None

    async def create_checkout_session(self, email, user_id):
        if self.fail_with:
            raise PaymentError(self.fail_with)
        session_id = f"cs_test_{len(self.sessions) + 1}"
        session = CheckoutSession(
            id=session_id,
            url=f"https://checkout.stripe.com/c/pay/{session_id}",
            payment_status="unpaid",
            metadata={"userId": user_id},
        )
        self.sessions[session_id] = session
        return session

    async def retrieve_checkout_session(self, session_id):
        if session_id not in self.sessions:
            raise PaymentError(f"No such checkout.session: '{session_id}'")
        return self.sessions[session_id]

    def add_session(self, session_id, user_id):
        self.sessions[session_id] = CheckoutSession(
            id=session_id, payment_status="paid", metadata={"userId": user_id} if user_id else {}
        )


@pytest.fixture
def store():
    return LocalStore()


@pytest.fixture
def payments():
    return FakeCheckoutService()


@pytest.fixture
def client(store, payments):
    app.dependency_overrides[get_db_client] = lambda: store
    app.dependency_overrides[get_payment_service] = lambda: payments
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    def _register(email, **fields):
        r = client.post("/users", json={"email": email, **fields})
        assert r.status_code == 200, r.text
        return r.json()
    return _register


@pytest.fixture
def make_lesson(client):
    def _make_lesson(**fields):
        body = {
            "title": "Untitled",
            "description": "Something worth learning",
            "image": "https://img.example/cover.png",
            "category": "Personal Growth",
            "emotionalTone": "Motivational",
            "accessLevel": "Free",
            "authorEmail": "author@sapiens.io",
        }
        body.update(fields)
        r = client.post("/lessons", json=body)
        assert r.status_code == 200, r.text
        return r.json()
    return _make_lesson


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)
