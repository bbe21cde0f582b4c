import json
import os
import pytest
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx
from fastapi.testclient import TestClient

# Environnement de test figé avant l'import de gympay.config
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")
os.environ.setdefault("ARIFPAY_API_KEY", "test-arifpay-key")
os.environ.setdefault("ARIFPAY_ENDPOINT", "https://gateway.test/api/checkout/session")

from gympay.app import app as fastapi_app
from gympay.config import GatewaySettings
from gympay.payments.arifpay_client import ArifPayClient, get_arifpay_client

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeArifPay:
    """
    Passerelle ArifPay simulée via httpx.MockTransport.
    - calls: requêtes reçues (méthode, url, headers, json)
    - respond(status, body) / fail_with(exc): configure la prochaine réponse
    """

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.status_code = 200
        self.body: Any = {"data": {}}
        self.error: Optional[Callable[[httpx.Request], Exception]] = None

    def respond(self, status_code: int, body: Any) -> "FakeArifPay":
        self.status_code = status_code
        self.body = body
        return self

    def fail_with(self, factory: Callable[[httpx.Request], Exception]) -> "FakeArifPay":
        self.error = factory
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append({
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "json": json.loads(request.content) if request.content else None,
        })
        if self.error:
            raise self.error(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(
        api_key="test-arifpay-key",
        endpoint="https://gateway.test/api/checkout/session",
        session_url_template="https://gateway.test/api/checkout/session/{session_id}",
        success_url="https://gym.test/payment/success",
        cancel_url="https://gym.test/payment/cancel",
        error_url="https://gym.test/payment/error",
        notify_url="https://gym.test/payment/notify",
        account_number="01320811436100",
        bank="AWINETAA",
        payment_methods=["TELEBIRR"],
        lang="EN",
    )

@pytest.fixture
def fake_arifpay() -> FakeArifPay:
    return FakeArifPay()

@pytest.fixture
def arifpay_client(gateway_settings, fake_arifpay) -> ArifPayClient:
    return ArifPayClient(gateway_settings, transport=fake_arifpay.transport)

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app, arifpay_client) -> Generator[TestClient, None, None]:
    # Toutes les routes utilisent la passerelle simulée
    app.dependency_overrides[get_arifpay_client] = lambda: arifpay_client
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_arifpay_client, None)

@pytest.fixture
def checkout_body() -> Dict[str, Any]:
    return {
        "userId": "u1",
        "gymId": "g1",
        "planId": "p1",
        "gymName": "Iron Gym",
        "planName": "Monthly",
        "durationDays": 30,
        "amount": 500,
        "quantity": 1,
        "phone": "+251911000000",
        "email": "a@b.com",
        "userName": "Abebe",
    }
