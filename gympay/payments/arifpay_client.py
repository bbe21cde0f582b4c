"""
Adaptateur ArifPay: centralise les appels HTTP vers la passerelle.
Deux formes d'appel seulement (création de session, lecture de statut), sans retry.
"""
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from gympay.config import GatewaySettings, get_gateway_settings
from .errors import GatewayRejected, GatewayUnavailable, InvalidArgument
from .metadata import extract_session_handle
from .models import SessionHandle, SessionPayload

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-arifpay-key"

# module gympay.payments.arifpay_client
def _body_of(response: httpx.Response) -> Any:
    """Corps JSON si possible, sinon texte brut (jamais d'exception)."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


class ArifPayClient:
    """
    Client ArifPay minimal.
    - settings: configuration figée (clé API, endpoints, timeout), passée par référence.
    - transport: transport httpx optionnel (httpx.MockTransport en tests).
    Chaque opération effectue au plus un appel sortant, borné par settings.timeout_seconds.
    """

    def __init__(self, settings: GatewaySettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            API_KEY_HEADER: self.settings.api_key,
        }

    def require_api_key(self) -> None:
        if not self.settings.api_key:
            raise GatewayUnavailable("ARIFPAY_API_KEY is not configured")

    async def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        self.require_api_key()
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=httpx.Timeout(self.settings.timeout_seconds),
            ) as client:
                response = await client.request(method, url, headers=self.headers, json=payload)
        except httpx.TimeoutException as e:
            raise GatewayUnavailable(f"ArifPay request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise GatewayUnavailable(f"ArifPay request failed: {e}") from e

        body = _body_of(response)
        if response.is_error:
            raise GatewayRejected(response.status_code, body)
        return body

    async def create_session(self, payload: SessionPayload) -> SessionHandle:
        """
        Crée une session Checkout ArifPay.
        Retour: SessionHandle (sessionId, paymentUrl, cancelUrl), chaque champ pouvant être None.
        Erreurs: GatewayRejected (statut non-2xx), GatewayUnavailable (transport/timeout).
        """
        document = await self._request(
            "POST",
            self.settings.endpoint,
            payload.model_dump(by_alias=True),
        )
        logger.info("ArifPay response: %s", json.dumps(document, indent=2, default=str))
        return extract_session_handle(document)

    async def get_session_status(self, session_id: str) -> Any:
        """
        Lit le document de statut d'une session (format défini par ArifPay, renvoyé tel quel).
        - session_id vide -> InvalidArgument, avant tout accès réseau.
        """
        if not isinstance(session_id, str) or not session_id.strip():
            raise InvalidArgument("sessionId must be a non-empty string")
        url = self.settings.session_url_template.format(session_id=quote(session_id.strip(), safe=""))
        document = await self._request("GET", url)
        logger.info("ArifPay session data: %s", document)
        return document


@lru_cache()
def get_arifpay_client() -> ArifPayClient:
    """Client partagé (sans état mutable) construit sur la configuration du process."""
    return ArifPayClient(get_gateway_settings())
