"""
Cas d'usage 'payments': orchestre validation, payload, client ArifPay et réponse.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, List, Optional

from . import payload as payload_builder
from .arifpay_client import ArifPayClient
from .errors import InvalidAmount, InvalidArgument, MissingFields
from .models import CheckoutRequest, CheckoutSessionHandle

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("user_id", "gym_id", "plan_id", "amount", "phone", "email")

def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False

def _is_valid_amount(value: Any) -> bool:
    return math.isfinite(value) and value > 0

def missing_fields(request: CheckoutRequest) -> List[str]:
    """Noms (camelCase) des champs obligatoires absents ou vides."""
    fields = CheckoutRequest.model_fields
    return [fields[name].alias or name for name in REQUIRED_FIELDS if _is_blank(getattr(request, name))]

def validate_checkout_request(request: CheckoutRequest) -> None:
    missing = missing_fields(request)
    if missing:
        logger.warning("checkout rejected: missing fields %s", missing)
        raise MissingFields(missing)
    if not _is_valid_amount(request.amount):
        logger.warning("checkout rejected: invalid amount %r", request.amount)
        raise InvalidAmount(f"Invalid amount: {request.amount!r}")

async def create_checkout(
    request: CheckoutRequest,
    client: ArifPayClient,
    now: Optional[datetime] = None,
) -> CheckoutSessionHandle:
    """
    Crée une session Checkout ArifPay pour un abonnement de salle.
    Étapes:
      1) Valider les champs obligatoires (MissingFields, aucun appel réseau)
      2) Construire le SessionPayload (payload_builder.build_session_payload)
      3) Appeler ArifPay (client.create_session); les erreurs amont sont propagées
      4) Retourner l'enveloppe de succès (champs absents de la réponse -> None)
    """
    validate_checkout_request(request)
    now = now or datetime.now(timezone.utc)
    session_payload = payload_builder.build_session_payload(request, client.settings, now)
    handle = await client.create_session(session_payload)
    logger.info(
        "payments.checkout created session_id=%s user_id=%s plan_id=%s nonce=%s",
        handle.session_id, request.user_id, request.plan_id, session_payload.nonce,
    )
    return CheckoutSessionHandle(
        session_id=handle.session_id,
        payment_url=handle.payment_url,
        cancel_url=handle.cancel_url,
    )

async def check_status(session_id: Optional[str], client: ArifPayClient) -> Any:
    """
    Relais du statut de session ArifPay.
    - Validation d'abord (InvalidArgument si sessionId vide), puis un seul appel sortant.
    """
    if not isinstance(session_id, str) or not session_id.strip():
        raise InvalidArgument("sessionId is required")
    return await client.get_session_status(session_id)
