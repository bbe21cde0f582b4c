"""
Construction pure du payload de session ArifPay (pas de réseau, pas de DB).
Seules entrées non déterministes: l'instant de création (now) et donc le nonce.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, List
from urllib.parse import urlencode

from gympay.config import GatewaySettings
from .models import Beneficiary, CheckoutRequest, LineItem, SessionPayload

SESSION_LIFETIME = timedelta(minutes=30)

# module gympay.payments.payload
def make_nonce(user_id: str, plan_id: str, now: datetime) -> str:
    """
    Jeton d'unicité `<userId>_<planId>_<epoch ms>`.
    Deux soumissions à des instants différents (à la milliseconde) ne collisionnent jamais.
    """
    millis = int(now.timestamp() * 1000)
    return f"{user_id}_{plan_id}_{millis}"

def format_instant(instant: datetime) -> str:
    """ISO-8601 UTC avec millisecondes et suffixe Z (ex: 2025-01-01T10:30:00.000Z)."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

def expire_date(now: datetime) -> str:
    # Durée de vie unique: 30 minutes après la création
    return format_instant(now + SESSION_LIFETIME)

def with_query(base_url: str, params: Dict[str, str]) -> str:
    query = urlencode({k: v for k, v in params.items() if v is not None})
    if not query:
        return base_url
    sep = "&" if "?" in base_url else "?"
    return f"{base_url}{sep}{query}"

def build_callback_urls(request: CheckoutRequest, settings: GatewaySettings) -> Dict[str, str]:
    """
    URLs de retour paramétrées par les identifiants d'origine: la cible de redirection
    retrouve son contexte sans état côté serveur.
    """
    user_id, gym_id, plan_id = request.user_id, request.gym_id, request.plan_id
    return {
        "success_url": with_query(settings.success_url, {"userId": user_id, "gymId": gym_id, "planId": plan_id}),
        "cancel_url": with_query(settings.cancel_url, {"userId": user_id, "subscriptionId": plan_id}),
        "error_url": with_query(settings.error_url, {"userId": user_id}),
        "notify_url": with_query(settings.notify_url, {"userId": user_id, "gymId": gym_id, "planId": plan_id}),
    }

def build_line_item(request: CheckoutRequest, default_image: str = "https://via.placeholder.com/150") -> LineItem:
    """
    Ligne d'abonnement unique.
    - quantity absente (ou 0) -> 1
    - image absente -> image de remplacement
    """
    return LineItem(
        name=f"{request.gym_name} - {request.plan_name}",
        quantity=request.quantity or 1,
        price=request.amount,
        description=f"{request.plan_name} subscription for {request.duration_days} days at {request.gym_name}",
        image=request.image or default_image,
    )

def build_beneficiaries(request: CheckoutRequest, settings: GatewaySettings) -> List[Beneficiary]:
    return [
        Beneficiary(
            account_number=settings.account_number,
            bank=settings.bank,
            amount=request.amount,
        )
    ]

def build_session_payload(request: CheckoutRequest, settings: GatewaySettings, now: datetime) -> SessionPayload:
    """
    Convertit une CheckoutRequest déjà validée en SessionPayload ArifPay.
    - Ne doit jamais être appelée avec une requête invalide (voir service.validate_checkout_request).
    - now: instant de création (datetime aware); fixe le nonce et expireDate.
    """
    return SessionPayload(
        **build_callback_urls(request, settings),
        phone=request.phone,
        email=request.email,
        nonce=make_nonce(request.user_id, request.plan_id, now),
        payment_methods=list(settings.payment_methods),
        expire_date=expire_date(now),
        items=[build_line_item(request, settings.item_image)],
        beneficiaries=build_beneficiaries(request, settings),
        lang=settings.lang,
    )
