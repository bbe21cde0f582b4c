"""
Module 'payments' (feature-first): point d'entrée public.
Réunit payload de session, client ArifPay, extraction des réponses, services et retours.
"""

from .errors import (
    PaymentError,
    MissingFields,
    InvalidArgument,
    InvalidAmount,
    GatewayError,
    GatewayRejected,
    GatewayUnavailable,
)
from .models import (
    CheckoutRequest,
    StatusRequest,
    LineItem,
    Beneficiary,
    SessionPayload,
    SessionHandle,
    CheckoutSessionHandle,
)
from .payload import make_nonce, expire_date, build_callback_urls, build_line_item, build_session_payload
from .metadata import extract_session_handle
from .arifpay_client import ArifPayClient, get_arifpay_client
from .service import missing_fields, create_checkout, check_status

__all__ = [
    # errors
    "PaymentError",
    "MissingFields",
    "InvalidArgument",
    "InvalidAmount",
    "GatewayError",
    "GatewayRejected",
    "GatewayUnavailable",
    # models
    "CheckoutRequest",
    "StatusRequest",
    "LineItem",
    "Beneficiary",
    "SessionPayload",
    "SessionHandle",
    "CheckoutSessionHandle",
    # payload
    "make_nonce",
    "expire_date",
    "build_callback_urls",
    "build_line_item",
    "build_session_payload",
    # metadata
    "extract_session_handle",
    # arifpay
    "ArifPayClient",
    "get_arifpay_client",
    # services
    "missing_fields",
    "create_checkout",
    "check_status",
]
