"""
Lecture tolérante des réponses ArifPay (enveloppe {"data": {...}}).
"""
from typing import Any, Dict, Optional

from .models import SessionHandle

# module gympay.payments.metadata
def _str_or_none(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)

def extract_session_handle(document: Any) -> SessionHandle:
    """
    Extrait (sessionId, paymentUrl, cancelUrl) depuis data.* de la réponse de création.
    - Le schéma ArifPay n'est pas garanti: tout champ absent ou illisible devient None.
    - Ne lève jamais d'exception, même si document n'est pas un dict.
    """
    data: Dict[str, Any] = (document or {}).get("data") if isinstance(document, dict) else None
    if not isinstance(data, dict):
        return SessionHandle()
    return SessionHandle(
        session_id=_str_or_none(data.get("sessionId")),
        payment_url=_str_or_none(data.get("paymentUrl")),
        cancel_url=_str_or_none(data.get("cancelUrl")),
    )
