"""
Taxonomie d'erreurs de la feature 'payments'.
- MissingFields / InvalidArgument: entrée client incomplète (400), détectées avant tout appel réseau.
- GatewayRejected / GatewayUnavailable: échec côté ArifPay (500), détails amont attachés.
"""
from typing import Any, List, Optional

# module gympay.payments.errors
class PaymentError(Exception):
    status_code: int = 500
    error: str = "Payment error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message or self.error)
        self.details = details

    def envelope(self) -> dict:
        """Corps JSON renvoyé au client: {error} ou {error, details}."""
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingFields(PaymentError):
    status_code = 400
    error = "Missing required fields"

    def __init__(self, fields: List[str]):
        # Les noms restent côté serveur (logs), le client ne reçoit que le message générique
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = list(fields)


class InvalidArgument(PaymentError):
    status_code = 400
    error = "sessionId is required"


class InvalidAmount(PaymentError):
    """Montant non fini (NaN, Infinity) ou négatif: rejeté avant tout appel ArifPay."""
    status_code = 400
    error = "amount must be a positive number"


class GatewayError(PaymentError):
    status_code = 500
    error = "Payment gateway error"


class GatewayRejected(GatewayError):
    """La passerelle a répondu avec un statut non-2xx; details = corps renvoyé par ArifPay."""

    def __init__(self, upstream_status: int, body: Any):
        super().__init__(f"ArifPay responded with HTTP {upstream_status}", details=body)
        self.upstream_status = upstream_status


class GatewayUnavailable(GatewayError):
    """Échec de transport (DNS, connexion, timeout) ou passerelle non configurée."""

    def __init__(self, message: str):
        super().__init__(message, details=message)
