from urllib.parse import urlparse
import socket
from gympay.config import GatewaySettings

def _resolve(hostname: str):
    try:
        socket.getaddrinfo(hostname, 443)
        return True, None
    except OSError as e:
        return False, str(e)

def health_gateway_info(settings: GatewaySettings, check_dns: bool = True):
    """
    État de la configuration ArifPay, sans jamais exposer de secret.
    - endpoint/hostname, résolution DNS (optionnelle)
    - présence de la clé API et du bénéficiaire
    """
    parsed = urlparse(settings.endpoint) if settings.endpoint else None
    hostname = parsed.hostname if parsed else None
    dns_ok = None
    dns_error = None
    if hostname and check_dns:
        dns_ok, dns_error = _resolve(hostname)

    return {
        "endpoint": settings.endpoint,
        "hostname": hostname,
        "dns_ok": dns_ok,
        "dns_error": dns_error,
        "api_key_configured": bool(settings.api_key),
        "beneficiary_configured": bool(settings.account_number and settings.bank),
        "payment_methods": list(settings.payment_methods),
        "timeout_seconds": settings.timeout_seconds,
    }
