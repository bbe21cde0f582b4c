# gympay.config
from functools import lru_cache
from pathlib import Path
from typing import List
import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

TEMPLATES_DIR = BASE_DIR / "templates"

"""
Configuration centrale du broker de paiement.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les secrets/URLs ArifPay (clé API, endpoint, URLs de retour, bénéficiaire)
- Expose CORS/hosts et le port d'écoute
- Fournit GatewaySettings: l'instantané immuable passé au client ArifPay
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _split_env(v: str) -> List[str]:
    return [x.strip() for x in (v or "").split(",") if x.strip()]

# ArifPay: clé API et endpoints
ARIFPAY_API_KEY = _clean_env(os.getenv("ARIFPAY_API_KEY") or "")
ARIFPAY_ENDPOINT = _clean_env(os.getenv("ARIFPAY_ENDPOINT") or "https://gateway.arifpay.org/api/checkout/session")
ARIFPAY_SESSION_URL_TEMPLATE = _clean_env(
    os.getenv("ARIFPAY_SESSION_URL_TEMPLATE") or "https://gateway.arifpay.org/api/checkout/session/{session_id}"
)

# URLs de retour (redirections navigateur + webhook serveur à serveur)
ARIFPAY_SUCCESS_URL = _clean_env(os.getenv("ARIFPAY_SUCCESS_URL") or "http://localhost:3000/payment/success")
ARIFPAY_CANCEL_URL = _clean_env(os.getenv("ARIFPAY_CANCEL_URL") or "http://localhost:3000/payment/cancel")
ARIFPAY_ERROR_URL = _clean_env(os.getenv("ARIFPAY_ERROR_URL") or "http://localhost:3000/payment/error")
ARIFPAY_NOTIFY_URL = _clean_env(os.getenv("ARIFPAY_NOTIFY_URL") or "http://localhost:3000/payment/notify")

# Bénéficiaire crédité par la passerelle
ARIFPAY_ACCOUNT = _clean_env(os.getenv("ARIFPAY_ACCOUNT") or "")
ARIFPAY_BANK = _clean_env(os.getenv("ARIFPAY_BANK") or "")

# Options de session
ARIFPAY_PAYMENT_METHODS = _split_env(os.getenv("ARIFPAY_PAYMENT_METHODS", "TELEBIRR"))
ARIFPAY_LANG = _clean_env(os.getenv("ARIFPAY_LANG") or "EN")
ARIFPAY_ITEM_IMAGE = _clean_env(os.getenv("ARIFPAY_ITEM_IMAGE") or "https://via.placeholder.com/150")
ARIFPAY_TIMEOUT_SECONDS = float(os.getenv("ARIFPAY_TIMEOUT_SECONDS", "15"))

# CORS (l'app Flutter appelle l'API depuis n'importe quelle origine en dev)
CORS_ORIGINS = _split_env(os.getenv("CORS_ORIGINS", "*"))
ALLOWED_HOSTS = _split_env(os.getenv("ALLOWED_HOSTS", "*"))

PORT = int(os.getenv("PORT", "3000"))


class GatewaySettings(BaseModel):
    """
    Configuration ArifPay figée, chargée une seule fois au démarrage.
    Passée par référence à ArifPayClient (pas de lecture d'environnement au fil de l'eau).
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    endpoint: str
    session_url_template: str
    success_url: str
    cancel_url: str
    error_url: str
    notify_url: str
    account_number: str = ""
    bank: str = ""
    payment_methods: List[str] = ["TELEBIRR"]
    lang: str = "EN"
    item_image: str = "https://via.placeholder.com/150"
    timeout_seconds: float = 15.0


@lru_cache()
def get_gateway_settings() -> GatewaySettings:
    """Instantané unique (process-wide) de la configuration ArifPay."""
    return GatewaySettings(
        api_key=ARIFPAY_API_KEY,
        endpoint=ARIFPAY_ENDPOINT,
        session_url_template=ARIFPAY_SESSION_URL_TEMPLATE,
        success_url=ARIFPAY_SUCCESS_URL,
        cancel_url=ARIFPAY_CANCEL_URL,
        error_url=ARIFPAY_ERROR_URL,
        notify_url=ARIFPAY_NOTIFY_URL,
        account_number=ARIFPAY_ACCOUNT,
        bank=ARIFPAY_BANK,
        payment_methods=ARIFPAY_PAYMENT_METHODS or ["TELEBIRR"],
        lang=ARIFPAY_LANG,
        item_image=ARIFPAY_ITEM_IMAGE,
        timeout_seconds=ARIFPAY_TIMEOUT_SECONDS,
    )
