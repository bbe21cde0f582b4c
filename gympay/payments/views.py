import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gympay.utils.rate_limit import optional_rate_limit
from gympay.payments import service as payments_service
from gympay.payments.arifpay_client import ArifPayClient, get_arifpay_client
from gympay.payments.errors import GatewayError
from gympay.payments.models import CheckoutRequest, StatusRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])

CHECKOUT_FAILED = "Failed to create subscription checkout"
STATUS_FAILED = "Failed to check payment status"

def _gateway_failure(message: str, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": message, "details": exc.details})

# module gympay.payments.views
@router.post(
    "/create-subscription-checkout",
    dependencies=[Depends(optional_rate_limit(times=10, seconds=60))],
)
async def create_subscription_checkout(
    body: CheckoutRequest,
    client: ArifPayClient = Depends(get_arifpay_client),
):
    """
    Crée une session Checkout ArifPay pour un abonnement de salle.
    - Entrée JSON: CheckoutRequest (userId, gymId, planId, amount, phone, email obligatoires)
    - 200: {success, sessionId, paymentUrl, cancelUrl, message}
    - 400: {"error": "Missing required fields"} (aucun appel ArifPay)
    - 500: {"error": "Failed to create subscription checkout", "details": <corps amont ou message>}
    """
    try:
        handle = await payments_service.create_checkout(body, client)
    except GatewayError as e:
        logger.error("ArifPay subscription error: %s", e.details)
        return _gateway_failure(CHECKOUT_FAILED, e)
    return JSONResponse(handle.model_dump(by_alias=True))

@router.post("/payment/status")
async def payment_status(
    body: StatusRequest,
    client: ArifPayClient = Depends(get_arifpay_client),
):
    """
    Relaie le document de statut ArifPay pour {sessionId}.
    - 400 si sessionId manquant; 500 si ArifPay échoue (details attachés).
    """
    try:
        document = await payments_service.check_status(body.session_id, client)
    except GatewayError as e:
        logger.error("Status check error: %s", e.details)
        return _gateway_failure(STATUS_FAILED, e)
    return JSONResponse(document)
