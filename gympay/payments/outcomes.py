"""
Retours asynchrones ArifPay: trois redirections navigateur + un webhook serveur.
Chaque point d'entrée est indépendant et sans état: la passerelle reste propriétaire
de l'état de la session.
"""
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from gympay.config import TEMPLATES_DIR

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/payment", tags=["Payment callbacks"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# module gympay.payments.outcomes
@router.get("/success", response_class=HTMLResponse)
def payment_success(
    request: Request,
    user_id: Optional[str] = Query(None, alias="userId"),
    gym_id: Optional[str] = Query(None, alias="gymId"),
    plan_id: Optional[str] = Query(None, alias="planId"),
):
    """Page d'affichage uniquement: aucun appel ArifPay, aucune mutation."""
    return templates.TemplateResponse(
        request,
        "payment_success.html",
        {"user_id": user_id, "gym_id": gym_id, "plan_id": plan_id},
    )

@router.get("/cancel", response_class=HTMLResponse)
def payment_cancel(request: Request):
    return templates.TemplateResponse(request, "payment_cancel.html", {})

@router.get("/error", response_class=HTMLResponse)
def payment_error(request: Request):
    return templates.TemplateResponse(request, "payment_error.html", {})

def _decode_notification(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw.decode("utf-8", errors="replace")

@router.post("/notify")
async def payment_notify(request: Request):
    """
    Webhook ArifPay (serveur à serveur).
    - Journalise le corps tel quel pour réconciliation ultérieure.
    - Accuse toujours réception: {"received": true}, quel que soit le contenu.
    - Pas de vérification de signature: ArifPay n'en fournit pas dans ce flux.
    """
    notification = _decode_notification(await request.body())
    logger.info("Payment notification received: %s", notification)
    # La mise à jour du statut en base relève d'un collaborateur externe
    return JSONResponse({"received": True})
