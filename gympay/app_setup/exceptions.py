"""
Gestionnaires d'exceptions utilisés par la factory.
- PaymentError (MissingFields, InvalidArgument, ...): enveloppe {error[, details]} avec le statut de l'erreur.
- RequestValidationError sur /api/*: 400 {error, details} au lieu du 422 FastAPI.
- HTTPException: JSON FastAPI standard.
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.responses import JSONResponse

from gympay.payments.errors import PaymentError

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre les handlers; aucune erreur ne fait tomber le process.
    """
    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        logger.warning("payments error path=%s status=%s: %s", request.url.path, exc.status_code, exc)
        return JSONResponse(status_code=exc.status_code, content=exc.envelope())

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        if not request.url.path.startswith("/api/"):
            return await request_validation_exception_handler(request, exc)
        logger.warning("invalid request body path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)
