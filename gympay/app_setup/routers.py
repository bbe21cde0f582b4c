"""
Registre central des routers.
- API: création de checkout et statut de session (/api/*)
- Retours ArifPay: pages success/cancel/error et webhook notify (/payment/*)
- Health: /health
"""
from fastapi import FastAPI
from gympay.payments import views as payments_views
from gympay.payments import outcomes as payments_outcomes
from gympay.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API
    app.include_router(payments_views.router)
    # Retours navigateur + webhook
    app.include_router(payments_outcomes.router)
    # Health & monitoring
    app.include_router(health_router)
