"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `gympay.asgi:app`
  pour servir l'application FastAPI en mode ASGI.
- Toute la configuration (routes, middlewares, handlers) est centralisée dans gympay.app_setup,
  ce fichier ne fait qu'exposer l'instance `app`.
"""

from gympay.app import app

if __name__ == "__main__":
    import uvicorn
    from gympay.config import PORT
    uvicorn.run(
        "gympay.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,     # rechargement automatique en dev
    )
