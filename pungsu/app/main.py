"""
Application principale FastAPI.

Ce module assemble les composants de l'application: logging, middlewares, gestion des
erreurs et routes du moteur de compatibilité feng-shui.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter le middleware d'identifiant de requête
- Enregistrer les gestionnaires d'erreurs (enveloppe standard)
- Monter les routers (santé et analyse)
"""

from __future__ import annotations

from fastapi import FastAPI

from pungsu.api.routes_analysis import router as analysis_router
from pungsu.api.routes_health import router as health_router
from pungsu.apigw.errors import register_error_handlers
from pungsu.core.container import container
from pungsu.core.logging import setup_logging
from pungsu.middlewares.request_id import RequestIDMiddleware


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution
    - Ajoute le middleware de traçabilité
    - Publie les routes de santé et d'analyse
    """
    settings = container.settings
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(analysis_router)
    return app


app = create_app()
