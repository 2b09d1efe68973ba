"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` pour signaler l'état général de l'application.
"""

from fastapi import APIRouter

from pungsu.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API."""
    return {
        "status": "ok",
        "app": container.settings.APP_NAME,
        "env": container.settings.APP_ENV,
    }
