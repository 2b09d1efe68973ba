"""
Route d'analyse de compatibilité feng-shui.

Ce module expose `POST /analysis`: validation du questionnaire à la frontière, appel du
moteur pur, puis ajout des liens de recherche marchande pour chaque objet recommandé.
"""

import datetime as dt

from fastapi import APIRouter, Request

from pungsu.api.schemas import AnalysisRequest, AnalysisResponse
from pungsu.apigw.errors import bad_request, extract_trace_id
from pungsu.core.container import container
from pungsu.infra.shopping_links import shopping_links

router = APIRouter(tags=["analysis"])


@router.post("/analysis", response_model=AnalysisResponse)
def analyze(payload: AnalysisRequest, request: Request):
    """
    Calcule le score, le palier, les objets et le rapport pour une personne et son logement.

    Paramètres:
    - payload: `AnalysisRequest` issu du questionnaire.

    Retour:
    - `AnalysisResponse` (résultat d'analyse + `shoppingLinks`).
    """
    if payload.birth_date > dt.date.today():
        raise bad_request(
            "birthDate must not be in the future",
            trace_id=extract_trace_id(request),
            details={"birthDate": payload.birth_date.isoformat()},
        )
    result = container.fengshui.analyze(payload.to_user_input())
    settings = container.settings
    links = shopping_links(
        result.items, settings.SHOPPING_SEARCH_URL, settings.SHOPPING_QUERY_PARAM
    )
    return AnalysisResponse(**result.model_dump(), shopping_links=links)
