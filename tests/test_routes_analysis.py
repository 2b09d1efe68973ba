"""Tests pour l'endpoint d'analyse.

Ce module teste `POST /analysis`: réponse camelCase avec liens marchands, propagation de
l'identifiant de requête et enveloppes d'erreur de validation.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from pungsu.app.main import app
from pungsu.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_NOT_FOUND,
    HTTP_OK,
    HTTP_UNPROCESSABLE_ENTITY,
)

c = TestClient(app)

SHOPPING_PREFIX = "https://m.search.shopping.naver.com/search/all?query="
HONG_PAYLOAD = {
    "name": "홍길동",
    "birthDate": "1990-06-15",
    "houseDirection": "S",
    "coordinates": None,
    "hasImage": False,
    "moveStatus": "living",
}


def _payload(**overrides):
    return {**HONG_PAYLOAD, **overrides}


def test_analysis_ok() -> None:
    """Teste une analyse valide: score, palier et champs camelCase."""
    r = c.post("/analysis", json=HONG_PAYLOAD)
    assert r.status_code == HTTP_OK
    body = r.json()
    assert body["totalScore"] == 61
    assert body["tier"] == "B"
    assert [a["label"] for a in body["radarData"]] == [
        "Ground",
        "Direction",
        "Balance",
        "WaterVein",
        "Light",
        "Flow",
    ]
    assert body["userElement"] == "Fire"
    assert body["neededElement"] == "Water"
    assert len(body["premiumReport"]["sections"]) == 3
    assert body["locationWarning"] == "위치 정보 미입력으로 정밀 분석이 제한됩니다."
    assert body["elementSummary"]
    assert body["visionAnalysis"] == ""


def test_analysis_shopping_links() -> None:
    """Teste un lien marchand encodé par objet recommandé."""
    body = c.post("/analysis", json=HONG_PAYLOAD).json()
    links = body["shoppingLinks"]
    assert [link["id"] for link in links] == [item["id"] for item in body["items"]]
    for link in links:
        assert link["url"].startswith(SHOPPING_PREFIX)
        assert " " not in link["url"]
    assert "%20" in links[0]["url"]


def test_analysis_with_coordinates() -> None:
    """Teste qu'une position favorable donne le palier S."""
    payload = _payload(
        name="김철수",
        birthDate="1988-10-03",
        coordinates={"lat": 37.5, "lng": 127.02},
        hasImage=True,
        moveStatus="moving",
    )
    r = c.post("/analysis", json=payload)
    assert r.status_code == HTTP_OK
    assert r.json()["tier"] == "S"
    assert r.json()["totalScore"] == 87


def test_analysis_defaults_optional_fields() -> None:
    """Teste les valeurs par défaut (orientation inconnue, résident, sans photo)."""
    r = c.post("/analysis", json={"name": "성춘향", "birthDate": "1995-02-10"})
    assert r.status_code == HTTP_OK
    radar = {a["label"]: a["score"] for a in r.json()["radarData"]}
    assert radar["Direction"] == 50
    assert radar["Light"] == 50


def test_request_id_is_echoed() -> None:
    """Teste le renvoi de l'en-tête X-Request-ID."""
    r = c.post("/analysis", json=HONG_PAYLOAD, headers={"X-Request-ID": "req-123"})
    assert r.headers["X-Request-ID"] == "req-123"


def test_invalid_direction_returns_422() -> None:
    """Teste le rejet d'une orientation hors énumération."""
    r = c.post("/analysis", json=_payload(houseDirection="NORTH"))
    assert r.status_code == HTTP_UNPROCESSABLE_ENTITY
    body = r.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"]


def test_out_of_range_latitude_returns_422() -> None:
    """Teste le rejet d'une latitude hors [-90, 90]."""
    r = c.post("/analysis", json=_payload(coordinates={"lat": 91, "lng": 127}))
    assert r.status_code == HTTP_UNPROCESSABLE_ENTITY


def test_blank_name_returns_422() -> None:
    """Teste le rejet d'un nom vide ou blanc."""
    assert c.post("/analysis", json=_payload(name="   ")).status_code == HTTP_UNPROCESSABLE_ENTITY
    assert c.post("/analysis", json=_payload(name="")).status_code == HTTP_UNPROCESSABLE_ENTITY


def test_invalid_birth_date_returns_422() -> None:
    """Teste le rejet d'une date de naissance invalide."""
    r = c.post("/analysis", json=_payload(birthDate="1990-13-01"))
    assert r.status_code == HTTP_UNPROCESSABLE_ENTITY
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_future_birth_date_returns_400() -> None:
    """Teste le rejet d'une date de naissance future, avec trace_id."""
    r = c.post(
        "/analysis", json=_payload(birthDate="2999-01-01"), headers={"X-Request-ID": "req-future"}
    )
    assert r.status_code == HTTP_BAD_REQUEST
    body = r.json()
    assert body["code"] == "BAD_REQUEST"
    assert body["trace_id"] == "req-future"
    assert body["details"] == {"birthDate": "2999-01-01"}


def test_unknown_route_returns_404_envelope() -> None:
    """Teste l'enveloppe standard pour une route inexistante."""
    r = c.get("/does-not-exist")
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["code"] == "NOT_FOUND"
