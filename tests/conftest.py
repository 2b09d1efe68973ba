"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `pungsu` en ajoutant la racine du projet au
sys.path, et fournit des entrées de questionnaire réutilisables.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from pungsu...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from pungsu.domain.entities import Coordinates, UserInput  # noqa: E402
from pungsu.domain.services import FengShuiService  # noqa: E402

SEOUL = Coordinates(lat=37.5665, lng=126.978)
# Position dont le hachage donne Ground=85 / WaterVein=89 (terrain 배산임수)
STRONG_SITE = Coordinates(lat=37.5, lng=127.02)


@pytest.fixture
def hong_gildong() -> UserInput:
    """Juin (Feu), maison plein sud, sans position ni photo, déjà résident."""
    return UserInput(
        name="홍길동",
        birth_date="1990-06-15",
        house_direction="S",
        coordinates=None,
        has_image=False,
        move_status="living",
    )


@pytest.fixture
def strong_mover() -> UserInput:
    """Octobre (Métal, a besoin du Feu), maison sud sur un terrain favorable, avec photo."""
    return UserInput(
        name="김철수",
        birth_date="1988-10-03",
        house_direction="S",
        coordinates=STRONG_SITE,
        has_image=True,
        move_status="moving",
    )


@pytest.fixture
def service() -> FengShuiService:
    return FengShuiService(price="4,900원", original_price="19,900원")
