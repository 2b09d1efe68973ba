"""Classification symbolique par les cinq éléments (오행).

- Élément de naissance déduit du mois (saison).
- Élément "nécessaire" obtenu par le cycle de contrôle.
- Élément porté par l'orientation de la maison.

L'élément Terre figure dans le cycle et dans les remèdes mais n'est jamais produit
comme élément de naissance; seule une orientation sans lettre cardinale y mène.
"""

import datetime as dt

import structlog

from pungsu.domain.entities import Element

log = structlog.get_logger(__name__)

# Mois retenu quand la date de naissance est illisible: retombe sur l'Eau.
FALLBACK_MONTH = 0

NEEDED_ELEMENT: dict[Element, Element] = {
    Element.WOOD: Element.METAL,
    Element.FIRE: Element.WATER,
    Element.EARTH: Element.WOOD,
    Element.METAL: Element.FIRE,
    Element.WATER: Element.EARTH,
}

# L'ordre compte: la première lettre trouvée dans l'orientation l'emporte (NE -> Eau, SW -> Feu).
DIRECTION_ELEMENTS: tuple[tuple[str, Element], ...] = (
    ("N", Element.WATER),
    ("S", Element.FIRE),
    ("E", Element.WOOD),
    ("W", Element.METAL),
)

ELEMENT_LABELS_KO: dict[Element, str] = {
    Element.WOOD: "목(Wood)",
    Element.FIRE: "화(Fire)",
    Element.EARTH: "토(Earth)",
    Element.METAL: "금(Metal)",
    Element.WATER: "수(Water)",
}

DIRECTION_LABELS_KO: dict[str, str] = {
    "N": "북향",
    "S": "남향",
    "E": "동향",
    "W": "서향",
    "NE": "북동향",
    "NW": "북서향",
    "SE": "남동향",
    "SW": "남서향",
    "UNKNOWN": "방향 미확인",
}


def birth_month(birth_date: str | None) -> int:
    """Retourne le mois (1-12) d'une date ISO `YYYY-MM-DD`.

    Une date absente ou illisible ne lève pas d'erreur: elle donne `FALLBACK_MONTH`.
    """
    try:
        return dt.date.fromisoformat(str(birth_date).strip()[:10]).month
    except ValueError:
        log.warning("birth_date_unparseable", birth_date=birth_date)
        return FALLBACK_MONTH


def user_element(month: int) -> Element:
    """Élément de naissance: 2-4 Bois, 5-7 Feu, 8-10 Métal, sinon Eau."""
    if 2 <= month <= 4:
        return Element.WOOD
    if 5 <= month <= 7:
        return Element.FIRE
    if 8 <= month <= 10:
        return Element.METAL
    return Element.WATER


def needed_element(element: Element) -> Element:
    """Élément qui équilibre `element` selon le cycle de contrôle."""
    return NEEDED_ELEMENT[element]


def direction_element(direction: str) -> Element:
    """Élément de l'orientation par recherche de sous-chaîne; Terre si aucune lettre ne correspond."""
    for key, element in DIRECTION_ELEMENTS:
        if key in direction:
            return element
    return Element.EARTH


def direction_label(direction: str) -> str:
    """Libellé coréen d'une orientation (l'orientation brute si inconnue de la table)."""
    return DIRECTION_LABELS_KO.get(direction, direction)
