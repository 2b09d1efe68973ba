"""Tests pour la classification par les cinq éléments."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from pungsu.domain.elements import (
    FALLBACK_MONTH,
    birth_month,
    direction_element,
    direction_label,
    needed_element,
    user_element,
)
from pungsu.domain.entities import Element

JUNE = 6


@pytest.mark.parametrize(
    ("month", "expected"),
    [
        (1, Element.WATER),
        (2, Element.WOOD),
        (4, Element.WOOD),
        (5, Element.FIRE),
        (7, Element.FIRE),
        (8, Element.METAL),
        (10, Element.METAL),
        (11, Element.WATER),
        (12, Element.WATER),
    ],
)
def test_user_element_by_season(month: int, expected: Element) -> None:
    """Teste les bornes saisonnières de l'élément de naissance."""
    assert user_element(month) == expected


def test_user_element_table_is_total_and_never_earth() -> None:
    """Teste que chaque mois donne un élément défini, jamais la Terre."""
    for month in range(1, 13):
        element = user_element(month)
        assert element in {Element.WOOD, Element.FIRE, Element.METAL, Element.WATER}
        assert needed_element(element) in set(Element)


def test_needed_element_control_cycle() -> None:
    """Teste le cycle de contrôle complet, Terre incluse."""
    assert needed_element(Element.WOOD) == Element.METAL
    assert needed_element(Element.FIRE) == Element.WATER
    assert needed_element(Element.EARTH) == Element.WOOD
    assert needed_element(Element.METAL) == Element.FIRE
    assert needed_element(Element.WATER) == Element.EARTH


def test_birth_month_parses_iso_date() -> None:
    """Teste l'extraction du mois d'une date ISO (avec ou sans heure)."""
    assert birth_month("1990-06-15") == JUNE
    assert birth_month("1990-06-15T08:30:00") == JUNE


@pytest.mark.parametrize("raw", ["", "not-a-date", "1990-13-01", None])
def test_birth_month_unparseable_falls_back_to_water(raw) -> None:
    """Teste qu'une date illisible ne lève pas et retombe sur l'Eau."""
    month = birth_month(raw)
    assert month == FALLBACK_MONTH
    assert user_element(month) == Element.WATER


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        ("N", Element.WATER),
        ("S", Element.FIRE),
        ("E", Element.WOOD),
        ("W", Element.METAL),
        ("NE", Element.WATER),
        ("NW", Element.WATER),
        ("SE", Element.FIRE),
        ("SW", Element.FIRE),
        ("", Element.EARTH),
        ("center", Element.EARTH),
    ],
)
def test_direction_element_substring_match(direction: str, expected: Element) -> None:
    """Teste la correspondance par sous-chaîne, dans l'ordre N, S, E, W."""
    assert direction_element(direction) == expected


def test_direction_label() -> None:
    """Teste les libellés coréens et le repli sur la valeur brute."""
    assert direction_label("S") == "남향"
    assert direction_label("UNKNOWN") == "방향 미확인"
    assert direction_label("XYZ") == "XYZ"


def test_birth_month_unparseable_logs_warning() -> None:
    """Teste l'événement `birth_date_unparseable` émis pour une date illisible."""
    with capture_logs() as logs:
        birth_month("1990-13-01")
    assert logs == [
        {"event": "birth_date_unparseable", "birth_date": "1990-13-01", "log_level": "warning"}
    ]


def test_birth_month_valid_date_logs_nothing() -> None:
    """Teste qu'une date valide n'émet aucun avertissement."""
    with capture_logs() as logs:
        birth_month("1990-06-15")
    assert logs == []
