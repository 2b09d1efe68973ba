"""Tests pour l'agrégation du score total, les paliers et les accroches."""

from __future__ import annotations

import pytest

from pungsu.domain.entities import AxisLabel, AxisScore, Tier
from pungsu.domain.tier import (
    TIER_COPY,
    classify_tier,
    round_half_up,
    select_copy,
    total_score,
)


def _axes(*scores: int) -> list[AxisScore]:
    return [
        AxisScore(label=label, score=score, description="d", detail_quote="q")
        for label, score in zip(AxisLabel, scores, strict=True)
    ]


@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (100, Tier.S),
        (85, Tier.S),
        (84, Tier.A),
        (70, Tier.A),
        (69, Tier.B),
        (51, Tier.B),
        (50, Tier.C),
        (0, Tier.C),
    ],
)
def test_classify_tier_boundaries(total: int, expected: Tier) -> None:
    """Teste les seuils: >= 85 S, >= 70 A, <= 50 C, sinon B."""
    assert classify_tier(total) == expected


def test_total_score_reference_scenario() -> None:
    """Teste (45+40+80+50+95+55)/6 = 60.83 -> 61."""
    assert total_score(_axes(45, 40, 80, 50, 95, 55)) == 61


def test_total_score_rounds_half_up() -> None:
    """Teste qu'une moyenne en .5 s'arrondit vers le haut (387/6 = 64.5 -> 65)."""
    assert total_score(_axes(65, 65, 65, 64, 64, 64)) == 65


def test_round_half_up() -> None:
    """Teste l'arrondi, contrairement à l'arrondi bancaire de `round`."""
    assert round_half_up(64.5) == 65
    assert round_half_up(62.5) == 63
    assert round_half_up(60.49) == 60


def test_total_score_empty() -> None:
    """Teste qu'une liste vide donne 0."""
    assert total_score([]) == 0


def test_tier_copy_covers_every_tier_and_status() -> None:
    """Teste que les huit couples (palier, statut) ont une accroche."""
    assert len(TIER_COPY) == 8
    for tier in Tier:
        for status in ("moving", "living"):
            assert (tier, status) in TIER_COPY


def test_select_copy_interpolates_name_and_terrain() -> None:
    """Teste l'interpolation du nom (tous paliers) et du terrain (palier S)."""
    main_copy, sub_copy = select_copy(Tier.S, "moving", "홍길동", "배산임수형")
    assert "홍길동" in main_copy
    assert "배산임수형" in sub_copy

    main_copy, _ = select_copy(Tier.C, "living", "홍길동", "배산임수형")
    assert "홍길동" in main_copy


def test_select_copy_depends_on_move_status() -> None:
    """Teste que le statut change l'accroche."""
    assert select_copy(Tier.B, "moving", "A", "t") != select_copy(Tier.B, "living", "A", "t")


def test_select_copy_unknown_status_falls_back_to_living() -> None:
    """Teste le repli d'un statut inconnu sur "living"."""
    assert select_copy(Tier.A, "visiting", "A", "t") == select_copy(Tier.A, "living", "A", "t")


def test_select_copy_name_with_braces_is_not_reformatted() -> None:
    """Teste qu'un nom contenant des accolades est inséré tel quel."""
    main_copy, _ = select_copy(Tier.B, "living", "{terrain}", "t")
    assert "{terrain}" in main_copy
