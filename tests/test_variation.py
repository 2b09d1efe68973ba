"""Tests pour le générateur de variations seedé."""

from __future__ import annotations

import math

from pungsu.domain.variation import LUCKY_NUMBER_MAX, SeededVariation

SEED_HONG_JUNE = 9  # len("홍길동") + 6


def _expected(seed: int) -> float:
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def test_for_person_seed_is_name_length_plus_month() -> None:
    """Teste la graine = longueur du nom + mois."""
    assert SeededVariation.for_person("홍길동", 6).seed == SEED_HONG_JUNE
    assert SeededVariation.for_person("", 0).seed == 0


def test_next_follows_sine_formula_and_advances() -> None:
    """Teste la formule sin(seed) * 10000 et l'incrément du curseur."""
    variation = SeededVariation(SEED_HONG_JUNE)
    values = [variation.next() for _ in range(5)]
    assert values == [_expected(SEED_HONG_JUNE + i) for i in range(5)]
    assert variation.seed == SEED_HONG_JUNE + 5
    assert all(0.0 <= v < 1.0 for v in values)


def test_same_seed_same_sequence() -> None:
    """Teste la reproductibilité pour une même graine."""
    a = SeededVariation(42)
    b = SeededVariation(42)
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


def test_instances_do_not_share_cursor() -> None:
    """Teste que deux instances avancent indépendamment."""
    a = SeededVariation(7)
    b = SeededVariation(7)
    a.next()
    a.next()
    assert b.next() == _expected(7)
    assert a.seed == 9


def test_pick_returns_member() -> None:
    """Teste que `pick` retourne toujours une option existante."""
    variation = SeededVariation(3)
    options = ("a", "b", "c")
    for _ in range(50):
        assert variation.pick(options) in options


def test_pick_single_option() -> None:
    """Teste qu'une seule option est toujours choisie mais consomme une valeur."""
    variation = SeededVariation(1)
    assert variation.pick(["seul"]) == "seul"
    assert variation.seed == 2


def test_coin_matches_threshold() -> None:
    """Teste pile/face: vrai si la valeur tirée est < 0.5."""
    variation = SeededVariation(11)
    for i in range(20):
        assert variation.coin() is (_expected(11 + i) < 0.5)


def test_lucky_numbers_in_range_and_distinct() -> None:
    """Teste les numéros porte-bonheur: dans [1, 45] et distincts."""
    for seed in range(200):
        first, second = SeededVariation(seed).lucky_numbers()
        assert 1 <= first <= LUCKY_NUMBER_MAX
        assert 1 <= second <= LUCKY_NUMBER_MAX
        assert first != second


def test_lucky_numbers_consume_two_values() -> None:
    """Teste que la paire consomme exactement deux valeurs."""
    variation = SeededVariation(5)
    variation.lucky_numbers()
    assert variation.seed == 7
