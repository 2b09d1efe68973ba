"""
Sélection des objets de remède par une table de règles ordonnées.

Chaque règle (condition -> identifiants du catalogue) est évaluée dans l'ordre; un objet
n'est ajouté que si son identifiant n'a pas déjà été retenu. Le résultat est tronqué aux
trois premiers objets, ordre d'insertion conservé:

1. Ground < 60   -> charbon, puis protection (sel)
2. Flow < 60     -> carillon à vent
3. Light < 60    -> lampe ou attrape-soleil (pile ou face)
4. moins de 3    -> objet de l'élément nécessaire
5. moins de 3    -> objets génériques (haricots rouges, sel, attrape-soleil)
"""

import random
from collections.abc import Callable
from dataclasses import dataclass

from pungsu.domain.axis_scorer import axis_by_label
from pungsu.domain.catalog import (
    CATALOG,
    CHARCOAL,
    ELEMENT_ITEMS,
    GENERIC_FALLBACKS,
    SALT_JAR,
    SUN_CATCHER,
    WARM_LAMP,
    WIND_CHIME,
)
from pungsu.domain.entities import AxisLabel, AxisScore, Element, RecommendationItem

MAX_ITEMS = 3
WEAK_AXIS_THRESHOLD = 60

Coin = Callable[[], bool]


def unseeded_coin() -> bool:
    """Pile ou face non reproductible (comportement historique du choix lampe/attrape-soleil)."""
    return random.random() < 0.5  # noqa: S311


@dataclass(frozen=True)
class SelectionContext:
    """Ce que les règles peuvent consulter."""

    scores: dict[AxisLabel, int]
    needed: Element
    selected_count: int
    coin: Coin


@dataclass(frozen=True)
class Rule:
    """Règle déclarative: si `when(ctx)` alors proposer `items(ctx)` dans l'ordre."""

    name: str
    when: Callable[[SelectionContext], bool]
    items: Callable[[SelectionContext], tuple[int, ...]]
    fill_only: bool = False  # n'ajoute que tant qu'il reste de la place


def _weak(label: AxisLabel) -> Callable[[SelectionContext], bool]:
    return lambda ctx: ctx.scores[label] < WEAK_AXIS_THRESHOLD


def _not_full(ctx: SelectionContext) -> bool:
    return ctx.selected_count < MAX_ITEMS


RULES: tuple[Rule, ...] = (
    Rule("weak_ground", _weak(AxisLabel.GROUND), lambda ctx: (CHARCOAL, SALT_JAR)),
    Rule("weak_flow", _weak(AxisLabel.FLOW), lambda ctx: (WIND_CHIME,)),
    Rule(
        "weak_light",
        _weak(AxisLabel.LIGHT),
        lambda ctx: (WARM_LAMP,) if ctx.coin() else (SUN_CATCHER,),
    ),
    Rule("needed_element", _not_full, lambda ctx: (ELEMENT_ITEMS[ctx.needed],)),
    Rule("generic_fallback", _not_full, lambda ctx: GENERIC_FALLBACKS, fill_only=True),
)


def recommend_items(
    axes: list[AxisScore],
    needed: Element,
    coin: Coin | None = None,
    rules: tuple[Rule, ...] = RULES,
) -> list[RecommendationItem]:
    """Applique la table de règles et retourne au plus trois objets distincts.

    Args:
        axes: Les six axes calculés.
        needed: Élément nécessaire de la personne.
        coin: Tirage pile/face pour le choix lampe/attrape-soleil; non seedé par défaut.
        rules: Table de règles (surchargeable pour les tests ou l'extension du catalogue).

    Returns:
        list[RecommendationItem]: Objets retenus, dans l'ordre de priorité.
    """
    scores = {label: axis_by_label(axes, label).score for label in AxisLabel}
    selected: list[int] = []
    seen: set[int] = set()
    for rule in rules:
        ctx = SelectionContext(
            scores=scores,
            needed=needed,
            selected_count=len(selected),
            coin=coin or unseeded_coin,
        )
        if not rule.when(ctx):
            continue
        for item_id in rule.items(ctx):
            if rule.fill_only and len(selected) >= MAX_ITEMS:
                break
            if item_id in seen:
                continue
            seen.add(item_id)
            selected.append(item_id)
    return [CATALOG[item_id] for item_id in selected[:MAX_ITEMS]]
