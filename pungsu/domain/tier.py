"""Agrégation des axes en score total, palier et accroche.

Seuils évalués dans l'ordre: >= 85 S, >= 70 A, <= 50 C, sinon B.
"""

import math

from pungsu.domain.entities import AxisScore, MoveStatus, Tier

TIER_S_MIN = 85
TIER_A_MIN = 70
TIER_C_MAX = 50

# (palier, statut) -> (main_copy, sub_copy); {name} et {terrain} sont interpolés
TIER_COPY: dict[tuple[Tier, MoveStatus], tuple[str, str]] = {
    (Tier.S, "moving"): (
        "{name}님, 이 집은 놓치면 안 될 명당입니다!",
        "{terrain}의 기운이 {name}님의 사주와 완벽하게 맞물립니다. 망설이지 말고 계약하세요.",
    ),
    (Tier.S, "living"): (
        "{name}님은 이미 명당에 살고 계십니다!",
        "{terrain}의 기운이 집안 가득 흐르고 있습니다. 지금의 흐름을 그대로 지켜주세요.",
    ),
    (Tier.A, "moving"): (
        "{name}님께 잘 맞는 좋은 집입니다.",
        "큰 흠이 없는 길한 터입니다. 작은 비보만 더하면 운이 한층 살아납니다.",
    ),
    (Tier.A, "living"): (
        "{name}님의 집은 복이 머무는 집입니다.",
        "전반적인 기운이 좋습니다. 부족한 한 가지만 채우면 재물운이 열립니다.",
    ),
    (Tier.B, "moving"): (
        "{name}님, 계약 전에 한 번 더 살펴보세요.",
        "장점과 약점이 공존하는 집입니다. 입주 전 비보를 준비하면 충분히 살 만합니다.",
    ),
    (Tier.B, "living"): (
        "{name}님의 집은 보완이 필요한 집입니다.",
        "기운이 새는 곳이 있습니다. 추천 소품으로 막힌 흐름을 틔워주세요.",
    ),
    (Tier.C, "moving"): (
        "{name}님, 이 집은 다시 생각해 보세요.",
        "나의 기운과 집의 기운이 크게 어긋납니다. 다른 후보지를 함께 비교해 보시길 권합니다.",
    ),
    (Tier.C, "living"): (
        "{name}님, 지금 집에 강한 비보가 시급합니다.",
        "기운이 흩어지는 형국입니다. 아래 처방을 서둘러 적용해 흐름을 바로잡으세요.",
    ),
}


def round_half_up(value: float) -> int:
    """Arrondi à l'entier, égalités vers le haut (61.5 -> 62), contrairement à `round`."""
    return int(math.floor(value + 0.5))


def total_score(axes: list[AxisScore]) -> int:
    """Moyenne arrondie des scores d'axes (0 pour une liste vide)."""
    if not axes:
        return 0
    return round_half_up(sum(axis.score for axis in axes) / len(axes))


def classify_tier(total: int) -> Tier:
    if total >= TIER_S_MIN:
        return Tier.S
    if total >= TIER_A_MIN:
        return Tier.A
    if total <= TIER_C_MAX:
        return Tier.C
    return Tier.B


def select_copy(tier: Tier, move_status: str, name: str, terrain: str) -> tuple[str, str]:
    """Retourne (main_copy, sub_copy) pour le palier et le statut de déménagement.

    Un statut inconnu est traité comme "living".
    """
    status = move_status if move_status in ("moving", "living") else "living"
    main_copy, sub_copy = TIER_COPY[(tier, status)]
    return main_copy.format(name=name, terrain=terrain), sub_copy.format(
        name=name, terrain=terrain
    )
