"""
Calcul des six axes du radar de compatibilité.

Chaque règle est indépendante et n'utilise qu'une partie de l'entrée:

- Ground (지기): hachage des coordonnées, 45 sans position.
- Direction (향): élément de l'orientation comparé à l'élément nécessaire / de naissance.
- Balance (오행 균형): mois de naissance uniquement.
- WaterVein (수맥): hachage des coordonnées inversées, 50 sans position.
- Light (채광): table fixe par orientation.
- Flow (기류): présence d'une photo de la pièce.

Aucun aléa ici: les scores sont entièrement déterministes.
"""

from pungsu.domain.elements import direction_element
from pungsu.domain.entities import AxisLabel, AxisScore, Coordinates, Element, UserInput
from pungsu.domain.geohash import geo_hash

# Seuil au-delà duquel la citation de détail est affirmative
QUOTE_THRESHOLD = 70

GROUND_BASE = 40
GROUND_SPAN = 50
GROUND_WITHOUT_LOCATION = 45

WATER_VEIN_BASE = 60
WATER_VEIN_SPAN = 40
WATER_VEIN_WITHOUT_LOCATION = 50

DIRECTION_UNKNOWN = 50
DIRECTION_SUPPLIES_NEEDED = 90
DIRECTION_OVERLOAD = 40
DIRECTION_NEUTRAL = 70

BALANCE_BASE = 60
BALANCE_STEP = 10

LIGHT_SCORES: dict[str, int] = {"S": 95, "E": 80, "W": 70, "UNKNOWN": 50}
LIGHT_DEFAULT = 40

FLOW_WITH_IMAGE = 85
FLOW_WITHOUT_IMAGE = 55

TERRAIN_TYPES: tuple[str, ...] = (
    "배산임수(背山臨水)형 명당",
    "장풍득수(藏風得水)형 분지",
    "평탄한 평지형 주거지",
    "반궁수(反弓水)형 도로변",
    "물이 마른 건조 고지대",
)
UNKNOWN_TERRAIN = "미확인 지형"
# Terrains défavorables: déclenchent l'avertissement de localisation
BAD_TERRAINS = frozenset({"반궁수(反弓水)형 도로변", "물이 마른 건조 고지대"})

AXIS_DESCRIPTIONS: dict[AxisLabel, str] = {
    AxisLabel.GROUND: "땅이 품은 기운의 세기",
    AxisLabel.DIRECTION: "집의 향과 나의 오행 궁합",
    AxisLabel.BALANCE: "타고난 오행의 균형도",
    AxisLabel.WATER_VEIN: "지하 수맥의 안정성",
    AxisLabel.LIGHT: "햇빛이 드는 양기의 양",
    AxisLabel.FLOW: "실내 기(氣)의 순환",
}

# (affirmatif, prudent)
AXIS_QUOTES: dict[AxisLabel, tuple[str, str]] = {
    AxisLabel.GROUND: (
        "땅의 기운이 단단하여 머무는 사람의 기반을 든든하게 받쳐줍니다.",
        "지기가 약해 기운이 쉽게 흩어집니다. 바닥의 기운을 보강하는 비보가 필요합니다.",
    ),
    AxisLabel.DIRECTION: (
        "집의 향이 부족한 오행을 채워주어 들어오는 복을 붙잡는 형국입니다.",
        "집의 향이 나의 기운과 부딪히거나 겹쳐 피로가 쌓이기 쉽습니다.",
    ),
    AxisLabel.BALANCE: (
        "타고난 오행이 고르게 어우러져 작은 비보로도 큰 효과를 봅니다.",
        "오행이 한쪽으로 치우쳐 있어 공간에서 균형을 잡아주어야 합니다.",
    ),
    AxisLabel.WATER_VEIN: (
        "수맥이 안정적으로 흘러 숙면과 건강에 유리한 터입니다.",
        "수맥의 흐름이 불안정해 침대 위치를 신중하게 정해야 합니다.",
    ),
    AxisLabel.LIGHT: (
        "양명한 햇살이 깊숙이 들어와 집안에 생기가 가득합니다.",
        "채광이 부족해 음기가 고이기 쉽습니다. 인공 조명으로 양기를 채워주세요.",
    ),
    AxisLabel.FLOW: (
        "가구 배치가 기의 흐름을 막지 않아 순환이 원활합니다.",
        "기의 흐름이 정체되어 있습니다. 현관과 창가를 비워 바람길을 열어주세요.",
    ),
}


def _axis(label: AxisLabel, score: int) -> AxisScore:
    affirmative, cautionary = AXIS_QUOTES[label]
    return AxisScore(
        label=label,
        score=score,
        description=AXIS_DESCRIPTIONS[label],
        detail_quote=affirmative if score > QUOTE_THRESHOLD else cautionary,
    )


def terrain_label(coordinates: Coordinates | None) -> str:
    """Type de terrain (texte narratif uniquement, sans effet sur les scores)."""
    if coordinates is None:
        return UNKNOWN_TERRAIN
    return TERRAIN_TYPES[geo_hash(coordinates.lat, coordinates.lng) % len(TERRAIN_TYPES)]


def ground_score(coordinates: Coordinates | None) -> int:
    """40 + hash % 50 avec position, 45 sinon (absence de position pénalisée)."""
    if coordinates is None:
        return GROUND_WITHOUT_LOCATION
    return GROUND_BASE + geo_hash(coordinates.lat, coordinates.lng) % GROUND_SPAN


def direction_score(direction: str, user_el: Element, needed_el: Element) -> int:
    """90 si la maison apporte l'élément nécessaire, 40 si elle répète le sien, 70 sinon."""
    if direction == "UNKNOWN":
        return DIRECTION_UNKNOWN
    house_el = direction_element(direction)
    if house_el == needed_el:
        return DIRECTION_SUPPLIES_NEEDED
    if house_el == user_el:
        return DIRECTION_OVERLOAD
    return DIRECTION_NEUTRAL


def balance_score(month: int) -> int:
    return BALANCE_BASE + (month % 4) * BALANCE_STEP


def water_vein_score(coordinates: Coordinates | None) -> int:
    """Même hachage que Ground mais arguments inversés (lng, lat): valeur différente."""
    if coordinates is None:
        return WATER_VEIN_WITHOUT_LOCATION
    return WATER_VEIN_BASE + geo_hash(coordinates.lng, coordinates.lat) % WATER_VEIN_SPAN


def light_score(direction: str) -> int:
    # correspondance exacte: les diagonales tombent sur la valeur par défaut
    return LIGHT_SCORES.get(direction, LIGHT_DEFAULT)


def flow_score(has_image: bool) -> int:
    return FLOW_WITH_IMAGE if has_image else FLOW_WITHOUT_IMAGE


def score_axes(
    user: UserInput, user_el: Element, needed_el: Element, month: int
) -> list[AxisScore]:
    """Calcule les six axes dans l'ordre fixe du radar.

    Args:
        user: Entrée du questionnaire.
        user_el: Élément de naissance.
        needed_el: Élément nécessaire.
        month: Mois de naissance (0 si la date est illisible).

    Returns:
        list[AxisScore]: Ground, Direction, Balance, WaterVein, Light, Flow.
    """
    return [
        _axis(AxisLabel.GROUND, ground_score(user.coordinates)),
        _axis(
            AxisLabel.DIRECTION, direction_score(user.house_direction, user_el, needed_el)
        ),
        _axis(AxisLabel.BALANCE, balance_score(month)),
        _axis(AxisLabel.WATER_VEIN, water_vein_score(user.coordinates)),
        _axis(AxisLabel.LIGHT, light_score(user.house_direction)),
        _axis(AxisLabel.FLOW, flow_score(user.has_image)),
    ]


def axis_by_label(axes: list[AxisScore], label: AxisLabel) -> AxisScore:
    """Retrouve un axe par son libellé."""
    return next(axis for axis in axes if axis.label == label)
