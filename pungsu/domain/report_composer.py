"""
Composition du rapport narratif premium.

Trois sections sont assemblées par interpolation de gabarits:

1. analyse du terrain (coordonnées, type de terrain, score Ground);
2. conseils de placement et de remède, formulés selon le statut (déménagement / résidence);
3. codes porte-bonheur personnels (numéros, couleur, direction).

Les variantes de formulation sont choisies par le `SeededVariation` reçu en argument.
L'ordre des appels est fixe (section 1, section 2, numéros, section 3, puis le constat photo
s'il y a une photo): le modifier change le texte produit pour une même personne. Les
passages entre `**` sont rendus en gras par la couche d'affichage.
"""

from pungsu.domain.axis_scorer import BAD_TERRAINS
from pungsu.domain.elements import ELEMENT_LABELS_KO, direction_label
from pungsu.domain.entities import (
    Coordinates,
    Element,
    PremiumReport,
    RecommendationItem,
    ReportSection,
    Tier,
)
from pungsu.domain.geohash import to_fixed4
from pungsu.domain.recommender import WEAK_AXIS_THRESHOLD
from pungsu.domain.variation import SeededVariation

UNKNOWN_LOCATION = "미확인"
DEFAULT_REMEDY = "기본 정화 소품"

LUCKY_COLORS: dict[Element, str] = {
    Element.WOOD: "초록색",
    Element.FIRE: "빨간색",
    Element.EARTH: "황토색",
    Element.METAL: "흰색",
    Element.WATER: "검정·남색",
}

LUCKY_DIRECTIONS: dict[Element, str] = {
    Element.WOOD: "동쪽",
    Element.FIRE: "남쪽",
    Element.EARTH: "중앙",
    Element.METAL: "서쪽",
    Element.WATER: "북쪽",
}

TERRAIN_OPENINGS = (
    "{name}님의 집은 {location} 지점에 자리하고 있습니다.",
    "좌표 {location}을(를) 중심으로 주변 산세와 물길을 살펴보았습니다.",
    "지도상 {location} 위치의 땅 기운을 정밀하게 읽어보았습니다.",
)
TERRAIN_READINGS = (
    "이 일대는 **{terrain}**의 형세를 띠고 있습니다.",
    "주변 지형은 전형적인 **{terrain}**에 해당합니다.",
)
GROUND_VERDICTS_STRONG = (
    "지기 점수 **{ground}점**으로, 땅이 사람을 받쳐주는 힘이 충분합니다.",
    "지기 점수는 **{ground}점**, 기반이 단단해 오래 머물수록 복이 쌓입니다.",
)
GROUND_VERDICTS_WEAK = (
    "지기 점수 **{ground}점**으로, 땅의 기운이 약해 바닥을 보강하는 비보가 필요합니다.",
    "지기 점수는 **{ground}점**에 그쳐 기운이 쉽게 새어 나갑니다.",
)

ELEMENT_OPENINGS = (
    "{name}님은 **{user_el}**의 기운을 타고났으며, 균형을 위해 **{needed_el}** 기운이 필요합니다.",
    "타고난 기운은 **{user_el}**, 채워야 할 기운은 **{needed_el}**입니다.",
)
MOVING_GUIDANCE = (
    "**{direction}** 집으로 이사한다면 입주 첫날 현관에 **{item}**부터 들여놓으세요.",
    "새 집이 **{direction}**이라면 짐을 풀기 전에 **{item}**을(를) 먼저 자리잡게 하세요.",
)
LIVING_GUIDANCE = (
    "지금 사는 **{direction}** 집에는 거실 중심에 **{item}**을(를) 두는 것이 가장 효과적입니다.",
    "현재 **{direction}** 집의 기운을 살리려면 **{item}**을(를) 현관이나 창가에 배치하세요.",
)
TIER_CLOSINGS: dict[Tier, str] = {
    Tier.S: "이미 **S등급** 명당이니 현재의 배치를 크게 바꾸지 마세요.",
    Tier.A: "**A등급**의 좋은 집으로, 작은 보완만으로 운이 한층 살아납니다.",
    Tier.B: "**B등급**으로 장단점이 공존하니 추천 비보를 꼭 적용해 보세요.",
    Tier.C: "**C등급**으로 기운이 흩어지기 쉬우니 처방을 서둘러 적용하세요.",
}

LUCKY_NUMBER_LINES = (
    "행운의 숫자는 **{first}**과(와) **{second}**입니다.",
    "{name}님께 복을 부르는 숫자는 **{first}**, **{second}**입니다.",
)
LUCKY_COLOR_LINES = (
    "행운의 색은 **{color}**이며, 침구나 커튼에 활용하면 좋습니다.",
    "**{color}** 계열의 소품이 부족한 기운을 보충해 줍니다.",
)
LUCKY_DIRECTION_LINES = (
    "중요한 일을 앞두고는 **{direction}**을 바라보고 앉으세요.",
    "책상이나 침대 머리를 **{direction}**으로 두면 기운이 모입니다.",
)


ELEMENT_SUMMARIES: dict[Element, str] = {
    Element.WOOD: (
        "봄의 나무처럼 뻗어나가는 기운입니다. 가지치기를 해줄 '금(Metal)' 기운이 있어야 "
        "결실을 맺습니다."
    ),
    Element.FIRE: (
        "타고난 불의 기운이 강해 성격이 급하고 열정이 넘칩니다. 이를 식혀줄 '수(Water)' "
        "기운이 집안에 흘러야 재물이 모입니다."
    ),
    Element.EARTH: (
        "넓은 대지처럼 묵직하고 안정된 기운입니다. 뿌리를 내려 흙을 살리는 '목(Wood)' "
        "기운이 있어야 정체되지 않습니다."
    ),
    Element.METAL: (
        "가을의 서늘하고 날카로운 금 기운입니다. 단단함을 녹여줄 '화(Fire)' 기운이 있어야 "
        "인복이 따릅니다."
    ),
    Element.WATER: (
        "겨울의 차가운 물 기운을 타고났습니다. 물길을 잡아줄 '토(Earth)' 기운이 없으면 "
        "마음이 쉽게 흔들릴 수 있습니다."
    ),
}

LOCATION_WARNING_BAD = "주의! 지리적 요건이 좋지 않아 특별한 비보(풍수적 처방)가 필요합니다."
LOCATION_WARNING_GOOD = "지리적 요건은 양호합니다. 내부 인테리어에만 집중하세요."
LOCATION_WARNING_MISSING = "위치 정보 미입력으로 정밀 분석이 제한됩니다."

VISION_FINDINGS = (
    "침대 헤드가 창문을 등지고 있어 기가 산란됩니다. 두꺼운 커튼이 필수입니다.",
    "현관에서 들어오자마자 거울이 보입니다. 들어오는 복을 반사해 내보내는 형국이니 "
    "거울을 치우거나 가려야 합니다.",
    "전반적인 가구 배치는 안정적이나, 방의 모서리에 죽은 공간이 있습니다. "
    "이곳에 조명을 두어 양기를 채워주세요.",
    "책상이 문을 등지고 있어 심리적 불안감을 조성할 수 있습니다. "
    "문을 대각선으로 바라보는 위치로 이동하세요.",
)


def element_summary(user_el: Element) -> str:
    """Résumé de caractère associé à l'élément de naissance."""
    return ELEMENT_SUMMARIES[user_el]


def location_warning(coordinates: Coordinates | None, terrain: str) -> str:
    """Avertissement géographique: position manquante, terrain défavorable ou favorable."""
    if coordinates is None:
        return LOCATION_WARNING_MISSING
    if terrain in BAD_TERRAINS:
        return LOCATION_WARNING_BAD
    return LOCATION_WARNING_GOOD


def vision_analysis(variation: SeededVariation, has_image: bool) -> str:
    """Constat d'aménagement tiré de la photo de la pièce; vide sans photo.

    Ne consomme une valeur du générateur que si une photo est fournie, après les sections
    du rapport.
    """
    if not has_image:
        return ""
    return variation.pick(VISION_FINDINGS)


def format_location(coordinates: Coordinates | None) -> str:
    """`"lat, lng"` (4 décimales) ou "미확인" sans position."""
    if coordinates is None:
        return UNKNOWN_LOCATION
    return f"{to_fixed4(coordinates.lat)}, {to_fixed4(coordinates.lng)}"


def location_analysis(coordinates: Coordinates | None, terrain: str, ground: int) -> str:
    """Paragraphe d'analyse de localisation affiché gratuitement."""
    if coordinates is None:
        return (
            "정확한 지리 분석을 건너뛰고 기본 지기(地氣) 분석만 수행했습니다. "
            "집의 정확한 위치를 입력하면 주변의 수맥과 도로 살기를 파악할 수 있습니다."
        )
    return (
        f"{format_location(coordinates)} 일대는 {terrain}의 형세이며, "
        f"지기 점수는 {ground}점입니다."
    )


def _terrain_section(
    variation: SeededVariation,
    name: str,
    coordinates: Coordinates | None,
    terrain: str,
    ground: int,
) -> ReportSection:
    location = format_location(coordinates)
    verdicts = GROUND_VERDICTS_STRONG if ground >= WEAK_AXIS_THRESHOLD else GROUND_VERDICTS_WEAK
    content = [
        variation.pick(TERRAIN_OPENINGS).format(name=name, location=location),
        variation.pick(TERRAIN_READINGS).format(terrain=terrain),
        variation.pick(verdicts).format(ground=ground),
    ]
    return ReportSection(title="지리·지형 정밀 분석", icon="map", content=content)


def _placement_section(
    variation: SeededVariation,
    name: str,
    user_el: Element,
    needed_el: Element,
    house_direction: str,
    move_status: str,
    tier: Tier,
    items: list[RecommendationItem],
) -> ReportSection:
    item = items[0].name if items else DEFAULT_REMEDY
    guidance = MOVING_GUIDANCE if move_status == "moving" else LIVING_GUIDANCE
    title = "이사 전 배치 & 비보 가이드" if move_status == "moving" else "현재 집 배치 & 비보 가이드"
    content = [
        variation.pick(ELEMENT_OPENINGS).format(
            name=name,
            user_el=ELEMENT_LABELS_KO[user_el],
            needed_el=ELEMENT_LABELS_KO[needed_el],
        ),
        variation.pick(guidance).format(direction=direction_label(house_direction), item=item),
        TIER_CLOSINGS[tier],
    ]
    return ReportSection(title=title, icon="compass", content=content)


def _lucky_section(
    variation: SeededVariation, name: str, needed_el: Element
) -> ReportSection:
    first, second = variation.lucky_numbers()
    content = [
        variation.pick(LUCKY_NUMBER_LINES).format(name=name, first=first, second=second),
        variation.pick(LUCKY_COLOR_LINES).format(color=LUCKY_COLORS[needed_el]),
        variation.pick(LUCKY_DIRECTION_LINES).format(direction=LUCKY_DIRECTIONS[needed_el]),
    ]
    return ReportSection(title="나만의 행운 코드", icon="sparkles", content=content)


def compose_report(
    variation: SeededVariation,
    *,
    name: str,
    coordinates: Coordinates | None,
    terrain: str,
    ground: int,
    user_el: Element,
    needed_el: Element,
    house_direction: str,
    move_status: str,
    tier: Tier,
    items: list[RecommendationItem],
    price: str,
    original_price: str,
) -> PremiumReport:
    """Assemble le rapport premium en trois sections.

    Args:
        variation: Générateur propre à cette analyse (son curseur avance).
        name: Nom de la personne.
        coordinates: Position du logement, ou None.
        terrain: Type de terrain calculé.
        ground: Score de l'axe Ground.
        user_el: Élément de naissance.
        needed_el: Élément nécessaire.
        house_direction: Orientation brute (code).
        move_status: "moving" ou "living".
        tier: Palier obtenu.
        items: Objets recommandés (le premier est cité dans les conseils).
        price: Prix affiché.
        original_price: Prix barré.

    Returns:
        PremiumReport: Titre, prix et sections ordonnées.
    """
    sections = [
        _terrain_section(variation, name, coordinates, terrain, ground),
        _placement_section(
            variation, name, user_el, needed_el, house_direction, move_status, tier, items
        ),
        _lucky_section(variation, name, needed_el),
    ]
    return PremiumReport(
        title=f"{name}님의 풍수 정밀 리포트",
        price=price,
        original_price=original_price,
        sections=sections,
    )
