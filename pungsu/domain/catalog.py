"""Catalogue fixe des objets de remède (비보) et leur rattachement aux axes/éléments."""

from pungsu.domain.entities import Element, RecommendationItem

CHARCOAL = 1
WIND_CHIME = 2
WARM_LAMP = 3
SUN_CATCHER = 4
INDOOR_FOUNTAIN = 5
SUNFLOWER_ART = 6
BRASS_OBJECT = 7
LEAFY_PLANT = 8
RED_BEANS = 9
SALT_JAR = 10

CATALOG: dict[int, RecommendationItem] = {
    item.id: item
    for item in (
        RecommendationItem(
            id=CHARCOAL,
            name="참숯 바구니",
            effect="지기 보강",
            description="숯이 땅의 탁한 기운을 빨아들여 약한 지기를 단단하게 다져줍니다.",
            search_keyword="인테리어 참숯 바구니",
            tag="지기 처방",
        ),
        RecommendationItem(
            id=WIND_CHIME,
            name="황동 풍경(윈드차임)",
            effect="기류 순환",
            description="맑은 소리가 정체된 기를 깨워 집안 구석까지 흐르게 합니다.",
            search_keyword="현관 풍경 윈드차임",
            tag="기류 처방",
        ),
        RecommendationItem(
            id=WARM_LAMP,
            name="웜톤 무드등",
            effect="양기 보충",
            description="어두운 공간에 인공 태양을 만들어 부족한 양기를 채워줍니다.",
            search_keyword="침실 무드등 웜톤",
            tag="채광 처방",
        ),
        RecommendationItem(
            id=SUN_CATCHER,
            name="크리스탈 썬캐쳐",
            effect="빛 확산",
            description="창가의 햇빛을 무지개로 흩뿌려 집안에 밝은 기운을 퍼뜨립니다.",
            search_keyword="크리스탈 썬캐쳐 창문",
            tag="행운 소품",
        ),
        RecommendationItem(
            id=INDOOR_FOUNTAIN,
            name="실내 분수대",
            effect="수(水) 기운",
            description="흐르는 물이 과한 화기를 식히고 재물이 순환하게 돕습니다.",
            search_keyword="인테리어 실내 분수대",
            tag="오행 맞춤",
        ),
        RecommendationItem(
            id=SUNFLOWER_ART,
            name="해바라기 액자",
            effect="화(火) 기운",
            description="강렬한 화의 기운이 차가운 기운을 녹이고 금전운을 끌어올립니다.",
            search_keyword="풍수 해바라기 액자",
            tag="오행 맞춤",
        ),
        RecommendationItem(
            id=BRASS_OBJECT,
            name="황동 오브제",
            effect="금(金) 기운",
            description="단단한 금속의 기운이 넘치는 목기를 다듬어 결실을 맺게 합니다.",
            search_keyword="황동 오브제 인테리어 소품",
            tag="오행 맞춤",
        ),
        RecommendationItem(
            id=LEAFY_PLANT,
            name="대형 관엽식물",
            effect="목(木) 기운",
            description="풍성한 잎이 생기를 더하고 날카로운 기운을 부드럽게 감쌉니다.",
            search_keyword="거실 공기정화 식물 여인초",
            tag="오행 맞춤",
        ),
        RecommendationItem(
            id=RED_BEANS,
            name="붉은 팥 주머니",
            effect="액운 차단",
            description="붉은 팥이 잡귀와 나쁜 기운을 막아주는 전통 비보입니다.",
            search_keyword="액막이 팥 주머니",
            tag="전통 비보",
        ),
        RecommendationItem(
            id=SALT_JAR,
            name="천일염 소금단지",
            effect="정화·보호",
            description="현관과 모서리의 탁한 기운을 정화하고 집을 지켜줍니다.",
            search_keyword="풍수 소금단지 천일염",
            tag="정화 처방",
        ),
    )
}

# Élément nécessaire -> objet qui l'apporte
ELEMENT_ITEMS: dict[Element, int] = {
    Element.WATER: INDOOR_FOUNTAIN,
    Element.FIRE: SUNFLOWER_ART,
    Element.METAL: BRASS_OBJECT,
    Element.WOOD: LEAFY_PLANT,
    Element.EARTH: SALT_JAR,
}

GENERIC_FALLBACKS: tuple[int, ...] = (RED_BEANS, SALT_JAR, SUN_CATCHER)
