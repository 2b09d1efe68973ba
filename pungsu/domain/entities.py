"""
Entités du domaine métier.

Ce module définit les objets-valeurs (immuables) échangés par le moteur de compatibilité
feng-shui: l'entrée du questionnaire et le résultat d'analyse consommé par l'affichage.
Les modèles se sérialisent en camelCase (`totalScore`, `radarData`, ...) pour le front.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HouseDirection = Literal["N", "S", "E", "W", "NE", "NW", "SE", "SW", "UNKNOWN"]
MoveStatus = Literal["moving", "living"]


class ValueObject(BaseModel):
    """Base commune: immuable, alias camelCase, construction possible par nom de champ."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Element(str, Enum):
    """Les cinq éléments (오행)."""

    WOOD = "Wood"
    FIRE = "Fire"
    EARTH = "Earth"
    METAL = "Metal"
    WATER = "Water"


class AxisLabel(str, Enum):
    """Axes du radar, dans l'ordre d'affichage."""

    GROUND = "Ground"
    DIRECTION = "Direction"
    BALANCE = "Balance"
    WATER_VEIN = "WaterVein"
    LIGHT = "Light"
    FLOW = "Flow"


class Tier(str, Enum):
    """Palier de qualité, S > A > B > C."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"


class Coordinates(ValueObject):
    """Position du logement (degrés décimaux)."""

    lat: float
    lng: float


class UserInput(ValueObject):
    """Données issues du questionnaire.

    Aucun champ n'est validé par le moteur au-delà de son type: une date illisible
    retombe sur l'élément Eau (voir `elements.birth_month`).
    """

    name: str
    birth_date: str  # YYYY-MM-DD
    house_direction: str = "UNKNOWN"
    coordinates: Coordinates | None = None
    has_image: bool = False
    move_status: MoveStatus = "living"


class AxisScore(ValueObject):
    """Score d'un axe du radar (0 à 100)."""

    label: AxisLabel
    score: int = Field(ge=0, le=100)
    description: str
    detail_quote: str


class RecommendationItem(ValueObject):
    """Objet de remède (비보) du catalogue."""

    id: int
    name: str
    effect: str
    description: str
    search_keyword: str
    tag: str


class ReportSection(ValueObject):
    """Section du rapport premium; `content` contient des phrases avec des `**spans**` en gras."""

    title: str
    icon: str
    content: list[str]


class PremiumReport(ValueObject):
    """Rapport long format débloqué par le paiement."""

    title: str
    price: str
    original_price: str
    sections: list[ReportSection]


class AnalysisResult(ValueObject):
    """Résultat complet d'une analyse, consommé par le radar, le score et le paywall."""

    total_score: int = Field(ge=0, le=100)
    tier: Tier
    radar_data: list[AxisScore] = Field(min_length=6, max_length=6)
    main_copy: str
    sub_copy: str
    location_analysis: str
    premium_report: PremiumReport
    items: list[RecommendationItem] = Field(max_length=3)
    user_element: Element
    needed_element: Element
    terrain: str
    element_summary: str
    location_warning: str
    vision_analysis: str = ""  # vide sans photo de la pièce
