# Schémas Pydantic exposés par l'API (requêtes et réponses).

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pungsu.domain.entities import AnalysisResult, Coordinates, HouseDirection, UserInput

MAX_NAME_LENGTH = 50


class CoordinatesIn(BaseModel):
    """Position choisie sur la carte (degrés décimaux, bornés)."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class AnalysisRequest(BaseModel):
    """Modèle de requête du questionnaire (JSON camelCase).

    Champs:
    - name: str (non vide, 50 caractères max)
    - birthDate: date ISO (YYYY-MM-DD)
    - houseDirection: N/S/E/W/NE/NW/SE/SW/UNKNOWN
    - coordinates: {lat, lng} ou null
    - hasImage: bool (photo de la pièce fournie)
    - moveStatus: "moving" | "living"
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    birth_date: dt.date
    house_direction: HouseDirection = "UNKNOWN"
    coordinates: CoordinatesIn | None = None
    has_image: bool = False
    move_status: Literal["moving", "living"] = "living"

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped

    def to_user_input(self) -> UserInput:
        """Convertit la requête validée en entrée du moteur."""
        coordinates = (
            Coordinates(lat=self.coordinates.lat, lng=self.coordinates.lng)
            if self.coordinates is not None
            else None
        )
        return UserInput(
            name=self.name,
            birth_date=self.birth_date.isoformat(),
            house_direction=self.house_direction,
            coordinates=coordinates,
            has_image=self.has_image,
            move_status=self.move_status,
        )


class ShoppingLink(BaseModel):
    """Lien de recherche marchande pour un objet recommandé."""

    id: int
    url: str


class AnalysisResponse(AnalysisResult):
    """Résultat d'analyse enrichi des liens marchands (couche présentation)."""

    shopping_links: list[ShoppingLink] = Field(default_factory=list)
