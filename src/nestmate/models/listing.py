"""
Modelo ListingDraft

Borrador de listing derivado de un mensaje pegado por un host.
Se crea en cada llamada al extractor y no se persiste.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nestmate.config import (
    BASE_LANGUAGE,
    DEFAULT_ADDRESS,
    DEFAULT_DISTANCE,
    DEFAULT_RENT,
    DEFAULT_TITLE,
    DEFAULT_UTILITIES,
    DEFAULT_VIBE_TAGS,
)


class ListingDraft(BaseModel):
    """
    Listing estructurado armado a partir de texto libre.

    Los montos y la distancia se guardan como el texto decimal que
    apareció en el mensaje (o el default), igual que los devuelve la API.
    Para operar con ellos usar rent_amount, utilities_amount y distance_miles.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default=DEFAULT_TITLE, description="Título sugerido")
    description: str = Field(default="", description="Mensaje original completo")

    # Montos (texto decimal)
    rent: str = Field(default=DEFAULT_RENT, description="Alquiler mensual en USD")
    utilities: str = Field(default=DEFAULT_UTILITIES, description="Servicios mensuales en USD")
    distance_to_campus: str = Field(
        default=DEFAULT_DISTANCE,
        alias="distanceToCampus",
        description="Distancia al campus en millas",
    )

    # Flags
    is_furnished: bool = Field(default=False, alias="isFurnished")
    allows_pets: bool = Field(default=False, alias="allowsPets")

    # Vibra e idiomas
    vibe_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_VIBE_TAGS),
        min_length=1,
        alias="vibeTags",
    )
    languages: list[str] = Field(default_factory=lambda: [BASE_LANGUAGE])

    address: str = Field(default=DEFAULT_ADDRESS, description="Ubicación aproximada")

    @field_validator("vibe_tags")
    @classmethod
    def _dedupe_tags(cls, tags: list[str]) -> list[str]:
        return list(dict.fromkeys(tags))

    @field_validator("languages")
    @classmethod
    def _english_first(cls, languages: list[str]) -> list[str]:
        others = [lang for lang in dict.fromkeys(languages) if lang != BASE_LANGUAGE]
        return [BASE_LANGUAGE, *others]

    @property
    def rent_amount(self) -> Decimal:
        return Decimal(self.rent)

    @property
    def utilities_amount(self) -> Decimal:
        return Decimal(self.utilities)

    @property
    def distance_miles(self) -> Decimal:
        return Decimal(self.distance_to_campus)

    def to_api_dict(self) -> dict:
        """Convierte a diccionario camelCase para la respuesta JSON."""
        return self.model_dump(by_alias=True)
