"""
Modelos de la barra de búsqueda de la home (escuelas y códigos ZIP).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class School(BaseModel):
    """Escuela tal como la devuelve la College Scorecard API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | int | None = None
    name: str = Field(..., alias="school.name")
    city: str = Field(..., alias="school.city")
    state: str = Field(..., alias="school.state")


class SearchSuggestion(BaseModel):
    """Sugerencia mostrada debajo de la barra de búsqueda."""

    type: Literal["school", "zip"]
    value: str
    display: str
