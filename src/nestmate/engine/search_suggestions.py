"""
Reglas de sugerencias de la barra de búsqueda de la home.

Si la búsqueda de escuelas no devuelve nada, se ofrece buscar por ZIP.
"""

import re
from typing import Iterable, Optional

from nestmate.models import School, SearchSuggestion

ZIP_PATTERN = re.compile(r"^\d{5}$")

MIN_QUERY_LENGTH = 2
MIN_PROMPT_LENGTH = 3

ZIP_PROMPT = "Enter a 5-digit ZIP code to search by location"


def is_valid_zip(value: str) -> bool:
    """True si el valor es un código ZIP de exactamente 5 dígitos."""
    return bool(ZIP_PATTERN.fullmatch(value or ""))


def build_suggestions(
    query: str, schools: Optional[Iterable[School]] = None
) -> list[SearchSuggestion]:
    """
    Arma las sugerencias para la query.

    Args:
        query: Texto tipeado (ya debounced)
        schools: Escuelas encontradas, o None si no se consultó

    Returns:
        Escuelas si hay; si no, sugerencia/pedido de ZIP según la query
    """
    schools = list(schools or [])
    if schools:
        return [
            SearchSuggestion(
                type="school",
                value=f"{school.name}, {school.city}, {school.state}",
                display=f"{school.name} • {school.city}, {school.state}",
            )
            for school in schools
        ]

    query = (query or "").strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    if is_valid_zip(query):
        return [
            SearchSuggestion(type="zip", value=query, display=f"Search by ZIP: {query}")
        ]
    if len(query) >= MIN_PROMPT_LENGTH:
        return [SearchSuggestion(type="zip", value="", display=ZIP_PROMPT)]
    return []
