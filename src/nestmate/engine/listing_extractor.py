"""
Extracción de campos de listing desde texto libre.

Se usa cuando un host pega el mensaje con el que publicaría la habitación
(chat, grupo, mail) y queremos prellenar el formulario de alta.
Cada campo se deriva de forma independiente y cae a su default si no aparece.
"""

import re
from typing import Optional

import structlog

from nestmate.config import (
    BASE_LANGUAGE,
    DEFAULT_ADDRESS,
    DEFAULT_DISTANCE,
    DEFAULT_RENT,
    DEFAULT_TITLE,
    DEFAULT_UTILITIES,
    DEFAULT_VIBE_TAGS,
    EXTRA_LANGUAGES,
    VIBE_TAGS,
    get_settings,
)
from nestmate.engine.delays import BaseDelay, build_parse_delay
from nestmate.engine.errors import ProcessingError, ValidationError
from nestmate.models import ListingDraft

logger = structlog.get_logger()

MISSING_MESSAGE_ERROR = "Message is required. Please try again or use the manual form."
PROCESSING_ERROR = "Failed to process message. Please try again or use the manual form."


class ListingFieldExtractor:
    """Extractor basado en keywords y regex. Puro: mismo texto, mismo draft."""

    # (keywords, título) en orden de prioridad
    TITLE_RULES: list[tuple[tuple[str, ...], str]] = [
        (("2br", "2 bedroom"), "Cozy 2BR near Campus"),
        (("studio",), "Modern Studio Apartment"),
        (("3br", "3 bedroom"), "Spacious 3BR House"),
        (("loft",), "Downtown Loft"),
    ]

    PET_KEYWORDS: tuple[str, ...] = ("pet", "dog", "cat")

    RENT_PATTERN = re.compile(r"\$(\d{1,4})")
    # Sólo el monto pegado a la palabra ("utilities: $95"), sin cruzar saltos de línea
    UTILITIES_PATTERN = re.compile(r"utilit(?:y|ies)[^\w\n]{0,12}?(\d{1,3})", re.IGNORECASE)
    DISTANCE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(?:miles?|mi)", re.IGNORECASE)
    ADDRESS_PATTERN = re.compile(r"\b(?:near|at|in)[ \t]+([A-Za-z][A-Za-z \t]*)", re.IGNORECASE)

    def __init__(self, delay: Optional[BaseDelay] = None):
        """
        Args:
            delay: Estrategia de latencia de parse() (default: fija según settings)
        """
        self._delay = delay or build_parse_delay(get_settings())

    def validate(self, message: object) -> str:
        """
        Verifica que haya mensaje.

        Raises:
            ValidationError: si falta o está vacío
            ProcessingError: si no es texto
        """
        if message is None or message == "":
            raise ValidationError(MISSING_MESSAGE_ERROR)
        if not isinstance(message, str):
            raise ProcessingError(PROCESSING_ERROR)
        return message

    def extract_title(self, message: str) -> str:
        lowered = message.lower()
        for keywords, title in self.TITLE_RULES:
            if any(keyword in lowered for keyword in keywords):
                return title
        return DEFAULT_TITLE

    def extract_rent(self, message: str) -> str:
        match = self.RENT_PATTERN.search(message)
        return match.group(1) if match else DEFAULT_RENT

    def extract_utilities(self, message: str) -> str:
        match = self.UTILITIES_PATTERN.search(message)
        return match.group(1) if match else DEFAULT_UTILITIES

    def extract_distance(self, message: str) -> str:
        match = self.DISTANCE_PATTERN.search(message)
        return match.group(1) if match else DEFAULT_DISTANCE

    def is_furnished(self, message: str) -> bool:
        return "furnished" in message.lower()

    def allows_pets(self, message: str) -> bool:
        lowered = message.lower()
        return any(keyword in lowered for keyword in self.PET_KEYWORDS)

    def extract_vibe_tags(self, message: str) -> list[str]:
        lowered = message.lower()
        tags = [tag for keyword, tag in VIBE_TAGS.items() if keyword in lowered]
        return tags or list(DEFAULT_VIBE_TAGS)

    def extract_languages(self, message: str) -> list[str]:
        lowered = message.lower()
        return [BASE_LANGUAGE] + [
            language for language in EXTRA_LANGUAGES if language.lower() in lowered
        ]

    def extract_address(self, message: str) -> str:
        """Texto después del primer near/at/in hasta la próxima puntuación."""
        match = self.ADDRESS_PATTERN.search(message)
        if not match:
            return DEFAULT_ADDRESS
        return match.group(1).strip()

    def extract(self, message: Optional[str]) -> ListingDraft:
        """
        Arma el ListingDraft a partir del mensaje.

        Raises:
            ValidationError: mensaje vacío o ausente
            ProcessingError: mensaje que no es texto
        """
        message = self.validate(message)
        return ListingDraft(
            title=self.extract_title(message),
            description=message,
            rent=self.extract_rent(message),
            utilities=self.extract_utilities(message),
            distance_to_campus=self.extract_distance(message),
            is_furnished=self.is_furnished(message),
            allows_pets=self.allows_pets(message),
            vibe_tags=self.extract_vibe_tags(message),
            languages=self.extract_languages(message),
            address=self.extract_address(message),
        )

    async def parse(self, message: Optional[str]) -> ListingDraft:
        """
        Versión con latencia simulada, usada por el endpoint.

        La validación ocurre antes del delay.
        """
        self.validate(message)
        await self._delay.wait()
        try:
            draft = self.extract(message)
        except (ValidationError, ProcessingError):
            raise
        except Exception as e:
            logger.error("Error procesando listing", error=str(e))
            raise ProcessingError(PROCESSING_ERROR) from e

        logger.info(
            "Listing parseado",
            title=draft.title,
            rent=draft.rent,
            vibe_tags=draft.vibe_tags,
        )
        return draft
