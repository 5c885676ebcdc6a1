"""
Motor de reglas de nestmate.

Provee el selector de respuestas del chat, el extractor de listings,
el checkout simulado del Sixer y las sugerencias de búsqueda.
"""

from nestmate.engine.errors import (
    EngineError,
    ValidationError,
    ProcessingError,
    PaymentDeclinedError,
)
from nestmate.engine.delays import (
    BaseDelay,
    NoDelay,
    FixedDelay,
    RandomDelay,
    build_chat_delay,
    build_parse_delay,
    build_fixed_delay,
)
from nestmate.engine.response_selector import (
    ResponseSelector,
    ResponseCategory,
    SelectedReply,
    DEFAULT_CATEGORIES,
    DEFAULT_REPLY,
    FOLLOW_UPS,
    FALLBACK_REPLY,
)
from nestmate.engine.listing_extractor import ListingFieldExtractor
from nestmate.engine.sixer import SixerService
from nestmate.engine.search_suggestions import build_suggestions, is_valid_zip

__all__ = [
    # Errores
    "EngineError",
    "ValidationError",
    "ProcessingError",
    "PaymentDeclinedError",
    # Latencia
    "BaseDelay",
    "NoDelay",
    "FixedDelay",
    "RandomDelay",
    "build_chat_delay",
    "build_parse_delay",
    "build_fixed_delay",
    # Chat
    "ResponseSelector",
    "ResponseCategory",
    "SelectedReply",
    "DEFAULT_CATEGORIES",
    "DEFAULT_REPLY",
    "FOLLOW_UPS",
    "FALLBACK_REPLY",
    # Listings
    "ListingFieldExtractor",
    # Sixer
    "SixerService",
    # Búsqueda
    "build_suggestions",
    "is_valid_zip",
]
