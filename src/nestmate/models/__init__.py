"""
Modelos de datos del sistema.

- ListingDraft: listing derivado de texto libre
- Chat: payloads de los endpoints de IA simulada
- Sixer: checkout simulado de matching exprés
- Search: sugerencias de la barra de búsqueda
"""

from nestmate.models.listing import ListingDraft
from nestmate.models.chat import ChatContext, ChatRequest, ParseListingRequest
from nestmate.models.sixer import (
    SixerRequest,
    PaymentResult,
    MatchmakingResult,
    SixerResult,
)
from nestmate.models.search import School, SearchSuggestion

__all__ = [
    # Listing
    "ListingDraft",
    # Chat
    "ChatContext",
    "ChatRequest",
    "ParseListingRequest",
    # Sixer
    "SixerRequest",
    "PaymentResult",
    "MatchmakingResult",
    "SixerResult",
    # Search
    "School",
    "SearchSuggestion",
]
