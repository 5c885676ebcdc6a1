"""
API HTTP de nestmate (aiohttp).

Expone el chat simulado, el parser de listings, el Sixer
y las sugerencias de búsqueda.
"""

from nestmate.api.app import create_app
from nestmate.api.handlers import ChatHandler, ListingHandler, SixerHandler, SearchHandler

__all__ = [
    "create_app",
    "ChatHandler",
    "ListingHandler",
    "SixerHandler",
    "SearchHandler",
]
