"""
Handlers HTTP de la API.

Cada handler atrapa todos los errores en su borde y los traduce
al envelope JSON del endpoint: nada se propaga sin manejar.
"""

from typing import Awaitable, Callable, Optional, Sequence

import structlog
from aiohttp import web
from pydantic import ValidationError as PydanticValidationError

from nestmate.engine import (
    FALLBACK_REPLY,
    ListingFieldExtractor,
    PaymentDeclinedError,
    ProcessingError,
    ResponseSelector,
    SixerService,
    ValidationError,
    build_suggestions,
)
from nestmate.engine.listing_extractor import PROCESSING_ERROR
from nestmate.engine.search_suggestions import MIN_QUERY_LENGTH
from nestmate.models import ChatRequest, ParseListingRequest, School, SixerRequest

logger = structlog.get_logger()

# query -> escuelas encontradas
SchoolLookup = Callable[[str], Awaitable[Sequence[School]]]


class ChatHandler:
    """POST /ai/chat: respuesta simulada del host."""

    def __init__(self, selector: ResponseSelector):
        self.selector = selector

    async def chat(self, request: web.Request) -> web.Response:
        try:
            payload = ChatRequest.model_validate(await request.json())
            reply = await self.selector.respond(payload.message, payload.context)
        except Exception as e:
            logger.error("Chat AI Error", error=str(e))
            return web.json_response(
                {
                    "success": False,
                    "error": "Failed to generate response",
                    "response": FALLBACK_REPLY,
                },
                status=500,
            )

        return web.json_response(
            {
                "success": True,
                "response": reply.text,
                "timestamp": reply.timestamp,
            }
        )


class ListingHandler:
    """POST /ai/parse-listing: mensaje pegado -> ListingDraft."""

    def __init__(self, extractor: ListingFieldExtractor):
        self.extractor = extractor

    async def parse_listing(self, request: web.Request) -> web.Response:
        try:
            body = await request.json()
            payload = ParseListingRequest.model_validate(
                body if isinstance(body, dict) else {}
            )
            listing = await self.extractor.parse(payload.message)
        except ValidationError as e:
            logger.warning("Parse listing sin mensaje", error=e.user_message)
            return web.json_response({"error": e.user_message}, status=400)
        except ProcessingError as e:
            logger.error("Error procesando listing", error=e.user_message)
            return web.json_response(
                {"success": False, "error": e.user_message}, status=500
            )
        except Exception as e:
            logger.error("Error procesando request", error=str(e))
            return web.json_response(
                {"success": False, "error": PROCESSING_ERROR}, status=500
            )

        return web.json_response({"success": True, "listing": listing.to_api_dict()})


class SixerHandler:
    """POST /sixer/start: pago simulado + matchmaking."""

    def __init__(self, service: SixerService):
        self.service = service

    async def start(self, request: web.Request) -> web.Response:
        try:
            body = await request.json()
            try:
                payload = SixerRequest.model_validate(body)
            except PydanticValidationError:
                # Tipos inesperados se tratan como ausentes
                payload = SixerRequest()
            result = await self.service.start(payload.amount, payload.currency)
        except (ValidationError, PaymentDeclinedError) as e:
            logger.warning("Sixer rechazado", error=e.user_message)
            return web.json_response({"error": e.user_message}, status=400)
        except Exception as e:
            logger.error("Sixer API error", error=str(e))
            return web.json_response({"error": "Internal server error"}, status=500)

        return web.json_response(result.to_api_dict())


class SearchHandler:
    """
    GET /search/suggestions: escuelas y reglas de ZIP de la barra de búsqueda.

    Sin school_lookup (la College Scorecard API es externa) sólo aplican
    las reglas de ZIP.
    """

    def __init__(self, school_lookup: Optional[SchoolLookup] = None):
        self.school_lookup = school_lookup

    async def suggestions(self, request: web.Request) -> web.Response:
        query = request.query.get("q", "")
        schools = None
        if self.school_lookup and len(query.strip()) >= MIN_QUERY_LENGTH:
            try:
                schools = await self.school_lookup(query)
            except Exception as e:
                logger.warning("Búsqueda de escuelas falló", query=query, error=str(e))
        suggestions = build_suggestions(query, schools)
        return web.json_response(
            {"suggestions": [s.model_dump() for s in suggestions]}
        )


async def health(_: web.Request) -> web.Response:
    return web.Response(text="ok")
