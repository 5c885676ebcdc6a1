"""
Aplicación aiohttp de nestmate.

Arma los componentes del motor según settings y registra las rutas.
"""

import random
from typing import Optional

import structlog
from aiohttp import web

from nestmate.api.handlers import (
    ChatHandler,
    ListingHandler,
    SearchHandler,
    SixerHandler,
    SchoolLookup,
    health,
)
from nestmate.config import Settings, get_settings
from nestmate.engine import (
    ListingFieldExtractor,
    ResponseSelector,
    SixerService,
    build_chat_delay,
    build_fixed_delay,
    build_parse_delay,
)

logger = structlog.get_logger()


def create_app(
    settings: Optional[Settings] = None,
    selector: Optional[ResponseSelector] = None,
    extractor: Optional[ListingFieldExtractor] = None,
    sixer: Optional[SixerService] = None,
    school_lookup: Optional[SchoolLookup] = None,
) -> web.Application:
    """
    Crea la aplicación web.

    Args:
        settings: Configuración (default: get_settings())
        selector: Selector de respuestas del chat
        extractor: Extractor de listings
        sixer: Servicio de Sixer
        school_lookup: Búsqueda async de escuelas (default: sólo reglas de ZIP)

    Returns:
        web.Application lista para correr
    """
    settings = settings or get_settings()
    rng = random.Random(settings.random_seed)

    selector = selector or ResponseSelector(
        rng=rng,
        delay=build_chat_delay(settings, rng),
        follow_up_probability=settings.follow_up_probability,
    )
    extractor = extractor or ListingFieldExtractor(delay=build_parse_delay(settings))
    sixer = sixer or SixerService(
        rng=rng,
        payment_delay=build_fixed_delay(settings, settings.sixer_payment_delay),
        matchmaking_delay=build_fixed_delay(settings, settings.sixer_matchmaking_delay),
        price_cents=settings.sixer_price_cents,
        currency=settings.sixer_currency,
        success_rate=settings.sixer_payment_success_rate,
    )

    chat = ChatHandler(selector)
    listings = ListingHandler(extractor)
    sixer_handler = SixerHandler(sixer)
    search = SearchHandler(school_lookup)

    app = web.Application()
    app.router.add_post("/ai/chat", chat.chat)
    app.router.add_post("/ai/parse-listing", listings.parse_listing)
    app.router.add_post("/sixer/start", sixer_handler.start)
    app.router.add_get("/search/suggestions", search.suggestions)
    app.router.add_get("/health", health)

    logger.info(
        "App inicializada",
        simulate_latency=settings.simulate_latency,
        seeded=settings.random_seed is not None,
    )
    return app
