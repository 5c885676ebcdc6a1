"""
Script simple para probar el motor con un mensaje puntual, sin levantar la API.

Uso:
    python -m nestmate.scripts.try_message --listing "2BR near Times Square, $1500"
    python -m nestmate.scripts.try_message --chat "Is it still available?" --seed 42
    echo "studio, furnished" | python -m nestmate.scripts.try_message --listing -
"""

import argparse
import asyncio
import json
import random
import sys

import structlog

from nestmate.engine import (
    FALLBACK_REPLY,
    EngineError,
    ListingFieldExtractor,
    NoDelay,
    ResponseSelector,
)

# Configurar logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read().strip()
    return value


async def _run_listing(text: str) -> dict:
    extractor = ListingFieldExtractor(delay=NoDelay())
    draft = await extractor.parse(text)
    return {"success": True, "listing": draft.to_api_dict()}


async def _run_chat(text: str, seed) -> dict:
    selector = ResponseSelector(rng=random.Random(seed), delay=NoDelay())
    reply = await selector.respond(text)
    return {
        "success": True,
        "response": reply.text,
        "timestamp": reply.timestamp,
        "category": reply.category or "default",
    }


def main():
    parser = argparse.ArgumentParser(description="Probar el motor de nestmate")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--listing", help="Mensaje de host a parsear ('-' = stdin)")
    group.add_argument("--chat", help="Mensaje de chat a responder ('-' = stdin)")
    parser.add_argument("--seed", type=int, default=None, help="Semilla del generador")
    args = parser.parse_args()

    try:
        if args.listing is not None:
            result = asyncio.run(_run_listing(_read_text(args.listing)))
        else:
            result = asyncio.run(_run_chat(_read_text(args.chat), args.seed))
    except EngineError as e:
        logger.warning("El motor rechazó el mensaje", error=e.user_message)
        result = {"success": False, "error": e.user_message}
        if args.chat is not None:
            result["response"] = FALLBACK_REPLY
        print(json.dumps(result, indent=2, ensure_ascii=False))
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
