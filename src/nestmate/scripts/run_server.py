"""
Script para levantar la API HTTP.

Uso:
    python -m nestmate.scripts.run_server
    python -m nestmate.scripts.run_server --port 8080 --no-latency
"""

import argparse
import logging
import sys

import structlog
from aiohttp import web

from nestmate.api import create_app
from nestmate.config import get_settings

# Configurar logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s",
    force=True,
)

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


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="API de nestmate")
    parser.add_argument("--host", default=None, help="Host de escucha (default: settings)")
    parser.add_argument("--port", type=int, default=None, help="Puerto (default: settings)")
    parser.add_argument(
        "--no-latency",
        action="store_true",
        help="Desactiva los delays simulados",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point del servidor."""
    args = parse_args(argv)

    run_settings = settings
    if args.no_latency:
        run_settings = settings.model_copy(update={"simulate_latency": False})

    host = args.host or run_settings.server_host
    port = args.port or run_settings.server_port

    logger.info("Iniciando API de nestmate...", host=host, port=port)

    try:
        web.run_app(create_app(run_settings), host=host, port=port, print=None)
    except KeyboardInterrupt:
        logger.info("Servidor detenido por usuario")
        sys.exit(0)
    except Exception as e:
        logger.error("Error fatal en servidor", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
