"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py -> nestmate/ -> src/ -> raíz del proyecto (donde está el .env)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Servidor HTTP
    server_host: str = Field("0.0.0.0", description="Host de escucha del servidor")
    server_port: int = Field(8000, description="Puerto del servidor")

    # Latencia simulada
    simulate_latency: bool = Field(
        True, description="Si es False, los endpoints responden sin delay artificial"
    )
    chat_delay_min: float = Field(1.0, ge=0.0, description="Delay mínimo del chat (segundos)")
    chat_delay_max: float = Field(3.0, ge=0.0, description="Delay máximo del chat (segundos)")
    parse_listing_delay: float = Field(
        2.0, ge=0.0, description="Delay fijo del parser de listings (segundos)"
    )

    # Chat
    follow_up_probability: float = Field(
        0.5, ge=0.0, le=1.0, description="Probabilidad de agregar una pregunta de seguimiento"
    )
    random_seed: Optional[int] = Field(
        None, description="Semilla para respuestas reproducibles (None = aleatorio)"
    )

    # Sixer
    sixer_price_cents: int = Field(699, description="Precio del Sixer en centavos")
    sixer_currency: str = Field("usd", description="Moneda aceptada por el Sixer")
    sixer_payment_success_rate: float = Field(
        0.9, ge=0.0, le=1.0, description="Tasa de éxito del pago simulado"
    )
    sixer_payment_delay: float = Field(1.0, ge=0.0, description="Delay del pago simulado")
    sixer_matchmaking_delay: float = Field(
        0.5, ge=0.0, description="Delay del matchmaking simulado"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema

# Palabra clave -> tag visible (en orden de aparición en la respuesta)
VIBE_TAGS = {
    "quiet": "Quiet",
    "social": "Social",
    "study": "Study-friendly",
    "party": "Party-friendly",
    "clean": "Clean",
    "relaxed": "Relaxed",
    "active": "Active",
    "creative": "Creative",
    "professional": "Professional",
    "outdoor": "Outdoorsy",
}

DEFAULT_VIBE_TAGS = ["Quiet", "Study-friendly"]

BASE_LANGUAGE = "English"

EXTRA_LANGUAGES = [
    "Spanish",
    "French",
    "German",
    "Chinese",
    "Japanese",
    "Korean",
    "Arabic",
    "Russian",
    "Portuguese",
]

DEFAULT_TITLE = "Room Available"
DEFAULT_RENT = "1200"
DEFAULT_UTILITIES = "150"
DEFAULT_DISTANCE = "0.8"
DEFAULT_ADDRESS = "Near Campus"
