"""
Estrategias de latencia simulada.

Los componentes reciben un delay inyectado en vez de dormir directamente,
así los tests pueden usar NoDelay y correr sin esperas.
"""

import asyncio
import random
from abc import ABC, abstractmethod
from typing import Optional

from nestmate.config import Settings


class BaseDelay(ABC):
    """Clase base para estrategias de delay."""

    @abstractmethod
    async def wait(self) -> None:
        """Espera sin bloquear el event loop."""
        pass


class NoDelay(BaseDelay):
    """No espera nada."""

    async def wait(self) -> None:
        return None


class FixedDelay(BaseDelay):
    """Espera siempre la misma cantidad de segundos."""

    def __init__(self, seconds: float):
        if seconds < 0:
            raise ValueError(f"Delay negativo: {seconds}")
        self.seconds = seconds

    async def wait(self) -> None:
        await asyncio.sleep(self.seconds)


class RandomDelay(BaseDelay):
    """Espera un tiempo uniforme entre min_seconds y max_seconds."""

    def __init__(
        self,
        min_seconds: float,
        max_seconds: float,
        rng: Optional[random.Random] = None,
    ):
        if min_seconds < 0 or max_seconds < min_seconds:
            raise ValueError(
                f"Rango de delay inválido: {min_seconds}-{max_seconds}"
            )
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds
        self._rng = rng or random.Random()

    async def wait(self) -> None:
        await asyncio.sleep(self._rng.uniform(self.min_seconds, self.max_seconds))


def build_chat_delay(settings: Settings, rng: Optional[random.Random] = None) -> BaseDelay:
    """Delay del chat según settings (uniforme, 1-3s por default)."""
    if not settings.simulate_latency:
        return NoDelay()
    return RandomDelay(settings.chat_delay_min, settings.chat_delay_max, rng=rng)


def build_parse_delay(settings: Settings) -> BaseDelay:
    """Delay del parser de listings según settings (fijo, 2s por default)."""
    if not settings.simulate_latency:
        return NoDelay()
    return FixedDelay(settings.parse_listing_delay)


def build_fixed_delay(settings: Settings, seconds: float) -> BaseDelay:
    """Delay fijo arbitrario, respetando simulate_latency."""
    if not settings.simulate_latency:
        return NoDelay()
    return FixedDelay(seconds)
