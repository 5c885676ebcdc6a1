"""
Sixer: matching exprés con hosts por un pago único.

Tanto el pago como el matchmaking son simulados: delay fijo,
tasa de éxito configurable e IDs aleatorios.
"""

import random
import string
from typing import Optional

import structlog

from nestmate.config import get_settings
from nestmate.engine.delays import BaseDelay, build_fixed_delay
from nestmate.engine.errors import PaymentDeclinedError, ValidationError
from nestmate.models import MatchmakingResult, PaymentResult, SixerResult

logger = structlog.get_logger()

_ID_ALPHABET = string.digits + string.ascii_lowercase

SUCCESS_MESSAGE = (
    "Sixer started successfully. You will be matched with hosts within 24 hours."
)


class SixerService:
    """Checkout simulado del Sixer."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        payment_delay: Optional[BaseDelay] = None,
        matchmaking_delay: Optional[BaseDelay] = None,
        price_cents: Optional[int] = None,
        currency: Optional[str] = None,
        success_rate: Optional[float] = None,
    ):
        settings = get_settings()
        self._rng = rng or random.Random(settings.random_seed)
        self._payment_delay = payment_delay or build_fixed_delay(
            settings, settings.sixer_payment_delay
        )
        self._matchmaking_delay = matchmaking_delay or build_fixed_delay(
            settings, settings.sixer_matchmaking_delay
        )
        self.price_cents = price_cents if price_cents is not None else settings.sixer_price_cents
        self.currency = currency or settings.sixer_currency
        self.success_rate = (
            success_rate if success_rate is not None else settings.sixer_payment_success_rate
        )

    def _random_id(self, prefix: str) -> str:
        suffix = "".join(self._rng.choice(_ID_ALPHABET) for _ in range(9))
        return f"{prefix}_{suffix}"

    def validate(self, amount: Optional[int], currency: Optional[str]) -> None:
        """
        Raises:
            ValidationError: monto o moneda distintos a los esperados
        """
        if not amount or amount != self.price_cents:
            dollars = self.price_cents / 100
            raise ValidationError(
                f"Invalid amount. Expected ${dollars:.2f} ({self.price_cents} cents)"
            )
        if currency != self.currency:
            raise ValidationError(f"Invalid currency. Expected {self.currency.upper()}")

    async def charge(self, amount: int, currency: str) -> PaymentResult:
        """Simula el cobro con la pasarela de pagos."""
        await self._payment_delay.wait()
        success = self._rng.random() < self.success_rate
        return PaymentResult(
            success=success,
            payment_id=self._random_id("pi") if success else None,
            amount=amount,
            currency=currency,
        )

    async def trigger_matchmaking(self) -> MatchmakingResult:
        """Simula el disparo del workflow de matchmaking host-inquilino."""
        await self._matchmaking_delay.wait()
        return MatchmakingResult(matchmaking_id=self._random_id("mm"))

    async def start(self, amount: Optional[int], currency: Optional[str]) -> SixerResult:
        """
        Valida, cobra y dispara el matchmaking.

        Raises:
            ValidationError: monto o moneda inválidos
            PaymentDeclinedError: el pago simulado falló
        """
        self.validate(amount, currency)

        payment = await self.charge(amount, currency)
        if not payment.success:
            logger.warning("Pago rechazado", amount=amount, currency=currency)
            raise PaymentDeclinedError("Payment failed")

        matchmaking = await self.trigger_matchmaking()
        logger.info(
            "Sixer iniciado",
            payment_id=payment.payment_id,
            matchmaking_id=matchmaking.matchmaking_id,
            estimated_time=matchmaking.estimated_time,
        )
        return SixerResult(
            payment_id=payment.payment_id,
            matchmaking_id=matchmaking.matchmaking_id,
            message=SUCCESS_MESSAGE,
        )
