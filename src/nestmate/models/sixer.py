"""
Modelos del Sixer: matching exprés con hosts, pago único simulado.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class SixerRequest(BaseModel):
    """Body de POST /sixer/start. Sin coerción: "699" no es un monto válido."""

    amount: Optional[StrictInt] = Field(None, description="Monto en centavos")
    currency: Optional[StrictStr] = Field(None, description="Código de moneda en minúsculas")


@dataclass
class PaymentResult:
    """Resultado del pago simulado."""

    success: bool
    payment_id: Optional[str]
    amount: int
    currency: str


@dataclass
class MatchmakingResult:
    """Resultado del disparo del matchmaking host-inquilino."""

    matchmaking_id: str
    status: str = "active"
    estimated_time: str = "24 hours"


@dataclass
class SixerResult:
    """Resultado completo de un Sixer iniciado."""

    payment_id: str
    matchmaking_id: str
    message: str

    def to_api_dict(self) -> dict:
        return {
            "success": True,
            "paymentId": self.payment_id,
            "matchmakingId": self.matchmaking_id,
            "message": self.message,
        }
