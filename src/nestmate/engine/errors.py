"""
Errores del motor.

Los handlers HTTP traducen cada tipo a su envelope:
- ValidationError -> 400
- PaymentDeclinedError -> 400
- ProcessingError -> 500
"""


class EngineError(Exception):
    """Error base del motor con un mensaje apto para mostrar al usuario."""

    def __init__(self, user_message: str):
        super().__init__(user_message)
        self.user_message = user_message


class ValidationError(EngineError):
    """Falta un input requerido o es inválido."""


class ProcessingError(EngineError):
    """Falla inesperada durante la selección o la extracción."""


class PaymentDeclinedError(EngineError):
    """El pago simulado fue rechazado."""
