"""
Payloads de los endpoints de IA simulada (chat y parse-listing).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatContext(BaseModel):
    """Contexto opcional del chat. No influye en la respuesta elegida."""

    model_config = ConfigDict(populate_by_name=True)

    recipient: Optional[str] = Field(None, description="Nombre del destinatario")
    is_premium: bool = Field(default=False, alias="isPremium")


class ChatRequest(BaseModel):
    """Body de POST /ai/chat."""

    message: str = Field(..., description="Mensaje del usuario")
    context: Optional[ChatContext] = None


class ParseListingRequest(BaseModel):
    """Body de POST /ai/parse-listing."""

    message: Optional[str] = Field(None, description="Mensaje pegado por el host")
