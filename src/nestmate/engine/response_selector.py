"""
Selector de respuestas del chat con hosts.

Simula la respuesta de un host a partir de keywords:
- Categorías ordenadas, gana la primera que matchea
- Respuesta aleatoria dentro de la categoría
- Pregunta de seguimiento opcional (moneda al aire)
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence

import structlog

from nestmate.config import get_settings
from nestmate.engine.delays import BaseDelay, build_chat_delay
from nestmate.engine.errors import ProcessingError
from nestmate.models import ChatContext

logger = structlog.get_logger()


@dataclass(frozen=True)
class ResponseCategory:
    """Grupo de keywords disparadoras con sus respuestas candidatas."""

    label: str
    triggers: tuple[str, ...]
    replies: tuple[str, ...]

    def matches(self, lowered_message: str) -> bool:
        return any(trigger in lowered_message for trigger in self.triggers)


# El orden importa: ante varios matches gana la primera categoría.
DEFAULT_CATEGORIES: tuple[ResponseCategory, ...] = (
    ResponseCategory(
        label="rent",
        triggers=("rent", "price", "cost", "monthly"),
        replies=(
            "The rent is $1200/month plus utilities. It's a great value for the location and amenities!",
            "Monthly rent is $1200 with utilities around $150. Would you like to see the breakdown?",
            "It's $1200/month plus utilities. The place is fully furnished which saves you money on furniture!",
        ),
    ),
    ResponseCategory(
        label="viewing",
        triggers=("view", "tour", "see", "visit", "showing"),
        replies=(
            "Absolutely! I'm free this weekend. Saturday at 2 PM or Sunday at 11 AM work for you?",
            "I'd be happy to show you around! When are you available? I'm flexible this week.",
            "Perfect timing! I can show you the place tomorrow or this weekend. What works best for you?",
        ),
    ),
    ResponseCategory(
        label="furnished",
        triggers=("furnished", "furniture", "amenities"),
        replies=(
            "Yes, it's fully furnished! The living room has a comfortable couch and TV, kitchen is fully equipped, and bedrooms come with beds and dressers.",
            "Completely furnished! You'll have everything you need - beds, couch, dining table, kitchen appliances, and even some decor.",
            "Fully furnished and move-in ready! All the furniture is modern and in great condition.",
        ),
    ),
    ResponseCategory(
        label="utilities",
        triggers=("utilities", "electric", "water", "internet"),
        replies=(
            "Utilities run about $150/month total - that includes electricity, water, gas, and high-speed internet.",
            "Utilities are around $150/month. I can show you the recent bills if you'd like to see the breakdown.",
            "Monthly utilities are approximately $150, which is pretty standard for a 2BR apartment in this area.",
        ),
    ),
    ResponseCategory(
        label="application",
        triggers=("application", "apply", "process", "lease"),
        replies=(
            "The application process is straightforward! I'll need proof of income, references, and a small application fee. We can start the process right after you see the place.",
            "It's a simple application - income verification, references, and background check. I can walk you through it when you're ready.",
            "Standard rental application process. I'll need your income info and references. We can get it done quickly once you decide!",
        ),
    ),
    ResponseCategory(
        label="photos",
        triggers=("photos", "pictures", "images"),
        replies=(
            "I have lots of photos! Would you like me to send you a link to the full gallery? It shows every room in detail.",
            "Absolutely! I can share the photo gallery with you. It includes all the rooms, kitchen, bathroom, and even the building exterior.",
            "I have comprehensive photos of the entire place. Let me send you the gallery so you can see everything before the tour.",
        ),
    ),
    ResponseCategory(
        label="availability",
        triggers=("available", "still available", "vacant"),
        replies=(
            "Yes, it's still available! I've had some interest but no one has committed yet. You're in a good position!",
            "Still available! I'm showing it to a few people this week, but no applications yet. When can you see it?",
            "Yes, it's available! I'm being selective about tenants since it's such a great place. When would you like to tour it?",
        ),
    ),
)

DEFAULT_REPLY = (
    "That sounds great! I'd be happy to help you with any questions about the apartment."
)

# Se concatenan tal cual, por eso empiezan con espacio.
FOLLOW_UPS: tuple[str, ...] = (
    " When would you like to schedule a viewing?",
    " Does that work for your budget?",
    " What's your timeline for moving in?",
    " Are you looking for a roommate or planning to live alone?",
    " Do you have any pets?",
    " What brings you to this area?",
)

FALLBACK_REPLY = (
    "I'm having trouble processing that right now. Can you rephrase your question?"
)


@dataclass
class SelectedReply:
    """Respuesta elegida para un mensaje."""

    text: str
    category: Optional[str]
    follow_up: Optional[str] = None
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def timestamp(self) -> str:
        """ISO-8601 en UTC con milisegundos y sufijo Z."""
        return self.generated_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseSelector:
    """
    Clasificador de mensajes basado en keywords.

    La categoría depende sólo del mensaje; el texto concreto y la
    pregunta de seguimiento dependen del generador aleatorio inyectado.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay: Optional[BaseDelay] = None,
        categories: Sequence[ResponseCategory] = DEFAULT_CATEGORIES,
        default_reply: str = DEFAULT_REPLY,
        follow_ups: Sequence[str] = FOLLOW_UPS,
        follow_up_probability: Optional[float] = None,
    ):
        """
        Inicializa el selector.

        Args:
            rng: Generador aleatorio (default: sembrado con settings.random_seed)
            delay: Estrategia de latencia (default: uniforme según settings)
            categories: Categorías en orden de prioridad
            default_reply: Respuesta cuando ninguna categoría matchea
            follow_ups: Pool de preguntas de seguimiento
            follow_up_probability: Probabilidad de agregar seguimiento (default: settings)
        """
        settings = get_settings()
        self._rng = rng or random.Random(settings.random_seed)
        self._delay = delay or build_chat_delay(settings, self._rng)
        self.categories = tuple(categories)
        self.default_reply = default_reply
        self.follow_ups = tuple(follow_ups)
        self.follow_up_probability = (
            settings.follow_up_probability
            if follow_up_probability is None
            else follow_up_probability
        )

    def match_category(self, message: str) -> Optional[ResponseCategory]:
        """Primera categoría (en orden declarado) con algún trigger contenido en el mensaje."""
        lowered = message.lower()
        for category in self.categories:
            if category.matches(lowered):
                return category
        return None

    def select(
        self, message: str, context: Optional[ChatContext] = None
    ) -> SelectedReply:
        """Elige una respuesta sin delay."""
        category = self.match_category(message)
        if category:
            text = self._rng.choice(category.replies)
        else:
            text = self.default_reply

        follow_up = None
        if self.follow_ups and self._rng.random() < self.follow_up_probability:
            follow_up = self._rng.choice(self.follow_ups)
            text += follow_up

        return SelectedReply(
            text=text,
            category=category.label if category else None,
            follow_up=follow_up,
        )

    async def respond(
        self, message: str, context: Optional[ChatContext] = None
    ) -> SelectedReply:
        """
        Genera la respuesta simulando la latencia de un modelo remoto.

        Raises:
            ProcessingError: si el mensaje no se puede leer
        """
        await self._delay.wait()
        try:
            reply = self.select(message, context)
        except Exception as e:
            logger.error("Error generando respuesta", error=str(e))
            raise ProcessingError("Failed to generate response") from e

        logger.info(
            "Respuesta generada",
            category=reply.category or "default",
            follow_up=reply.follow_up is not None,
            recipient=context.recipient if context else None,
            is_premium=context.is_premium if context else False,
        )
        return reply
