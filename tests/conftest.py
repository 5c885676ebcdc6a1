import random

import pytest

from nestmate.config import Settings
from nestmate.engine import (
    FOLLOW_UPS,
    BaseDelay,
    ListingFieldExtractor,
    NoDelay,
    ResponseSelector,
    SixerService,
)


class RecordingDelay(BaseDelay):
    """Delay que no espera y cuenta cuántas veces se usó."""

    def __init__(self):
        self.calls = 0

    async def wait(self) -> None:
        self.calls += 1


@pytest.fixture()
def settings():
    return Settings(simulate_latency=False, random_seed=1234)


@pytest.fixture()
def rng():
    return random.Random(42)


@pytest.fixture()
def recording_delay():
    return RecordingDelay()


@pytest.fixture()
def selector(rng):
    return ResponseSelector(rng=rng, delay=NoDelay(), follow_up_probability=0.5)


@pytest.fixture()
def quiet_selector(rng):
    """Selector que nunca agrega pregunta de seguimiento."""
    return ResponseSelector(rng=rng, delay=NoDelay(), follow_up_probability=0.0)


@pytest.fixture()
def extractor():
    return ListingFieldExtractor(delay=NoDelay())


@pytest.fixture()
def sixer_factory(rng):
    def _build(success_rate: float = 1.0) -> SixerService:
        return SixerService(
            rng=rng,
            payment_delay=NoDelay(),
            matchmaking_delay=NoDelay(),
            price_cents=699,
            currency="usd",
            success_rate=success_rate,
        )

    return _build


@pytest.fixture()
def split_reply():
    """Separa una respuesta en (texto base, pregunta de seguimiento o None)."""

    def _split(text: str):
        for follow_up in FOLLOW_UPS:
            if text.endswith(follow_up):
                return text[: -len(follow_up)], follow_up
        return text, None

    return _split
