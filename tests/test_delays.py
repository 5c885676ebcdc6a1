import random
from types import SimpleNamespace

import pytest

from nestmate.config import Settings
from nestmate.engine import delays
from nestmate.engine.delays import (
    FixedDelay,
    NoDelay,
    RandomDelay,
    build_chat_delay,
    build_fixed_delay,
    build_parse_delay,
)


@pytest.fixture()
def slept(monkeypatch):
    """Reemplaza asyncio.sleep dentro del módulo y registra las esperas."""
    calls = []

    async def fake_sleep(seconds):
        calls.append(seconds)

    monkeypatch.setattr(delays, "asyncio", SimpleNamespace(sleep=fake_sleep))
    return calls


async def test_fixed_delay_sleeps_given_seconds(slept):
    await FixedDelay(2.0).wait()
    assert slept == [2.0]


async def test_random_delay_stays_in_range(slept):
    delay = RandomDelay(1.0, 3.0, rng=random.Random(5))

    for _ in range(50):
        await delay.wait()

    assert len(slept) == 50
    assert all(1.0 <= s <= 3.0 for s in slept)


async def test_no_delay_never_sleeps(slept):
    await NoDelay().wait()
    assert slept == []


def test_invalid_delays_rejected():
    with pytest.raises(ValueError):
        FixedDelay(-1)
    with pytest.raises(ValueError):
        RandomDelay(3.0, 1.0)


def test_factories_follow_settings():
    latency_on = Settings(simulate_latency=True, chat_delay_min=0.5, chat_delay_max=1.5)
    chat = build_chat_delay(latency_on)
    parse = build_parse_delay(latency_on)

    assert isinstance(chat, RandomDelay)
    assert (chat.min_seconds, chat.max_seconds) == (0.5, 1.5)
    assert isinstance(parse, FixedDelay)
    assert parse.seconds == 2.0


def test_factories_disabled_latency(settings):
    assert isinstance(build_chat_delay(settings), NoDelay)
    assert isinstance(build_parse_delay(settings), NoDelay)
    assert isinstance(build_fixed_delay(settings, 1.0), NoDelay)
