import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from nestmate.engine import PaymentDeclinedError, ValidationError
from nestmate.engine.sixer import SUCCESS_MESSAGE
from nestmate.models import SixerRequest


@pytest.mark.parametrize("amount", [None, 0, 500, 6.99])
async def test_invalid_amount(sixer_factory, amount):
    with pytest.raises(ValidationError) as exc_info:
        await sixer_factory().start(amount, "usd")

    assert exc_info.value.user_message == "Invalid amount. Expected $6.99 (699 cents)"


@pytest.mark.parametrize("currency", [None, "USD", "eur"])
async def test_invalid_currency(sixer_factory, currency):
    with pytest.raises(ValidationError) as exc_info:
        await sixer_factory().start(699, currency)

    assert exc_info.value.user_message == "Invalid currency. Expected USD"


async def test_successful_start(sixer_factory):
    result = await sixer_factory(success_rate=1.0).start(699, "usd")

    assert re.fullmatch(r"pi_[0-9a-z]{9}", result.payment_id)
    assert re.fullmatch(r"mm_[0-9a-z]{9}", result.matchmaking_id)
    assert result.message == SUCCESS_MESSAGE
    assert result.to_api_dict()["success"] is True


async def test_declined_payment(sixer_factory):
    with pytest.raises(PaymentDeclinedError) as exc_info:
        await sixer_factory(success_rate=0.0).start(699, "usd")

    assert exc_info.value.user_message == "Payment failed"


async def test_charge_reports_amount_and_currency(sixer_factory):
    payment = await sixer_factory(success_rate=1.0).charge(699, "usd")

    assert payment.success is True
    assert payment.amount == 699
    assert payment.currency == "usd"


def test_request_does_not_coerce_numeric_strings():
    with pytest.raises(PydanticValidationError):
        SixerRequest.model_validate({"amount": "699", "currency": "usd"})
