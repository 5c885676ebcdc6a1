import pytest

from nestmate.api import create_app
from nestmate.engine import DEFAULT_CATEGORIES, FALLBACK_REPLY
from nestmate.models import School

RENT_REPLIES = next(c.replies for c in DEFAULT_CATEGORIES if c.label == "rent")


@pytest.fixture()
async def client(aiohttp_client, settings):
    return await aiohttp_client(create_app(settings))


@pytest.fixture()
def sixer_client(aiohttp_client, settings, sixer_factory):
    async def _build(success_rate: float):
        app = create_app(settings, sixer=sixer_factory(success_rate=success_rate))
        return await aiohttp_client(app)

    return _build


async def test_health(client):
    resp = await client.get("/health")

    assert resp.status == 200
    assert await resp.text() == "ok"


async def test_chat_success(client, split_reply):
    resp = await client.post(
        "/ai/chat",
        json={"message": "What's the rent?", "context": {"recipient": "Sam", "isPremium": True}},
    )
    data = await resp.json()

    assert resp.status == 200
    assert data["success"] is True
    base, _ = split_reply(data["response"])
    assert base in RENT_REPLIES
    assert data["timestamp"].endswith("Z")


async def test_chat_invalid_json_returns_apology(client):
    resp = await client.post("/ai/chat", data="not json")
    data = await resp.json()

    assert resp.status == 500
    assert data == {
        "success": False,
        "error": "Failed to generate response",
        "response": FALLBACK_REPLY,
    }


async def test_chat_missing_message_returns_apology(client):
    resp = await client.post("/ai/chat", json={"context": {"recipient": "Sam"}})
    data = await resp.json()

    assert resp.status == 500
    assert data["success"] is False
    assert data["response"] == FALLBACK_REPLY


async def test_parse_listing_success(client):
    message = (
        "2BR apartment near Times Square, $1500, utilities $200, 0.5 miles, "
        "furnished, pet friendly, quiet, clean, speaks Spanish"
    )
    resp = await client.post("/ai/parse-listing", json={"message": message})
    data = await resp.json()

    assert resp.status == 200
    assert data["success"] is True
    listing = data["listing"]
    assert listing["title"] == "Cozy 2BR near Campus"
    assert listing["rent"] == "1500"
    assert listing["utilities"] == "200"
    assert listing["distanceToCampus"] == "0.5"
    assert listing["isFurnished"] is True
    assert listing["allowsPets"] is True
    assert listing["address"] == "Times Square"
    assert listing["description"] == message


@pytest.mark.parametrize("body", [{"message": ""}, {}, [], {"message": None}])
async def test_parse_listing_missing_message(client, body):
    resp = await client.post("/ai/parse-listing", json=body)
    data = await resp.json()

    assert resp.status == 400
    assert "manual form" in data["error"]


async def test_parse_listing_non_text_message(client):
    resp = await client.post("/ai/parse-listing", json={"message": 42})
    data = await resp.json()

    assert resp.status == 500
    assert data["success"] is False
    assert "manual form" in data["error"]


async def test_parse_listing_invalid_json(client):
    resp = await client.post("/ai/parse-listing", data="{broken")

    assert resp.status == 500
    assert (await resp.json())["success"] is False


async def test_sixer_success(sixer_client):
    client = await sixer_client(success_rate=1.0)

    resp = await client.post("/sixer/start", json={"amount": 699, "currency": "usd"})
    data = await resp.json()

    assert resp.status == 200
    assert data["success"] is True
    assert data["paymentId"].startswith("pi_")
    assert data["matchmakingId"].startswith("mm_")


@pytest.mark.parametrize(
    "body, error",
    [
        ({"amount": 100, "currency": "usd"}, "Invalid amount. Expected $6.99 (699 cents)"),
        ({"amount": "lots", "currency": "usd"}, "Invalid amount. Expected $6.99 (699 cents)"),
        ({"amount": "699", "currency": "usd"}, "Invalid amount. Expected $6.99 (699 cents)"),
        ({"amount": 699, "currency": "eur"}, "Invalid currency. Expected USD"),
    ],
)
async def test_sixer_validation(sixer_client, body, error):
    client = await sixer_client(success_rate=1.0)

    resp = await client.post("/sixer/start", json=body)

    assert resp.status == 400
    assert (await resp.json()) == {"error": error}


async def test_sixer_payment_declined(sixer_client):
    client = await sixer_client(success_rate=0.0)

    resp = await client.post("/sixer/start", json={"amount": 699, "currency": "usd"})

    assert resp.status == 400
    assert (await resp.json()) == {"error": "Payment failed"}


async def test_sixer_invalid_json(sixer_client):
    client = await sixer_client(success_rate=1.0)

    resp = await client.post("/sixer/start", data="nope")

    assert resp.status == 500
    assert (await resp.json()) == {"error": "Internal server error"}


@pytest.mark.parametrize(
    "query, expected",
    [
        ("12345", [{"type": "zip", "value": "12345", "display": "Search by ZIP: 12345"}]),
        ("ab", []),
    ],
)
async def test_search_suggestions(client, query, expected):
    resp = await client.get("/search/suggestions", params={"q": query})

    assert resp.status == 200
    assert (await resp.json()) == {"suggestions": expected}


async def test_search_suggestions_with_school_lookup(aiohttp_client, settings):
    async def lookup(query):
        return [
            School.model_validate(
                {"school.name": "Boston University", "school.city": "Boston", "school.state": "MA"}
            )
        ]

    client = await aiohttp_client(create_app(settings, school_lookup=lookup))

    resp = await client.get("/search/suggestions", params={"q": "boston"})

    assert (await resp.json()) == {
        "suggestions": [
            {
                "type": "school",
                "value": "Boston University, Boston, MA",
                "display": "Boston University • Boston, MA",
            }
        ]
    }


async def test_search_suggestions_falls_back_to_zip_when_lookup_fails(aiohttp_client, settings):
    async def lookup(query):
        raise RuntimeError("Failed to fetch schools")

    client = await aiohttp_client(create_app(settings, school_lookup=lookup))

    resp = await client.get("/search/suggestions", params={"q": "02215"})

    assert resp.status == 200
    assert (await resp.json())["suggestions"][0]["display"] == "Search by ZIP: 02215"
