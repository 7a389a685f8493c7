"""Tests for API endpoints."""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import patch

from api.main import app
from config import AppConfig, StrategyConfig


def _card(number: int, suite: str) -> dict:
    return {"number": number, "suite": suite}


@pytest_asyncio.fixture
async def client():
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_index(client):
    """Test the greeting route."""
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello Pok Deng!"


@pytest.mark.asyncio
async def test_healthz(client):
    """Test the plain-text liveness probe."""
    response = await client.get("/healthz")
    assert response.status_code == 200
    assert response.text == "OK"


@pytest.mark.asyncio
async def test_health_check(client):
    """Test health check endpoint."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_pok_stands(client):
    """Test 4-5 is a natural nine and stands."""
    response = await client.post(
        "/api/pokdeng",
        json={"playHands": [[_card(4, "hearts"), _card(5, "diamonds")]], "gameType": 1},
    )
    assert response.status_code == 200
    assert response.json() == {"decisions": ["stand"]}


@pytest.mark.asyncio
async def test_batch_decisions_in_order(client):
    """Test one decision per hand, in request order."""
    response = await client.post(
        "/api/pokdeng",
        json={
            "playHands": [
                [_card(2, "hearts"), _card(3, "hearts")],
                [_card(12, "clubs"), _card(13, "spades")],
                [_card(10, "spades"), _card(7, "hearts")],
                [_card(11, "diamonds"), _card(4, "clubs")],
            ],
            "gameType": 1,
        },
    )
    assert response.status_code == 200
    assert response.json() == {"decisions": ["hit", "hit", "stand", "hit"]}


@pytest.mark.asyncio
async def test_deck_aware_game_type(client):
    """Test game type 2 stops chasing a pair once the other two are seen."""
    hands = [
        [_card(8, "spades"), _card(8, "hearts")],
        [_card(8, "clubs"), _card(8, "diamonds")],
    ]

    basic = await client.post("/api/pokdeng", json={"playHands": hands, "gameType": 1})
    deck_aware = await client.post("/api/pokdeng", json={"playHands": hands, "gameType": 2})

    assert basic.json() == {"decisions": ["hit", "hit"]}
    assert deck_aware.json() == {"decisions": ["stand", "stand"]}


@pytest.mark.asyncio
async def test_accepts_rank_and_suit_aliases(client):
    """Test cards may use rank/suit and any suit case."""
    response = await client.post(
        "/api/pokdeng",
        json={
            "playHands": [[{"rank": 4, "suit": "HEARTS"}, {"rank": 5, "suite": "Diamonds"}]],
            "gameType": 1,
        },
    )
    assert response.status_code == 200
    assert response.json() == {"decisions": ["stand"]}


@pytest.mark.asyncio
async def test_aggressive_basic_config(client):
    """Test the aggressive variant hits a dead seven on game type 1."""
    aggressive = AppConfig(strategy=StrategyConfig(aggressive_basic=True))
    body = {"playHands": [[_card(10, "spades"), _card(7, "hearts")]], "gameType": 1}

    with patch("api.routes.pokdeng.config", aggressive):
        response = await client.post("/api/pokdeng", json=body)

    assert response.status_code == 200
    assert response.json() == {"decisions": ["hit"]}


@pytest.mark.asyncio
async def test_explain(client):
    """Test the explain endpoint reports the facts behind each decision."""
    response = await client.post(
        "/api/pokdeng/explain",
        json={
            "playHands": [
                [_card(4, "hearts"), _card(5, "diamonds")],
                [_card(2, "hearts"), _card(3, "hearts")],
            ],
            "gameType": 2,
        },
    )
    assert response.status_code == 200
    data = response.json()

    assert data["gameType"] == 2
    assert data["strategy"] == "deck_aware"
    pok, draw = data["hands"]

    assert pok["value"] == 9
    assert pok["is_pok"] is True
    assert pok["decision"] == "stand"
    assert pok["reason"] == "pok"
    assert pok["cards"] == [_card(4, "hearts"), _card(5, "diamonds")]

    assert draw["value"] == 5
    assert draw["special_draws"] == ["flush", "straight"]
    assert draw["chased"] == "flush"
    assert draw["decision"] == "hit"
    assert draw["reason"] == "special_draw"


@pytest.mark.asyncio
async def test_duplicate_cards_rejected(client):
    """Test a card dealt twice is rejected."""
    response = await client.post(
        "/api/pokdeng",
        json={
            "playHands": [
                [_card(1, "spades"), _card(2, "spades")],
                [_card(1, "spades"), _card(9, "hearts")],
            ],
            "gameType": 2,
        },
    )
    assert response.status_code == 422
    assert "more than once" in response.json()["detail"]


@pytest.mark.asyncio
async def test_too_many_hands_rejected(client):
    """Test batches larger than the configured limit are rejected."""
    limited = AppConfig(strategy=StrategyConfig(max_hands=1))
    body = {
        "playHands": [
            [_card(1, "spades"), _card(2, "spades")],
            [_card(3, "hearts"), _card(9, "hearts")],
        ],
        "gameType": 1,
    }

    with patch("api.routes.pokdeng.config", limited):
        response = await client.post("/api/pokdeng", json=body)

    assert response.status_code == 422
    assert "At most 1 hands" in response.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"gameType": 1},
        {"playHands": [], "gameType": 1},
        {"playHands": [[_card(4, "hearts")]], "gameType": 1},
        {"playHands": [[_card(4, "hearts"), _card(5, "hearts"), _card(6, "hearts")]], "gameType": 1},
        {"playHands": [[_card(0, "hearts"), _card(5, "hearts")]], "gameType": 1},
        {"playHands": [[_card(14, "hearts"), _card(5, "hearts")]], "gameType": 1},
        {"playHands": [[_card(4, "stars"), _card(5, "hearts")]], "gameType": 1},
        {"playHands": [[_card(4, "hearts"), _card(5, "clubs")]], "gameType": 3},
        {"playHands": [[_card(4, "hearts"), _card(5, "clubs")]]},
    ],
)
async def test_malformed_requests_rejected(client, body):
    """Test malformed bodies fail validation."""
    response = await client.post("/api/pokdeng", json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_invalid_json_rejected(client):
    """Test a body that is not JSON."""
    response = await client.post(
        "/api/pokdeng",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
