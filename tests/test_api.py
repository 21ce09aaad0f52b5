"""Battlesnake protocol endpoint tests."""

from __future__ import annotations

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from snake_graph.config import SnakeConfig
from snake_graph.server.app import create_app

BASE = "http://test"


@pytest.fixture()
def app():
    return create_app(SnakeConfig(author="tester", color="#ff00aa"))


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


class TestIndex:
    @pytest.mark.asyncio
    async def test_reports_config(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {
            "apiversion": "1",
            "author": "tester",
            "color": "#ff00aa",
            "head": "default",
            "tail": "default",
            "version": "0.0.1",
        }

    @pytest.mark.asyncio
    async def test_default_config(self):
        transport = ASGITransport(app=create_app())
        async with AsyncClient(transport=transport, base_url=BASE) as c:
            resp = await c.get("/")
        assert resp.json()["author"] == "author"
        assert resp.json()["color"] == "#ffffff"


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_start(self, client, payload, caplog):
        with caplog.at_level(logging.INFO):
            resp = await client.post("/start", json=payload())
        assert resp.status_code == 200
        assert "GAME game-1 STARTED" in caplog.text

    @pytest.mark.asyncio
    async def test_end(self, client, payload, caplog):
        with caplog.at_level(logging.INFO):
            resp = await client.post("/end", json=payload())
        assert resp.status_code == 200
        assert "GAME game-1 ENDED" in caplog.text

    @pytest.mark.asyncio
    async def test_start_rejects_malformed_body(self, client):
        resp = await client.post("/start", json={"turn": 1})
        assert resp.status_code == 422


class TestMove:
    @pytest.mark.asyncio
    async def test_move_default(self, client, payload):
        resp = await client.post("/move", json=payload(food=[(1, 1)]))
        assert resp.status_code == 200
        assert resp.json() == {"move": "right", "shout": None}

    @pytest.mark.asyncio
    async def test_move_uses_configured_default(self, payload):
        app = create_app(SnakeConfig(default_move="up"))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url=BASE) as c:
            resp = await c.post("/move", json=payload())
        assert resp.json()["move"] == "up"

    @pytest.mark.asyncio
    async def test_move_logs_turn(self, client, payload, caplog):
        with caplog.at_level(logging.INFO):
            await client.post("/move", json=payload(turn=7))
        assert "TURN 7 FOR GAME game-1" in caplog.text

    @pytest.mark.asyncio
    async def test_move_with_hazards_and_shared_cells(
        self, client, payload, snake,
    ):
        body = payload(
            width=11, height=11, food=[(5, 5)], hazards=[(0, 10), (5, 5)],
            snakes=[
                snake("a", [(1, 1), (1, 2), (1, 3)]),
                snake("b", [(2, 3), (1, 3)]),
            ],
        )
        resp = await client.post("/move", json=body)
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_move_out_of_bounds_snapshot(
        self, client, payload, caplog,
    ):
        with caplog.at_level(logging.WARNING):
            resp = await client.post("/move", json=payload(food=[(3, 0)]))
        assert resp.status_code == 422
        assert "outside the 3x3 board" in resp.json()["detail"]
        assert "Rejected snapshot" in caplog.text

    @pytest.mark.asyncio
    async def test_move_over_capacity_snapshot(self, client, payload):
        resp = await client.post(
            "/move", json=payload(width=2**32, height=3, snakes=[]),
        )
        assert resp.status_code == 422
        assert "32-bit" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_move_unallocatable_board(self, client, payload):
        resp = await client.post(
            "/move",
            json=payload(width=2**32 - 1, height=2**32 - 1, snakes=[]),
        )
        assert resp.status_code == 422
        assert "exceeds" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_move_negative_coordinate(self, client, payload):
        resp = await client.post("/move", json=payload(food=[(-1, 0)]))
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_move_empty_board(self, client, payload):
        resp = await client.post(
            "/move", json=payload(width=0, height=0, snakes=[]),
        )
        assert resp.status_code == 200
