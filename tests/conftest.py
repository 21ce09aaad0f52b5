"""Shared snapshot builders."""

from __future__ import annotations

import pytest


def coord(x, y):
    return {"x": x, "y": y}


def snake_payload(snake_id, body, head=None):
    body = [coord(x, y) for x, y in body]
    return {
        "id": snake_id,
        "name": snake_id,
        "health": 90,
        "body": body,
        "latency": "12",
        "head": coord(*head) if head is not None else body[0],
        "length": len(body),
        "shout": "",
        "customizations": {
            "color": "#123456", "head": "default", "tail": "default",
        },
    }


def game_payload(
    width=3, height=3, food=(), hazards=(), snakes=None, turn=0,
):
    if snakes is None:
        snakes = [snake_payload("s1", [(0, 0), (0, 1)])]
    return {
        "game": {
            "id": "game-1",
            "ruleset": {"name": "standard", "version": "v1.2.3"},
            "map": "standard",
            "timeout": 500,
            "source": "custom",
        },
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [coord(x, y) for x, y in food],
            "hazards": [coord(x, y) for x, y in hazards],
            "snakes": snakes,
        },
        "you": snakes[0] if snakes else snake_payload("s1", [(0, 0)]),
    }


@pytest.fixture()
def payload():
    return game_payload


@pytest.fixture()
def snake():
    return snake_payload
