"""Pydantic models for the Battlesnake request/response schemas.

See https://docs.battlesnake.com/api for the wire format.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, enum.Enum):
    """Moves accepted by the game engine."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Coord(BaseModel):
    """A board coordinate; ``x`` is the column and ``y`` the row."""

    x: int = Field(ge=0)
    y: int = Field(ge=0)


class Customizations(BaseModel):
    """Display settings of a Battlesnake."""

    color: str = "#888888"
    head: str = "default"
    tail: str = "default"


class BattleSnake(BaseModel):
    """A Battlesnake on the board this turn.

    ``body`` is ordered head to tail; ``head`` equals ``body[0]``.
    """

    id: str
    name: str = ""
    health: int = Field(default=100, ge=0)
    body: list[Coord] = Field(default_factory=list)
    latency: str = "0"
    head: Coord
    length: int = Field(default=0, ge=0)
    shout: str = ""
    squad: str = ""
    customizations: Customizations = Field(default_factory=Customizations)


class Board(BaseModel):
    """Board dimensions and contents for a turn."""

    height: int = Field(ge=0)
    width: int = Field(ge=0)
    food: list[Coord] = Field(default_factory=list)
    hazards: list[Coord] = Field(default_factory=list)
    snakes: list[BattleSnake] = Field(default_factory=list)


class Game(BaseModel):
    """The game being played."""

    id: str
    ruleset: dict[str, Any] = Field(default_factory=dict)
    map: str = ""
    timeout: int = Field(default=500, ge=0)
    source: str = ""


class GameState(BaseModel):
    """Request body for POST /start, /move and /end."""

    game: Game
    turn: int = Field(default=0, ge=0)
    board: Board
    you: BattleSnake


class ConfigResponse(BaseModel):
    """Response for GET /."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(default="1", alias="apiversion")
    author: str = ""
    color: str = "#ffffff"
    head: str = "default"
    tail: str = "default"
    version: str = "0.0.1"


class MoveResponse(BaseModel):
    """Response for POST /move."""

    move: Direction
    shout: str | None = None
