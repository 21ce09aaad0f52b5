"""Battlesnake protocol route handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from snake_graph.board import BoardError, BoardState
from snake_graph.config import SnakeConfig
from snake_graph.server.models import (
    ConfigResponse,
    Direction,
    GameState,
    MoveResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["battlesnake"])


def _get_config(request: Request) -> SnakeConfig:
    return request.app.state.config


@router.get("/")
async def index(request: Request) -> ConfigResponse:
    """Report API version and appearance."""
    config = _get_config(request)
    return ConfigResponse(
        api_version=config.apiversion,
        author=config.author,
        color=config.color,
        head=config.head,
        tail=config.tail,
        version=config.version,
    )


@router.post("/start")
async def start(game_state: GameState) -> dict:
    """Acknowledge a new game."""
    logger.info("GAME %s STARTED", game_state.game.id)
    return {}


@router.post("/end")
async def end(game_state: GameState) -> dict:
    """Acknowledge a finished game."""
    logger.info("GAME %s ENDED", game_state.game.id)
    return {}


@router.post("/move")
async def move(game_state: GameState, request: Request) -> MoveResponse:
    """Build the board model for this turn and answer with a move."""
    logger.info(
        "TURN %d FOR GAME %s", game_state.turn, game_state.game.id,
    )
    try:
        board = BoardState(game_state)
    except BoardError as exc:
        logger.warning(
            "Rejected snapshot for game %s turn %d: %s",
            game_state.game.id, game_state.turn, exc,
        )
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.debug("Board: %s", board.to_dict())
    return MoveResponse(move=Direction(_get_config(request).default_move))
