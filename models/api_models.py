"""Pydantic models for the WebSocket message protocol.

Field names match the JSON sent over the wire. Keep transport concerns
(validation, shape) here and keep engine types in `models.domain_models`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, StrictInt


class ClientMessageType(str, Enum):
	CLICK_CELL = "click_cell"
	RESET_GAME = "reset_game"
	START_GAME = "start_game"


class ServerMessageType(str, Enum):
	GAME_ERROR = "game_error"
	GAME_OVER = "game_over"
	GAME_STATE = "game_state"


class ClientMessage(BaseModel):
	type: str
	payload: dict[str, Any] | None = None


class StartGamePayload(BaseModel):
	gridSize: StrictInt
	fadeSteps: StrictInt
	gridType: Literal["square", "hex"] | None = None


class GameCell(BaseModel):
	value: str = ""
	color: str
	showWumpus: bool = False


class GameSnapshot(BaseModel):
	grid: list[list[GameCell]]
	moves: int
	found: bool
	distance: int | None = None


class ErrorInfo(BaseModel):
	error: str
	message: str | None = None


class ServerPayload(BaseModel):
	gameState: GameSnapshot | None = None
	errorInfo: ErrorInfo | None = None


class ServerMessage(BaseModel):
	type: ServerMessageType
	payload: ServerPayload


__all__ = [
	"ClientMessageType",
	"ServerMessageType",
	"ClientMessage",
	"StartGamePayload",
	"GameCell",
	"GameSnapshot",
	"ErrorInfo",
	"ServerPayload",
	"ServerMessage",
]
