"""
Game message handlers.

These functions translate client messages into engine calls and return
the reply to send back. They can be called from:
- the WebSocket route (routes/games.py)
- tests, directly with a `GameRegistry`

They never raise: every failure comes back as a `game_error` message.
"""

from typing import Any, Optional
import json
import logging

from pydantic import ValidationError

import config
from game import (
	WumpusGame,
	WumpusError,
	InvalidParameters,
	InvalidMessage,
)
from models import (
	ClientMessage,
	ClientMessageType,
	ErrorInfo,
	GameSnapshot,
	ServerMessage,
	ServerMessageType,
	ServerPayload,
	StartGamePayload,
)
from stores import GameRegistry
from utils.validation import parse_coordinates

logger = logging.getLogger(__name__)


def game_state_message(snapshot: GameSnapshot, *, over: bool = False) -> ServerMessage:
	message_type = ServerMessageType.GAME_OVER if over else ServerMessageType.GAME_STATE
	return ServerMessage(type=message_type, payload=ServerPayload(gameState=snapshot))


def error_message(code: str, message: Optional[str] = None) -> ServerMessage:
	return ServerMessage(
		type=ServerMessageType.GAME_ERROR,
		payload=ServerPayload(errorInfo=ErrorInfo(error=code, message=message)),
	)


def _unexpected(action: str, connection_id: str, exc: Exception) -> ServerMessage:
	logger.error(f"Unexpected error in {action} for connection {connection_id}: {exc}", exc_info=True)
	return error_message("GAME_ERROR", "An unexpected error occurred")


def start_game(registry: GameRegistry, connection_id: str, payload: Optional[dict[str, Any]]) -> ServerMessage:
	"""
	Create a game for the connection and return its initial state.

	Payload:
		gridSize: board width and height (1-24)
		fadeSteps: clicks a revealed cell stays colored (>= 0)
		gridType: "hex" or "square" (optional, defaults to config.GRID_TYPE)
	"""
	try:
		payload = payload or {}
		if payload.get("gridSize") is None or payload.get("fadeSteps") is None:
			raise InvalidParameters("Missing required game parameters")
		try:
			req = StartGamePayload.model_validate(payload)
		except ValidationError as exc:
			raise InvalidParameters(f"Invalid game parameters: {exc.error_count()} error(s)") from exc

		game = WumpusGame(
			req.gridSize,
			req.gridSize,
			req.fadeSteps,
			grid_type=req.gridType or config.GRID_TYPE,
		)
		registry.register(connection_id, game)
		logger.info(f"Started {game!r} for connection {connection_id}")
		return game_state_message(game.snapshot())
	except WumpusError as exc:
		logger.info(f"start_game rejected for connection {connection_id}: {exc}")
		return error_message(exc.code, str(exc))
	except Exception as exc:
		return _unexpected("start_game", connection_id, exc)


def click_cell(registry: GameRegistry, connection_id: str, payload: Optional[dict[str, Any]]) -> ServerMessage:
	"""Apply a click and return the new state (`game_over` if it found the Wumpus)."""
	try:
		game = registry.get(connection_id)
		payload = payload or {}
		x, y = parse_coordinates(payload.get("x"), payload.get("y"))

		result = game.set_clicked(x, y)
		if result["found"]:
			logger.info(f"Wumpus found by connection {connection_id} after {game.click_count} moves")
		return game_state_message(game.snapshot(), over=result["found"])
	except WumpusError as exc:
		logger.info(f"click_cell rejected for connection {connection_id}: {exc}")
		return error_message(exc.code, str(exc))
	except Exception as exc:
		return _unexpected("click_cell", connection_id, exc)


def reset_game(registry: GameRegistry, connection_id: str) -> ServerMessage:
	"""
	Reset the connection's game and deregister it.

	The reply carries the cleared board; a new `start_game` is needed to
	keep playing.
	"""
	try:
		game = registry.get(connection_id)
		game.reset()
		snapshot = game.snapshot()
		registry.remove(connection_id)
		return game_state_message(snapshot)
	except WumpusError as exc:
		logger.info(f"reset_game rejected for connection {connection_id}: {exc}")
		return error_message(exc.code, str(exc))
	except Exception as exc:
		return _unexpected("reset_game", connection_id, exc)


def handle_message(registry: GameRegistry, connection_id: str, data: Any) -> ServerMessage:
	"""Route one decoded client message to its handler."""
	try:
		if not isinstance(data, dict):
			raise InvalidMessage("Message must be a JSON object")
		try:
			message = ClientMessage.model_validate(data)
		except ValidationError as exc:
			raise InvalidMessage("Malformed message") from exc

		if message.type == ClientMessageType.START_GAME.value:
			return start_game(registry, connection_id, message.payload)
		if message.type == ClientMessageType.CLICK_CELL.value:
			return click_cell(registry, connection_id, message.payload)
		if message.type == ClientMessageType.RESET_GAME.value:
			return reset_game(registry, connection_id)
		raise InvalidMessage(f"Invalid message type: {message.type}")
	except WumpusError as exc:
		logger.warning(f"Bad message from connection {connection_id}: {exc}")
		return error_message(exc.code, str(exc))
	except Exception as exc:
		return _unexpected("handle_message", connection_id, exc)


def handle_text(registry: GameRegistry, connection_id: str, text: str) -> ServerMessage:
	"""Decode a raw text frame and handle it."""
	try:
		data = json.loads(text)
	except (TypeError, ValueError, RecursionError):
		logger.warning(f"Undecodable frame from connection {connection_id}")
		return error_message("INVALID_MESSAGE", "Message is not valid JSON")
	return handle_message(registry, connection_id, data)
