from fastapi import APIRouter, WebSocket, WebSocketDisconnect, Depends
from fastapi.encoders import jsonable_encoder
import logging
import uuid

from models import ServerMessage
from stores import GameRegistry, get_game_registry
from . import games_helpers

logger = logging.getLogger(__name__)

router = APIRouter()


async def _send(websocket: WebSocket, message: ServerMessage) -> None:
	await websocket.send_json(jsonable_encoder(message, exclude_none=True))


@router.websocket("/api/game/ws")
async def game_socket(websocket: WebSocket, registry: GameRegistry = Depends(get_game_registry)):
	"""One game per connection: frames are handled strictly in arrival order."""
	await websocket.accept()
	connection_id = str(uuid.uuid4())
	logger.info(f"New WebSocket connection {connection_id}")

	try:
		while True:
			text = await websocket.receive_text()
			reply = games_helpers.handle_text(registry, connection_id, text)
			await _send(websocket, reply)
	except WebSocketDisconnect:
		logger.info(f"Client {connection_id} disconnected")
	finally:
		registry.remove(connection_id)


@router.get("/api/game/status")
async def game_status(registry: GameRegistry = Depends(get_game_registry)):
	return {"status": "ok", "activeGames": len(registry)}
