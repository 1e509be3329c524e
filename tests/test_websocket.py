"""End-to-end tests for the WebSocket endpoint using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from main import app
from stores import GameRegistry, get_game_registry


@pytest.fixture
def registry():
    registry = GameRegistry()
    app.dependency_overrides[get_game_registry] = lambda: registry
    yield registry
    app.dependency_overrides.clear()


@pytest.fixture
def client(registry):
    return TestClient(app)


class TestGameSocket:

    def test_start_and_click(self, client, registry):
        with client.websocket_connect("/api/game/ws") as ws:
            ws.send_json({"type": "start_game", "payload": {"gridSize": 5, "fadeSteps": 3, "gridType": "square"}})
            reply = ws.receive_json()
            assert reply["type"] == "game_state"
            state = reply["payload"]["gameState"]
            assert len(state["grid"]) == 5
            assert state["moves"] == 0
            assert "distance" not in state
            assert "errorInfo" not in reply["payload"]
            assert len(registry) == 1

            ws.send_json({"type": "click_cell", "payload": {"x": 1, "y": 1}})
            reply = ws.receive_json()
            assert reply["type"] in ("game_state", "game_over")
            assert reply["payload"]["gameState"]["moves"] == 1
            cell = reply["payload"]["gameState"]["grid"][1][1]
            assert set(cell) == {"value", "color", "showWumpus"}
            assert cell["color"].startswith("#")

    def test_click_without_game(self, client):
        with client.websocket_connect("/api/game/ws") as ws:
            ws.send_json({"type": "click_cell", "payload": {"x": 1, "y": 1}})
            reply = ws.receive_json()
            assert reply == {
                "type": "game_error",
                "payload": {"errorInfo": {"error": "INVALID_GAME_ID", "message": "No active game found"}},
            }

    def test_bad_frame_keeps_connection_open(self, client):
        with client.websocket_connect("/api/game/ws") as ws:
            ws.send_text("definitely not json")
            assert ws.receive_json()["payload"]["errorInfo"]["error"] == "INVALID_MESSAGE"

            ws.send_json({"type": "start_game", "payload": {"gridSize": 25, "fadeSteps": 3}})
            assert ws.receive_json()["payload"]["errorInfo"]["error"] == "INVALID_PARAMETERS"

            ws.send_json({"type": "start_game", "payload": {"gridSize": 4, "fadeSteps": 3}})
            assert ws.receive_json()["type"] == "game_state"

    def test_each_connection_gets_its_own_game(self, client, registry):
        with client.websocket_connect("/api/game/ws") as first:
            with client.websocket_connect("/api/game/ws") as second:
                first.send_json({"type": "start_game", "payload": {"gridSize": 3, "fadeSteps": 3}})
                first.receive_json()
                second.send_json({"type": "start_game", "payload": {"gridSize": 6, "fadeSteps": 3}})
                assert len(second.receive_json()["payload"]["gameState"]["grid"]) == 6
                assert len(registry) == 2

    def test_reset_over_socket(self, client, registry):
        with client.websocket_connect("/api/game/ws") as ws:
            ws.send_json({"type": "start_game", "payload": {"gridSize": 3, "fadeSteps": 3}})
            ws.receive_json()
            ws.send_json({"type": "reset_game"})
            assert ws.receive_json()["type"] == "game_state"
            assert len(registry) == 0


class TestStatus:

    def test_status_counts_games(self, client, registry):
        assert client.get("/api/game/status").json() == {"status": "ok", "activeGames": 0}
