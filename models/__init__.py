"""Data models used by the application.

Split into:
- `api_models`: Pydantic models for the client/server message protocol
- `domain_models`: typed dicts used by the game engine

Import submodules to make them available as `models.api_models`.
"""

from . import api_models, domain_models

from .api_models import (
	ClientMessageType,
	ServerMessageType,
	ClientMessage,
	StartGamePayload,
	GameCell,
	GameSnapshot,
	ErrorInfo,
	ServerPayload,
	ServerMessage,
)

from .domain_models import (
	LastClick,
	ClickResult,
)

__all__ = [
	# submodules
	"api_models",
	"domain_models",
	# api models
	"ClientMessageType",
	"ServerMessageType",
	"ClientMessage",
	"StartGamePayload",
	"GameCell",
	"GameSnapshot",
	"ErrorInfo",
	"ServerPayload",
	"ServerMessage",
	# domain models
	"LastClick",
	"ClickResult",
]
