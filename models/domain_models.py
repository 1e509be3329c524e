"""Domain-level typed records used by the engine.

`TypedDict` keeps these as plain dicts that serialize directly.
"""
from __future__ import annotations

from typing import TypedDict


class LastClick(TypedDict):
	x: int
	y: int
	dist: int


class ClickResult(TypedDict):
	found: bool
	distance: int


__all__ = ["LastClick", "ClickResult"]
