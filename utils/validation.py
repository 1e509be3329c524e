"""Validation helpers for client message payloads.

Coordinates arrive as untrusted JSON values; these checks decide which
error message a bad click is reported with.
"""
from typing import Any
import math

from game import InvalidCoordinates


def is_number(value: Any) -> bool:
	"""True for ints and finite floats. JSON booleans are not numbers here."""
	if isinstance(value, bool):
		return False
	if isinstance(value, int):
		return True
	return isinstance(value, float) and math.isfinite(value)


def parse_coordinates(x: Any, y: Any) -> tuple[int, int]:
	"""Validate a click's raw x/y and return them as ints.

	Grid bounds are checked later by the engine; this only rejects values
	that can never be a cell.

	Raises:
		InvalidCoordinates: for missing, non-numeric, fractional or negative values.
	"""
	if not is_number(x) or not is_number(y):
		raise InvalidCoordinates("Non-numeric coordinates")
	if x != int(x) or y != int(y):
		raise InvalidCoordinates("Non-integer coordinates")
	x, y = int(x), int(y)
	if x < 0 or y < 0:
		raise InvalidCoordinates("Out-of-bounds coordinates")
	return x, y
