"""Utility helpers used across the project.

Exports:
- time helpers: `now_utc`
- validation helpers: `is_number`, `parse_coordinates`
"""

from .time import now_utc
from .validation import is_number, parse_coordinates

__all__ = [
	"now_utc",
	"is_number",
	"parse_coordinates",
]
