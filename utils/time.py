"""Time utilities: timezone-aware helpers.

The game registry stamps activity with these so idle checks compare
aware datetimes.
"""
from datetime import datetime, timezone


def now_utc() -> datetime:
	"""Return current UTC datetime with tzinfo set."""
	return datetime.now(timezone.utc)
