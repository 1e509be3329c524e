import os

# Grid metric used when start_game does not name one ("hex" or "square").
GRID_TYPE = os.environ.get("WUMPUS_GRID_TYPE", "hex")

# Games with no activity for this many seconds are dropped from the registry.
IDLE_TIMEOUT = float(os.environ.get("WUMPUS_IDLE_TIMEOUT", "1800"))

# How often, in seconds, the idle sweep runs.
SWEEP_INTERVAL = float(os.environ.get("WUMPUS_SWEEP_INTERVAL", "30"))

LOG_LEVEL = os.environ.get("WUMPUS_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.environ.get("WUMPUS_CORS_ORIGINS", "*").split(",") if o.strip()]
