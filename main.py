import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from pytz import utc

import config
from routes import games_router
from stores import sweep_idle_games

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# --- FastAPI setup ---
app = FastAPI(title="Hunt the Wumpus")

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# --- Register routes ---
app.include_router(games_router)

# --- Scheduler setup ---
scheduler = AsyncIOScheduler(timezone=utc)
scheduler.add_job(sweep_idle_games, trigger="interval", seconds=config.SWEEP_INTERVAL, id="sweep_idle_games")


@app.on_event("startup")
async def startup_event():
    scheduler.start()


@app.on_event("shutdown")
async def shutdown_event():
    scheduler.shutdown()
