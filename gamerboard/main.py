from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gamerboard.config import CORS_ORIGINS, LOG_LEVEL
from gamerboard.db.database import init_db
from gamerboard.middlewares.logging import RequestLoggingMiddleware, configure_logging
from gamerboard.routes import gamer, leaderboard

configure_logging(LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


# Create FastAPI app
app = FastAPI(title="Gamer Details API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(gamer.router)
app.include_router(leaderboard.router)

@app.get("/")
def root():
    return "Gamer Details API"

@app.get("/ping")
def ping():
    return {"message": "pong"}
