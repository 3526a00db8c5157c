import logging
import threading
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alongside import config
from alongside.database import Base, engine
import alongside.models
from alongside.api import checkins, coach, economy
from alongside.services.exercise_catalog import ExerciseCatalog, load_catalog
from alongside.utils.clock import Clock, SystemClock
from alongside.utils.randomness import RandomSource, make_random_source

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def run_migrations():
    """Run pending Alembic migrations automatically on startup."""
    try:
        from alembic.config import Config
        from alembic import command
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        logger.info("[Alembic] Migrations applied successfully")
    except Exception as e:
        logger.warning(f"[Alembic] Migration failed, falling back to create_all: {e}")
        Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Database: {engine.url}")
    if config.RUN_MIGRATIONS:
        run_migrations()
    else:
        Base.metadata.create_all(bind=engine)
    yield


def create_app(
    catalog: Optional[ExerciseCatalog] = None,
    clock: Optional[Clock] = None,
    rng: Optional[RandomSource] = None,
) -> FastAPI:
    app = FastAPI(title="Alongside Coach API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Per-app collaborators; one writer lock guards the completion log and economy counters
    app.state.catalog = catalog if catalog is not None else load_catalog(config.EXERCISE_CATALOG_PATH)
    app.state.clock = clock or SystemClock(config.USER_TIMEZONE)
    app.state.rng = rng or make_random_source(config.RANDOM_SEED)
    app.state.economy_lock = threading.RLock()

    app.include_router(coach.router)
    app.include_router(checkins.router)
    app.include_router(economy.router)

    @app.get("/")
    def root():
        return {
            "message": "Welcome to Alongside Coach API",
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "exercises": len(app.state.catalog)}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("alongside.main:app", host="0.0.0.0", port=8000)
