import os
from dotenv import load_dotenv

load_dotenv(override=False)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./alongside.db")

# Wall-clock timezone for the system clock (pytz name)
USER_TIMEZONE = os.getenv("USER_TIMEZONE", "UTC")

# Exercise catalog JSON; defaults to the bundled library
EXERCISE_CATALOG_PATH = os.getenv(
    "EXERCISE_CATALOG_PATH",
    os.path.join(os.path.dirname(__file__), "data", "exercises.json"),
)

# Optional fixed seed for scoring jitter and coach messages (reproducible runs)
RANDOM_SEED = os.getenv("RANDOM_SEED")
RANDOM_SEED = int(RANDOM_SEED) if RANDOM_SEED else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Run Alembic on startup instead of create_all
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "false").lower() == "true"
