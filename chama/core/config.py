import os
from dotenv import load_dotenv

load_dotenv()  # Loads variables from a local .env when present


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# In-memory SQLite by default: the store is rebuilt on every start
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))
SEED_DATA = _as_bool(os.getenv("SEED_DATA", "true"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Admin credited with mutations that do not name an actor
DEFAULT_ACTOR_ID = os.getenv("DEFAULT_ACTOR_ID", "admin_01")

ACTIVITY_CAPACITY = int(os.getenv("ACTIVITY_CAPACITY", "100"))
CURRENCY = os.getenv("CURRENCY", "KES")
