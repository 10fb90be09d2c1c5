import os
from dotenv import load_dotenv

# ✅ Load environment variables from .env when present
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./players.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 3))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
FORWARDED_ALLOW_IPS = os.getenv("FORWARDED_ALLOW_IPS", "*")
