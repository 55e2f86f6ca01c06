"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Redis (extraction store) ---
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
EXTRACTION_TTL_SECONDS: int = int(os.getenv("EXTRACTION_TTL_SECONDS", "2592000"))

# --- Filing ---
FOLDER_PATTERN: str = os.getenv("FOLDER_PATTERN", "Bids/{gc}_{date}_{project}")

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
MAX_BODY_LOG_CHARS: int = int(os.getenv("MAX_BODY_LOG_CHARS", "500"))
