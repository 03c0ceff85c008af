# =======================================================================================
# checkin/config.py - Configuration Management
# =======================================================================================
import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

def _env_bool(name: str, default: str = "false") -> bool:
    """Helper to parse boolean environment variables."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")

def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]

def _env_non_negative_int(name: str, default: str) -> int:
    value = int(os.getenv(name, default))
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value

class Config:
    # Database
    DB_URL: str = os.getenv("DB_URL", "sqlite:///./event_db.sqlite")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
    # Only applied to server databases (MySQL/Postgres); SQLite keeps its default
    DB_ISOLATION_LEVEL: str = os.getenv("DB_ISOLATION_LEVEL", "READ COMMITTED")

    # API Settings
    API_DEBUG: bool = _env_bool("API_DEBUG")
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "3000"))
    CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "*")

    # Event rules
    DEFAULT_MEAL_CREDITS: int = _env_non_negative_int("DEFAULT_MEAL_CREDITS", "1")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if API_DEBUG else "INFO").upper()
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None

config = Config()
