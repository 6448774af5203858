# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from typing import Optional
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


class Settings:
    ROUTE_PROVIDER: str = os.getenv("ROUTE_PROVIDER", "synthetic")
    GOOGLE_MAPS_API_KEY: str = os.getenv("GOOGLE_MAPS_API_KEY", "")
    HERE_API_KEY: str = os.getenv("HERE_API_KEY", "")
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))
    # Fixed seed makes synthetic routes and confidence jitter reproducible
    RANDOM_SEED: Optional[int] = _optional_int("RANDOM_SEED")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")


def get_settings():
    return Settings
