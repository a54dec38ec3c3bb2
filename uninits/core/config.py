# uninits/core/config.py

from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    # MongoDB connection (local by default, point at Atlas in .env)
    MONGO_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "uninits"

    # Where uploaded profile pictures are written and served from
    UPLOAD_DIR: str = "uploads/profile-images"
    ASSETS_DIR: str = "assets/images"

    # 5 MB per profile picture
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    LOG_LEVEL: str = "INFO"
    PORT: int = 10000

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_prefix = "UNINITS_"
        case_sensitive = False


CONFIG = Settings()


def uploads_root() -> Path:
    """Parent of UPLOAD_DIR, mounted at /uploads."""
    return Path(CONFIG.UPLOAD_DIR).parent
