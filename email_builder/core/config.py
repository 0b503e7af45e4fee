from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
from pathlib import Path

class Settings(BaseSettings):
    APP_NAME: str = "Email Builder"
    VERSION: str = "1.0.0"
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    STATIC_DIR: Path = BASE_DIR / "static"
    TEMPLATES_DIR: Path = BASE_DIR / "templates"
    DATABASE_URL: str = "sqlite:///./email_builder.db"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]

    # Transient files
    UPLOAD_DIR: Path = BASE_DIR / "uploads"
    DOWNLOADS_DIR: Path = BASE_DIR / "downloads"

    # Hosted image storage (Cloudflare R2, S3 compatible)
    R2_ACCOUNT_ID: str = ""
    R2_ACCESS_KEY_ID: str = ""
    R2_SECRET_ACCESS_KEY: str = ""
    R2_BUCKET_NAME: str = "email-builder"
    R2_PUBLIC_URL: str = ""
    IMAGE_FOLDER: str = "email_templates"

    class Config:
        env_file = ".env"
        env_prefix = "EMAIL_BUILDER_"

@lru_cache()
def get_settings():
    return Settings()
