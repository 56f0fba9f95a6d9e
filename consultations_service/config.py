import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = "dev"
    database_url: str = "sqlite:///./data/consultations.db"
    echo_sql: bool = False
    # Gateway user id that is promoted to admin on first sign-in
    owner_id: str | None = None

    storage_base_url: str = "http://storage:9000/uploads"
    # Public CDN prefix; falls back to storage_base_url when unset
    storage_public_base_url: str | None = None
    storage_api_key: str | None = None
    storage_timeout_seconds: float = 20.0
    max_upload_bytes: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_prefix="CONSULTATIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Allow DATABASE_URL fallback if CONSULTATIONS_DATABASE_URL is not provided
    def model_post_init(self, __context):
        if "CONSULTATIONS_DATABASE_URL" not in os.environ:
            alt = os.getenv("DATABASE_URL")
            if alt:
                object.__setattr__(self, "database_url", alt)

    @property
    def public_storage_url(self) -> str:
        return (self.storage_public_base_url or self.storage_base_url).rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
