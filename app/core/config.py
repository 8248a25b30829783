# app/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- App Config ---
    PROJECT_NAME: str = "Card Catalog API"
    API_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # --- Database Config ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "cards"
    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"

    DB_POOL_MIN_SIZE: int = 5
    DB_POOL_MAX_SIZE: int = 20
    DB_POOL_TIMEOUT: float = 30

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://"
            f"{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def asyncpg_url(self) -> str:
        return (
            f"postgresql://"
            f"{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
