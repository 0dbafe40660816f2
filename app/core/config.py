from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App core settings
    # -------------------------
    APP_NAME: str = "Customer Directory"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # Storage
    # -------------------------
    STORAGE_BACKEND: str = "json"  # "json" | "memory" | "sql"
    CUSTOMERS_FILE: str = "./customers.json"
    DATABASE_URL: str = "sqlite:///./customers.db"

    # -------------------------
    # Listing
    # -------------------------
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid"
    )


# Singleton
settings = Settings()
