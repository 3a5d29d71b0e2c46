from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Crop Ledger API"
    API_VERSION: str = "1.0.0"

    # Storage
    DATABASE_URL: str = "sqlite+aiosqlite:///./croptracker.db"

    # Token signing
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 1

    # Credential header; bare tokens get TOKEN_SCHEME prepended
    AUTH_HEADER: str = "SessionAuth"
    TOKEN_SCHEME: str = "Bearer"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"


settings = Settings()
