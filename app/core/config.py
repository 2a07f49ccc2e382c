import os
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # REQUIRED
    DATABASE_URL: str

    # App
    APP_NAME: str = "wedding-planner-backend"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    DB_ECHO: bool = False
    CREATE_TABLES_ON_START: bool = False
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 2022

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # Dashboard
    UPCOMING_TASKS_LIMIT: int = 5

    class Config:
        case_sensitive = True
        # Load .env ONLY when not production
        env_file = ".env" if os.getenv("ENVIRONMENT") != "production" else None


settings = Settings()
