from pathlib import Path
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    APP_NAME: str = "Employee Portal API"
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all
    LOG_LEVEL: str = "INFO"

    SEED_DEMO_DATA: bool = True
    EMPLOYEE_ID_PREFIX: str = "EMP"
    EMPLOYEE_ID_WIDTH: int = 3

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def expose_error_details(self) -> bool:
        """Include exception text in 500 responses outside production"""
        return self.APP_ENV.lower() in ("local", "development")

settings = Settings()
