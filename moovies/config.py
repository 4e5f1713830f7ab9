from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # 🎯 Application
    APP_NAME: str = "Moovies API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 🌐 Server
    HOST: str = '0.0.0.0'
    PORT: int = 8000

    # 🗄️ Database - PostgreSQL
    DATABASE_URL: str  # must come from env
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # 🔒 CORS
    ALLOWED_ORIGINS: str = "*"

    # 📊 Logging
    LOG_LEVEL: str = "INFO"

    # ⚠️ Missing ids on update/delete: False keeps 200 null / 304, True answers 404
    STRICT_MISSING_IDS: bool = False

    class Config:
        env_file = ".env"
        extra = 'ignore'

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(',') if origin.strip()]


settings = Settings()
