"""Application configuration."""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # App settings
    app_name: str = "Food Label Checker"
    debug: bool = False
    log_level: str = "INFO"
    
    # CORS - Allow all origins (tool is called by agent runtimes on other hosts)
    cors_origins: list[str] = ["*"]
    
    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    
    # Public food product database (FOOD_DB_API_URL / FOOD_DB_API_KEY)
    food_db_api_url: Optional[str] = None
    food_db_api_key: Optional[str] = None
    food_db_timeout_seconds: float = 10.0
    food_db_page_size: int = 10  # numOfRows
    food_db_page_no: int = 1
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
