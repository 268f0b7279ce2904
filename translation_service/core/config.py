"""
Application configuration using Pydantic Settings
"""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""
    
    # App
    APP_NAME: str = "Translation Service"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    
    # CORS
    CORS_ORIGINS: List[str] = [
        "*",  # Allow all in development
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    
    # Database
    DATABASE_URL: str = "sqlite:///./translation_service.db"
    
    # Redis
    REDIS_URL: str = "redis://localhost:6379"
    CACHE_ENABLED: bool = True
    LANGUAGE_CACHE_TTL: int = 3600  # 1 hour
    
    # Translation backend: "placeholder" or "libretranslate"
    TRANSLATION_BACKEND: str = "placeholder"
    TRANSLATION_BACKEND_URL: str = "http://localhost:5000"
    TRANSLATION_BACKEND_TIMEOUT: float = 3.0
    
    # Business limits
    MAX_TEXT_LENGTH: int = 5000
    MAX_BATCH_SIZE: int = 100
    PROTECTED_USAGE_THRESHOLD: int = 100  # approved + used more than this -> no delete
    
    # Server
    PORT: int = 8000
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
