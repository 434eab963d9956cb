"""
Configuration settings for the application
"""

import os
from typing import List, Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./rsvp.db")

    # Security
    ADMIN_PASSWORD: Optional[str] = os.getenv("ADMIN_PASSWORD")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    AUTH_COOKIE_NAME: str = "admin-auth"
    SESSION_MAX_AGE: int = 60 * 60 * 24 * 7  # 1 week

    # Auth gate routing
    LOGIN_PATH: str = "/admin/login"
    LANDING_PATH: str = "/admin/attendance"
    PROTECTED_PATHS: List[str] = ["/admin/attendance"]

    # Application
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:8000")

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    class Config:
        env_file = ".env"

settings = Settings()
