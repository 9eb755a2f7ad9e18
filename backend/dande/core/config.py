"""
Application configuration
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings"""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Request bounds
    QUANTITY_MIN: int = 1
    QUANTITY_MAX: int = 50
    MAX_COMBINATION_NUMBERS: int = 40
    MAX_EXCLUDE_NUMBERS: int = 10  # Some deployments used 5
    MAX_SPECIAL_SETS: int = 5
    MAX_TOUCHES: int = 10
    MAX_SUMS: int = 10

    # Level ladder: 8, 18, 28, ... then the pool size
    LADDER_START: int = 8
    LADDER_STEP: int = 10
    MAX_LEVELS: int = 10

    # Reported in every batch
    ALGORITHM_NAME: str = "Priority cascade, low-to-high levels"
    ALGORITHM_VERSION: str = "5.0.0"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
