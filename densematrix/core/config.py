"""
Library configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """densematrix settings"""

    model_config = SettingsConfigDict(
        env_prefix="DENSEMATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Construction
    DEFAULT_SIZE: PositiveInt = 4

    # Diagnostics
    TRACE_SUBMATRIX: bool = False

    # Tolerance comparison (Matrix.is_close)
    COMPARE_TOLERANCE: float = Field(default=1e-9, ge=0.0)
    COMPARE_MODE: Literal["relative", "absolute"] = "relative"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
