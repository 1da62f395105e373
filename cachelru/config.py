from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # Cache Settings
    capacity: int = 3
    cache_file: str = "mon_cache.txt"

    # Logging
    log_level: str = "INFO"

    # Benchmark Settings
    benchmark_size: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CACHELRU_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("capacity", "benchmark_size")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


settings = Settings()
