"""
Application settings
- Database, CORS, inventory thresholds, pagination, and Claude API settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///blueship.db"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Inventory: quantity below this is low stock (yellow), below CRITICAL is red
    LOW_STOCK_THRESHOLD: int = 50
    CRITICAL_STOCK_THRESHOLD: int = 10

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Per-query timeout for the warehouse page fan-out (seconds)
    QUERY_TIMEOUT_SECONDS: float = 5.0

    # Claude API (chat fallback for unmatched messages)
    ANTHROPIC_API_KEY: str = ""
    LLM_MODEL: str = "claude-sonnet-4-5-20250929"
    LLM_MAX_TOKENS: int = 1024
    LLM_TEMPERATURE: float = 0.3
    LLM_TIMEOUT_SECONDS: float = 20.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
