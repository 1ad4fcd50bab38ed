from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Cache configuration"""

    # Size Settings
    max_size: int = 0  # <= 0 means unbounded
    eliminate_length: Optional[int] = Field(default=None, gt=0)

    # Expiration Settings
    ttl: int = Field(default=0, ge=0)  # seconds, 0 disables expiration

    model_config = SettingsConfigDict(
        env_prefix="RING_LRU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
