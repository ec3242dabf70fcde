# portfolio/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ------------------------
    # MongoDB
    # ------------------------
    MONGO_URL: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URL", "MONGO_URI", "MONGODB_URI"),
    )
    MONGO_DB_NAME: str = "portfolio"
    MONGO_TIMEOUT_MS: int = 5000

    # ------------------------
    # Outbound mail (contact form)
    # ------------------------
    SMTP_SERVER: str = "smtp.mailtrap.io"
    SMTP_PORT: int = 2525
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_SSL: bool = False
    SMTP_TIMEOUT: float = 10.0
    MAIL_FROM: Optional[str] = None
    CONTACT_RECIPIENT: str = ""

    SMS_ENABLED: bool = False

    # ------------------------
    # HTTP
    # ------------------------
    PUBLIC_BASE_URL: Optional[str] = None
    CORS_ORIGINS: str = "*"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def sender_address(self) -> str:
        return self.MAIL_FROM or self.SMTP_USER

    @property
    def base_url(self) -> str:
        return self.PUBLIC_BASE_URL or f"http://localhost:{self.PORT}"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
