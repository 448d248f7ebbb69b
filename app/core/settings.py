# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    APP_NAME: str = "CleanQuote"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: list[str] = ["*"]

    # --- Notifications ---
    ADMIN_EMAIL: str = "admin@cleanquote.com"
    CONTACT_EMAIL: str = "info@cleanquote.com"
    CONTACT_PHONE: str = "(555) 123-4567"

    # --- Mail transport (where the quote flow posts its emails) ---
    MAIL_TRANSPORT_URL: str = "http://localhost:8000/api/send-email"
    MAIL_TRANSPORT_TIMEOUT: float = 15.0

    # --- SendGrid (used by /api/send-email) ---
    SENDGRID_API_KEY: Optional[str] = None
    SENDGRID_FROM_EMAIL: Optional[str] = None
    SEND_EMAIL_RATE_LIMIT: str = "30/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()  # reads .env
