"""
Configuration settings for the application
"""

from dataclasses import dataclass
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class MailConfig:
    """Outgoing mail settings, resolved once at startup"""

    sender_address: Optional[str]
    password: Optional[str]
    smtp_host: str
    smtp_port: int
    timeout: float
    from_name: str

    @property
    def available(self) -> bool:
        """Whether confirmation emails can be sent at all"""
        return bool(self.sender_address and self.password)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./wedding_rsvp.db"

    # Static pages (rsvp.html, registry.html, admin.html)
    STATIC_DIR: str = "static"

    # CORS
    ALLOW_ORIGINS: List[str] = ["*"]

    # Email
    EMAIL_USER: Optional[str] = None
    EMAIL_PASSWORD: Optional[str] = None
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_TIMEOUT: float = 30.0

    # Wedding details used in the confirmation email
    COUPLE_NAMES: str = "Sarah & Michael"
    WEDDING_DATE: str = "June 15, 2026"
    CONTACT_EMAIL: str = "wedding@sarahandmichael.com"

    def mail_config(self) -> MailConfig:
        return MailConfig(
            sender_address=(self.EMAIL_USER or "").strip() or None,
            password=self.EMAIL_PASSWORD or None,
            smtp_host=self.SMTP_HOST,
            smtp_port=self.SMTP_PORT,
            timeout=self.SMTP_TIMEOUT,
            from_name=self.COUPLE_NAMES,
        )


settings = Settings()
