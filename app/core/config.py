from pathlib import Path

from pydantic import EmailStr, Field, field_validator, model_validator
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class MailDriver(str, Enum):
    SMTP = "smtp"
    TEST = "test"


class MailSettings(BaseSettings):
    MAIL_DRIVER: str = Field(
        default=MailDriver.TEST.value,
        description=(
            "Which transport delivers email: 'smtp' talks to a real relay, 'test' captures "
            "messages in memory. Not validated here; an unknown name fails on the first send."
        ),
    )
    MAIL_USERNAME: str = Field(
        default="",
        description="SMTP username. Some providers require it separately, others just use MAIL_FROM.",
    )
    MAIL_PASSWORD: str = Field(
        default="",
        description="Password or app-specific key for authenticating to the SMTP server.",
    )
    MAIL_FROM: EmailStr = Field(
        default="noreply@gopl.dev",
        description="Default sender email address (appears in the 'From' header).",
    )
    MAIL_FROM_NAME: str | None = Field(
        default=None,
        description="Friendly name for the sender (appears alongside MAIL_FROM).",
    )
    MAIL_PORT: int = Field(
        default=587,
        description="Port for SMTP server. Usually 587 for STARTTLS, 465 for SSL/TLS, 25 as legacy.",
    )
    MAIL_SERVER: str = Field(
        default="localhost",
        description="SMTP server hostname or IP address (e.g., smtp.gmail.com).",
    )
    MAIL_STARTTLS: bool = Field(
        default=True,
        description="Use STARTTLS (opportunistic TLS upgrade). Set false if server doesn’t support it.",
    )
    MAIL_SSL_TLS: bool = Field(
        default=False,
        description="Use direct SSL/TLS connection (usually on port 465).",
    )
    MAIL_USE_CREDENTIALS: bool = Field(
        default=True,
        description="Whether to authenticate with username/password. Set False for open relays (rare).",
    )
    MAIL_VALIDATE_CERTS: bool = Field(
        default=True,
        description="Validate SMTP server's TLS/SSL certificate. Set False only for self-signed certs.",
    )
    MAIL_SUPPRESS_SEND: bool = Field(
        default=False,
        description="If True, the SMTP transport renders and builds messages but never connects to the relay.",
    )
    MAIL_DEBUG: int = Field(
        default=0,
        description="Debug output level for SMTP interactions. 0 = silent, 1+ = verbose.",
    )
    MAIL_SUBJECT_PREFIX: str = Field(
        default="gopl",
        description="Brand tag prepended to every subject as '<prefix>: <subject>'.",
    )

    # ---- Normalizers & validation ----

    @field_validator("MAIL_DRIVER", mode="before")
    @classmethod
    def _normalize_driver(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def _validate(self) -> "MailSettings":
        # TLS mode sanity
        if self.MAIL_STARTTLS and self.MAIL_SSL_TLS:
            raise ValueError("Set only one of MAIL_STARTTLS or MAIL_SSL_TLS, not both.")
        return self

    # ---- Configuration manager ----
    model_config = SettingsConfigDict(
        env_file=CONFIG_DIR.parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "gopl"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO, description="Root logging level")

    SERVER_ADDR: str = Field(
        default="http://localhost:8080/",
        description="Public base URL of the web server, used to build absolute links inside emails.",
    )

    mail: MailSettings = Field(default_factory=MailSettings)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_file=CONFIG_DIR.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def server_url(path: str) -> str:
    """
    Join the configured server address with a relative path.

    Exactly one '/' separates the two no matter how either side is written,
    and a trailing '/' on *path* is kept, e.g. ``server_url("/books/abc/")``
    with ``SERVER_ADDR="http://h/"`` gives ``"http://h/books/abc/"``.
    """
    base = settings.SERVER_ADDR.rstrip("/")
    rel = (path or "").lstrip("/")
    return f"{base}/{rel}"


# Global settings instance
settings = Settings()
