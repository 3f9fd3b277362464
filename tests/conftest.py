import os
from pathlib import Path

import pytest

# Environment setup for testing (must happen before app.core.config is imported)
os.environ.setdefault('MAIL_DRIVER', 'test')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

from app.core.config import MailSettings, settings
from app.infrastructure.mailing_service import TemplateRenderer
from utils import ComposerFactory

TEST_SERVER_ADDR = "https://gopl.test/"


@pytest.fixture(autouse=True)
def _pin_server_settings(monkeypatch):
    """Keep link composition deterministic regardless of the developer's .env"""
    monkeypatch.setattr(settings, "SERVER_ADDR", TEST_SERVER_ADDR)
    monkeypatch.setattr(settings, "APP_NAME", "gopl")


@pytest.fixture(scope="session")
def renderer():
    """The real bundled template set, compiled once per test session"""
    return TemplateRenderer()


@pytest.fixture
def make_mail_settings():
    """Build MailSettings with safe, non-connecting defaults"""
    def _make(**overrides) -> MailSettings:
        values = dict(
            MAIL_DRIVER="smtp",
            MAIL_USERNAME="user",
            MAIL_PASSWORD="pwd",
            MAIL_FROM="noreply@example.com",
            MAIL_FROM_NAME="gopl",
            MAIL_PORT=587,
            MAIL_SERVER="smtp.example.com",
            MAIL_STARTTLS=True,
            MAIL_SSL_TLS=False,
            MAIL_USE_CREDENTIALS=True,
            MAIL_VALIDATE_CERTS=True,
            MAIL_SUPPRESS_SEND=True,
            MAIL_DEBUG=0,
            MAIL_SUBJECT_PREFIX="gopl",
        )
        values.update(overrides)
        return MailSettings(**values)
    return _make


@pytest.fixture
def template_tree(tmp_path: Path):
    """
    Creates a minimal valid template tree:
      <tmp>/templates/{layout.html, greet.html}
    """
    root = tmp_path / "templates"
    root.mkdir(parents=True, exist_ok=True)
    (root / "layout.html").write_text("<main><h1>{{ subject }}</h1>{{ body }}</main>", encoding="utf-8")
    (root / "greet.html").write_text("<p>Hello {{ name }}!</p>", encoding="utf-8")
    return root


@pytest.fixture
def book_approved():
    return ComposerFactory.book_approved()


@pytest.fixture
def password_reset():
    return ComposerFactory.password_reset()
