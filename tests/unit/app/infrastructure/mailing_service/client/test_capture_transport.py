import asyncio
import threading

import pytest

from app.infrastructure.mailing_service.client.capture import CaptureTransport
from app.infrastructure.mailing_service.client.interfaces import ITransport
from app.infrastructure.mailing_service.exception.mail_exceptions import MailCaptureError
from utils import ComposerFactory


@pytest.fixture
def capture():
    return CaptureTransport()


class TestCaptureTransport:
    def test_is_a_transport(self, capture):
        assert isinstance(capture, ITransport)

    def test_empty_store_raises(self, capture):
        with pytest.raises(MailCaptureError, match="nobody@example.com"):
            capture.load("nobody@example.com")

    @pytest.mark.asyncio
    async def test_last_write_wins(self, capture, book_approved, password_reset):
        await capture.send("a@example.com", book_approved)
        await capture.send("a@example.com", password_reset)
        assert capture.load("a@example.com") is password_reset
        assert len(capture) == 1

    @pytest.mark.asyncio
    async def test_reset_clears_everything(self, capture, book_approved):
        await capture.send("a@example.com", book_approved)
        await capture.send("b@example.com", book_approved)
        capture.reset()
        assert len(capture) == 0
        with pytest.raises(MailCaptureError):
            capture.load("a@example.com")

    @pytest.mark.asyncio
    async def test_non_composer_payload_is_rejected_on_load(self, capture):
        await capture.send("a@example.com", {"subject": "not a composer"})
        with pytest.raises(MailCaptureError, match="not a composer"):
            capture.load("a@example.com")

    def test_concurrent_writers(self, capture):
        barrier = threading.Barrier(8)

        def _writer(i: int):
            barrier.wait()
            for j in range(25):
                composer = ComposerFactory.book_approved(public_id=f"{i}-{j}")
                asyncio.run(capture.send(f"user{i}@example.com", composer))
                asyncio.run(capture.send("shared@example.com", composer))

        threads = [threading.Thread(target=_writer, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(capture) == 9
        for i in range(8):
            assert capture.load(f"user{i}@example.com").public_id == f"{i}-24"
        assert capture.load("shared@example.com").public_id.endswith("-24")
