import logging
from typing import Any

from app.infrastructure.mailing_service.client.capture import CaptureTransport
from app.infrastructure.mailing_service.exception import exception_constants
from app.infrastructure.mailing_service.exception.mail_exceptions import MailCaptureError
from app.infrastructure.mailing_service.models.base_models import BaseComposer
from app.infrastructure.mailing_service.service.transport_resolver import TransportResolver
from .interfaces import IEmailDispatcher

logger = logging.getLogger(__name__)


class EmailDispatcher(IEmailDispatcher):
    """
    Entry point the rest of the backend sends notifications through.

    The transport is resolved lazily on the first ``send`` and reused afterwards.
    Errors are raised to the caller as-is; nothing is retried here.
    """

    def __init__(self, resolver: TransportResolver):
        self._resolver = resolver

    async def send(self, to: str, composer: BaseComposer) -> None:
        transport = self._resolver.resolve()
        logger.debug(f"Dispatching '{composer.template_name}' email via {type(transport).__name__}")
        await transport.send(to, composer)

    # ---------- Captured email access (test driver only) ----------

    def _capture_transport(self) -> CaptureTransport:
        transport = self._resolver.transport
        if transport is None:
            raise MailCaptureError(exception_constants.DRIVER_NOT_RESOLVED)
        if not isinstance(transport, CaptureTransport):
            raise MailCaptureError(exception_constants.DRIVER_NOT_CAPTURE.format(driver=self._resolver.driver))
        return transport

    def load_captured(self, to: str) -> BaseComposer:
        """Return the last composer sent to ``to``; the store is left as it is."""
        return self._capture_transport().load(to)

    def load_captured_variables(self, to: str) -> dict[str, Any]:
        return self.load_captured(to).variables()

    def reset_captured(self) -> None:
        transport = self._resolver.transport
        if isinstance(transport, CaptureTransport):
            transport.reset()
