import logging
import threading
from typing import Callable, Mapping, Optional

from app.core.config import MailDriver, MailSettings
from app.infrastructure.mailing_service.client.capture import CaptureTransport
from app.infrastructure.mailing_service.client.client import SMTPTransport
from app.infrastructure.mailing_service.client.interfaces import ITransport
from app.infrastructure.mailing_service.exception import exception_constants
from app.infrastructure.mailing_service.exception.mail_exceptions import MailConfigError, MailDriverError, MailError
from app.infrastructure.mailing_service.service.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

TransportFactory = Callable[[], ITransport]


class TransportResolver:
    """
    Picks the transport named by ``MAIL_DRIVER`` the first time it is asked for and then
    keeps that outcome for good.

    The first caller builds the transport while holding a lock; callers arriving meanwhile
    wait and reuse the result. A failure (unknown driver, broken SMTP settings) is cached
    the same way: every later call raises an error of the same type, message and cause
    without another attempt.
    """

    def __init__(
        self,
        settings: MailSettings,
        renderer: TemplateRenderer,
        factories: Optional[Mapping[str, TransportFactory]] = None,
    ):
        self._driver = settings.MAIL_DRIVER
        self._factories: Mapping[str, TransportFactory] = factories if factories is not None else {
            MailDriver.SMTP.value: lambda: SMTPTransport(settings=settings, renderer=renderer),
            MailDriver.TEST.value: CaptureTransport,
        }

        self._lock = threading.Lock()
        self._resolved = False
        self._transport: Optional[ITransport] = None
        self._error: Optional[MailError] = None

    @property
    def driver(self) -> str:
        return self._driver

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def transport(self) -> Optional[ITransport]:
        """The active transport, or None while unresolved or after a failed resolution."""
        return self._transport

    def resolve(self) -> ITransport:
        if not self._resolved:
            with self._lock:
                if not self._resolved:
                    self._transport, self._error = self._build()
                    self._resolved = True

        if self._error is not None:
            raise self._replay_error()
        return self._transport

    def _replay_error(self) -> MailError:
        # the cached error is never raised itself, each caller gets its own copy
        error = type(self._error)(*self._error.args)
        error.__cause__ = self._error.__cause__
        return error

    def _build(self) -> tuple[Optional[ITransport], Optional[MailError]]:
        factory = self._factories.get(self._driver)
        if factory is None:
            error = MailDriverError(
                exception_constants.INVALID_DRIVER.format(
                    driver=self._driver, expected=", ".join(sorted(self._factories))
                )
            )
            logger.error(f"Mail driver resolution failed: {error}")
            return None, error

        try:
            transport = factory()
        except MailError as e:
            logger.error(f"Mail driver '{self._driver}' failed to initialize: {e}")
            return None, e
        except Exception as e:
            logger.error(f"Mail driver '{self._driver}' failed to initialize: {e}", exc_info=True)
            error = MailConfigError(exception_constants.DRIVER_INIT_FAILED.format(driver=self._driver))
            error.__cause__ = e
            return None, error

        logger.info(f"Mail driver '{self._driver}' resolved to {type(transport).__name__}")
        return transport, None
