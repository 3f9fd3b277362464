"""
Process bring-up for the mail stack.

Templates are compiled eagerly so a broken template set stops the process before it
serves anything; the transport itself is still resolved on the first send.
"""
import logging
from typing import Optional

from app.core.config import LogLevel, settings
from app.core.mail_container import MailStackContainer, email_dispatcher_container
from app.infrastructure.mailing_service import EmailDispatcher

logger = logging.getLogger(__name__)


def configure_logging(level: LogLevel = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def bootstrap(container: Optional[MailStackContainer] = None) -> EmailDispatcher:
    """Initialize logging and the template set, then hand back the shared dispatcher."""
    container = container or email_dispatcher_container
    configure_logging(settings.LOG_LEVEL)

    try:
        renderer = container.template_renderer()
    except Exception as e:
        logger.error(f"Failed to initialize email templates: {str(e)}", exc_info=True)
        raise

    logger.info(
        f"Mail stack ready (environment='{settings.ENVIRONMENT}', driver='{container.mail_settings().MAIL_DRIVER}', "
        f"templates={sorted(renderer.template_names)})"
    )
    return container.email_dispatcher()


if __name__ == "__main__":
    bootstrap()
