from .client.capture import CaptureTransport
from .client.client import SMTPTransport
from .client.interfaces import ITransport
from .models.base_models import BaseComposer, RenderedMessage
from .models.context_shapes import (
    ALL_COMPOSERS,
    BookApproved,
    BookRejected,
    ChangesApproved,
    ChangesRejected,
    ConfirmEmail,
    ConfirmEmailChange,
    PasswordResetRequest,
)
from .service.email_service import EmailDispatcher
from .service.interfaces import IEmailDispatcher
from .service.template_renderer import TemplateRenderer
from .service.transport_resolver import TransportResolver

from .exception import mail_exceptions
from .exception import exception_constants

from .test_doubles.client import SpyTransport
from .test_doubles.email_service import SpyEmailDispatcher


__all__ = [
    
    # client/
    "CaptureTransport",
    "ITransport",
    "SMTPTransport",
    
    # service/
    "EmailDispatcher",
    "IEmailDispatcher",
    "TemplateRenderer",
    "TransportResolver",
    
    # exception/
    "mail_exceptions",
    "exception_constants",

    # models/
    "ALL_COMPOSERS",
    "BaseComposer",
    "BookApproved",
    "BookRejected",
    "ChangesApproved",
    "ChangesRejected",
    "ConfirmEmail",
    "ConfirmEmailChange",
    "PasswordResetRequest",
    "RenderedMessage",
    
    # test_doubles/
    "SpyTransport",
    "SpyEmailDispatcher"
]
