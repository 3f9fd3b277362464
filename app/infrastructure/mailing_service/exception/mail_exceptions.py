class MailError(RuntimeError):
    """Base class for all mail-layer errors."""

class MailConfigError(MailError):
    """Misconfiguration (e.g., bad credentials, invalid sender address)."""

class MailDriverError(MailConfigError):
    """The configured mail driver name is not recognised."""

class MailTemplateError(MailError):
    """Template not found, malformed or failed to render."""

class MailSendError(MailError):
    """SMTP/connect/send failure (including invalid recipient addresses)."""

class MailCaptureError(MailError):
    """Captured message lookup failed (wrong driver or nothing captured)."""
