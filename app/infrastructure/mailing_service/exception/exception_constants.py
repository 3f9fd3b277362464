# ---------- Configuration ----------
INVALID_DRIVER = "invalid email driver '{driver}' (expected one of: {expected})"
DRIVER_INIT_FAILED = "email driver '{driver}' failed to initialize"
INVALID_CONNECTION_CONFIG = "invalid SMTP connection settings (server='{server}:{port}')"

# ---------- Templates ----------
TEMPLATES_DIR_NOT_FOUND = "templates directory does not exist: {path}"
TEMPLATE_NOT_FOUND = "template '{template_name}' not found"
TEMPLATE_SYNTAX_ERROR = "template syntax error in '{name}' line {lineno}: {message}"
TEMPLATE_DUPLICATE_NAME = "duplicate template name '{template_name}' ({first} / {second})"
TEMPLATE_RENDER_FAILED = "failed to render template '{template_name}'"
LAYOUT_TEMPLATE_MISSING = "layout template '{template_name}' is missing from {path}"

# ---------- Sending ----------
INVALID_RECIPIENT = "invalid recipient address '{to}'"
SEND_FAILED = "SMTP send failed (subject='{subject}', server='{server}:{port}')"

# ---------- Capture ----------
DRIVER_NOT_RESOLVED = "email driver is not resolved"
DRIVER_NOT_CAPTURE = "email driver is not the capture transport (active: {driver})"
CAPTURED_EMAIL_NOT_FOUND = "email for recipient '{to}' not found"
CAPTURED_EMAIL_NOT_COMPOSER = "captured email for '{to}' is not a composer"
