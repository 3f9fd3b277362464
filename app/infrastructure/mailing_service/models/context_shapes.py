from typing import Any

from app.core.config import server_url, settings
from app.infrastructure.mailing_service.models.base_models import BaseComposer


class BookApproved(BaseComposer):
    """Sent when a book has been approved and published."""
    subject = "Your book is online!"
    template_name = "book_approved"
    
    book_name: str
    username: str
    public_id: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "book_name": self.book_name,
            "view_book_url": server_url(f"/books/{self.public_id}/"),
        }


class BookRejected(BaseComposer):
    """Sent when a submitted book is rejected by moderation."""
    subject = "Your book wasn’t approved"
    template_name = "book_rejected"
    
    note: str
    book_name: str
    username: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "book_name": self.book_name,
            "note": self.note,
        }


class ChangesApproved(BaseComposer):
    """Sent when proposed changes to an entity have been approved and applied."""
    subject = "Your changes have been approved!"
    template_name = "changes_approved"
    
    username: str
    entity_title: str
    view_url: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "entity_title": self.entity_title,
            "view_url": server_url(self.view_url),
        }


class ChangesRejected(BaseComposer):
    """Sent when proposed changes to an entity have been rejected."""
    subject = "Your changes were not approved"
    template_name = "changes_rejected"
    
    username: str
    entity_title: str
    note: str
    view_url: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "entity_title": self.entity_title,
            "note": self.note,
            "view_url": server_url(self.view_url),
        }


class ConfirmEmail(BaseComposer):
    subject = "Email confirmation"
    template_name = "confirm_email"
    
    username: str
    email: str
    code: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "code": self.code,
            "confirm_url": server_url("/users/confirm-email/"),
        }


class ConfirmEmailChange(BaseComposer):
    subject = "Confirm Your New Email Address"
    template_name = "confirm_email_change"
    
    username: str
    token: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "link": server_url(f"/change-email/{self.token}/"),
            "project_name": settings.APP_NAME,
            # not printed by the template, read back by tests through the capture transport
            "token": self.token,
        }


class PasswordResetRequest(BaseComposer):
    subject = "Password Reset Request"
    template_name = "password_reset"
    
    username: str
    token: str
    
    def variables(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "link": server_url(f"/password-reset/{self.token}/"),
            # not printed by the template, read back by tests through the capture transport
            "token": self.token,
        }


ALL_COMPOSERS: tuple[type[BaseComposer], ...] = (
    BookApproved,
    BookRejected,
    ChangesApproved,
    ChangesRejected,
    ConfirmEmail,
    ConfirmEmailChange,
    PasswordResetRequest,
)
