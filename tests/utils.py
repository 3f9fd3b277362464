"""
Test utilities and helper functions
"""
from typing import Any, ClassVar

from app.infrastructure.mailing_service import (
    BaseComposer,
    BookApproved,
    BookRejected,
    ChangesApproved,
    ChangesRejected,
    ConfirmEmail,
    ConfirmEmailChange,
    PasswordResetRequest,
)


class ComposerFactory:
    """Factory for representative composers of every notification type"""

    @staticmethod
    def book_approved(**overrides) -> BookApproved:
        data = dict(book_name="Go in Action", username="alice", public_id="abc123")
        data.update(overrides)
        return BookApproved(**data)

    @staticmethod
    def book_rejected(**overrides) -> BookRejected:
        data = dict(note="Cover image is missing", book_name="Go in Action", username="alice")
        data.update(overrides)
        return BookRejected(**data)

    @staticmethod
    def changes_approved(**overrides) -> ChangesApproved:
        data = dict(username="bob", entity_title="The Go Programming Language", view_url="/books/gopl/")
        data.update(overrides)
        return ChangesApproved(**data)

    @staticmethod
    def changes_rejected(**overrides) -> ChangesRejected:
        data = dict(
            username="bob",
            entity_title="The Go Programming Language",
            note="Please cite a source",
            view_url="/books/gopl/",
        )
        data.update(overrides)
        return ChangesRejected(**data)

    @staticmethod
    def confirm_email(**overrides) -> ConfirmEmail:
        data = dict(username="carol", email="carol@example.com", code="934521")
        data.update(overrides)
        return ConfirmEmail(**data)

    @staticmethod
    def confirm_email_change(**overrides) -> ConfirmEmailChange:
        data = dict(username="dave", token="chg-tok-42")
        data.update(overrides)
        return ConfirmEmailChange(**data)

    @staticmethod
    def password_reset(**overrides) -> PasswordResetRequest:
        data = dict(username="erin", token="reset-tok-7")
        data.update(overrides)
        return PasswordResetRequest(**data)

    @classmethod
    def all(cls) -> list[BaseComposer]:
        return [
            cls.book_approved(),
            cls.book_rejected(),
            cls.changes_approved(),
            cls.changes_rejected(),
            cls.confirm_email(),
            cls.confirm_email_change(),
            cls.password_reset(),
        ]


class UnknownTemplate(BaseComposer):
    """A composer whose template is not part of the bundled set"""
    subject: ClassVar[str] = "Nowhere"
    template_name: ClassVar[str] = "does_not_exist"

    def variables(self) -> dict[str, Any]:
        return {}
