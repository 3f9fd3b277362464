from typing import Any

from app.infrastructure.mailing_service.models.base_models import BaseComposer
from app.infrastructure.mailing_service.service.interfaces import IEmailDispatcher
from app.infrastructure.mailing_service.test_doubles.base import MailSpyBase


class SpyEmailDispatcher(MailSpyBase, IEmailDispatcher):
    """Wraps a real IEmailDispatcher to spy on calls and optionally fail them."""

    spied_methods = frozenset({"send", "load_captured", "load_captured_variables"})

    def __init__(self, inner: IEmailDispatcher) -> None:
        super().__init__()
        self.inner = inner

    async def send(self, to: str, composer: BaseComposer) -> None:
        self._record("send", to, composer)
        await self.inner.send(to, composer)

    def load_captured(self, to: str) -> BaseComposer:
        self._record("load_captured", to)
        return self.inner.load_captured(to)

    def load_captured_variables(self, to: str) -> dict[str, Any]:
        self._record("load_captured_variables", to)
        return self.inner.load_captured_variables(to)
