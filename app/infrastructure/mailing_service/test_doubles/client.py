from app.infrastructure.mailing_service.client.interfaces import ITransport
from app.infrastructure.mailing_service.models.base_models import BaseComposer
from app.infrastructure.mailing_service.test_doubles.base import MailSpyBase


class SpyTransport(MailSpyBase, ITransport):
    """Wraps a real ITransport to spy on deliveries and optionally fail them."""

    spied_methods = frozenset({"send"})

    def __init__(self, inner: ITransport) -> None:
        super().__init__()
        self.inner = inner

        # only deliveries that reached the inner transport
        self.captured: list[tuple[str, BaseComposer]] = []

    async def send(self, to: str, composer: BaseComposer) -> None:
        self._record("send", to, composer)
        self.captured.append((to, composer))
        await self.inner.send(to, composer)
