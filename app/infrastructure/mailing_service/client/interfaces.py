from abc import abstractmethod
from typing import Protocol, runtime_checkable

from app.infrastructure.mailing_service.models.base_models import BaseComposer


@runtime_checkable
class ITransport(Protocol):
	@abstractmethod
	async def send(self, to: str, composer: BaseComposer) -> None: ...
