from abc import abstractmethod
from typing import Any, Protocol

from ..models.base_models import BaseComposer


class IEmailDispatcher(Protocol):
    @abstractmethod
    async def send(self, to: str, composer: BaseComposer) -> None: ...

    @abstractmethod
    def load_captured(self, to: str) -> BaseComposer: ...

    @abstractmethod
    def load_captured_variables(self, to: str) -> dict[str, Any]: ...
