from __future__ import annotations

from typing import ClassVar, Dict, FrozenSet, List, NamedTuple, Optional, Tuple

from app.infrastructure.mailing_service.models.base_models import BaseComposer


class MailCall(NamedTuple):
    """One spied call: which method, for which recipient, with which template (if any)."""

    method: str
    to: str
    template_name: Optional[str] = None


class MailSpyBase:
    """
    Shared bookkeeping for the transport and dispatcher spies.

    Every call is recorded as a ``MailCall`` before anything else happens, so a planned
    failure still shows up in ``received_calls``. Failures are planned per spied method,
    either for every recipient or for a single address (a bouncing mailbox while the rest
    of a batch goes through). Method names outside ``spied_methods`` are rejected.
    """

    spied_methods: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(self) -> None:
        self.received_calls: List[MailCall] = []
        self._failures: Dict[Tuple[str, Optional[str]], Exception] = {}

    def fail_on(self, method: str, exc: Exception, to: Optional[str] = None) -> None:
        self._check_method(method)
        self._failures[(method, to)] = exc

    def clear_failures(self) -> None:
        self._failures.clear()

    def calls_to(self, method: str) -> List[MailCall]:
        self._check_method(method)
        return [call for call in self.received_calls if call.method == method]

    def recipients(self, method: str = "send") -> List[str]:
        return [call.to for call in self.calls_to(method)]

    def templates_sent(self) -> List[str]:
        return [call.template_name for call in self.calls_to("send")]

    def _record(self, method: str, to: str, composer: Optional[BaseComposer] = None) -> None:
        self._check_method(method)
        template_name = composer.template_name if composer is not None else None
        self.received_calls.append(MailCall(method, to, template_name))

        # a recipient-specific plan wins over the method-wide one
        exc = self._failures.get((method, to)) or self._failures.get((method, None))
        if exc is not None:
            raise exc

    def _check_method(self, method: str) -> None:
        if method not in self.spied_methods:
            raise ValueError(
                f"{type(self).__name__} does not spy on '{method}' (spied: {', '.join(sorted(self.spied_methods))})"
            )
