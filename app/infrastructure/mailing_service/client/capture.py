import threading

from app.infrastructure.mailing_service.client.interfaces import ITransport
from app.infrastructure.mailing_service.exception import exception_constants
from app.infrastructure.mailing_service.exception.mail_exceptions import MailCaptureError
from app.infrastructure.mailing_service.models.base_models import BaseComposer


class CaptureTransport(ITransport):
	"""
	Transport for tests: keeps the last composer sent to each recipient instead of
	delivering anything. No rendering, no network.
	"""
	
	def __init__(self) -> None:
		self._lock = threading.Lock()
		self._emails: dict[str, object] = {}
	
	async def send(self, to: str, composer: BaseComposer) -> None:
		with self._lock:
			self._emails[to] = composer
	
	def load(self, to: str) -> BaseComposer:
		with self._lock:
			if to not in self._emails:
				raise MailCaptureError(exception_constants.CAPTURED_EMAIL_NOT_FOUND.format(to=to))
			captured = self._emails[to]
		
		if not isinstance(captured, BaseComposer):
			raise MailCaptureError(exception_constants.CAPTURED_EMAIL_NOT_COMPOSER.format(to=to))
		return captured
	
	def reset(self) -> None:
		"""Forget every captured email."""
		with self._lock:
			self._emails.clear()
	
	def __len__(self) -> int:
		with self._lock:
			return len(self._emails)
