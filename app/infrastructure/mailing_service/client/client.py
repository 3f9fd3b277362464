import logging

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from pydantic import ValidationError

from app.core.config import MailSettings
from app.infrastructure.mailing_service.client.interfaces import ITransport
from app.infrastructure.mailing_service.exception import exception_constants
from app.infrastructure.mailing_service.exception.mail_exceptions import MailConfigError, MailSendError
from app.infrastructure.mailing_service.models.base_models import BaseComposer
from app.infrastructure.mailing_service.service.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)


class SMTPTransport(ITransport):
	
	def __init__(self, settings: MailSettings, renderer: TemplateRenderer):
		"""
			:param settings: The mail settings to build the SMTP connection from.
			:param renderer: Renders every composer into the final HTML body before it is relayed.
		"""
		
		self.renderer = renderer
		
		self.subject_prefix = settings.MAIL_SUBJECT_PREFIX
		
		try:
			self.conf = ConnectionConfig(
				MAIL_USERNAME=settings.MAIL_USERNAME,
				MAIL_PASSWORD=settings.MAIL_PASSWORD,
				MAIL_FROM=settings.MAIL_FROM,
				MAIL_FROM_NAME=settings.MAIL_FROM_NAME,
				MAIL_PORT=settings.MAIL_PORT,
				MAIL_SERVER=settings.MAIL_SERVER,
				MAIL_STARTTLS=settings.MAIL_STARTTLS,
				MAIL_SSL_TLS=settings.MAIL_SSL_TLS,
				USE_CREDENTIALS=settings.MAIL_USE_CREDENTIALS,
				VALIDATE_CERTS=settings.MAIL_VALIDATE_CERTS,
				SUPPRESS_SEND=int(settings.MAIL_SUPPRESS_SEND),
				MAIL_DEBUG=settings.MAIL_DEBUG,
			)
		except ValidationError as e:
			raise MailConfigError(
				exception_constants.INVALID_CONNECTION_CONFIG.format(server=settings.MAIL_SERVER, port=settings.MAIL_PORT)
			) from e
		
		self._fm = FastMail(self.conf)
	
	@property
	def fm(self) -> FastMail:
		return self._fm
	
	# ---------- Internal operations ----------
	
	def _format_subject(self, subject: str) -> str:
		if not self.subject_prefix:
			return subject
		return f"{self.subject_prefix}: {subject}"
	
	def _generate_message_schema(self, to: str, subject: str, html_body: str) -> MessageSchema:
		try:
			return MessageSchema(
				subject=self._format_subject(subject),
				recipients=[to],
				body=html_body,
				subtype=MessageType.html,
			)
		except ValidationError as e:
			raise MailSendError(exception_constants.INVALID_RECIPIENT.format(to=to)) from e
	
	async def _send_fast_mail(self, message: MessageSchema) -> None:
		try:
			await self._fm.send_message(message=message)
		except Exception as e:
			logger.error(f"failed to deliver mail: {e}")
			raise MailSendError(
				exception_constants.SEND_FAILED.format(
					subject=message.subject, server=self.conf.MAIL_SERVER, port=self.conf.MAIL_PORT
				)
			) from e
	
	# ---------- Send Methods ----------
	
	async def send(self, to: str, composer: BaseComposer) -> None:
		rendered = self.renderer.render(composer)
		message_schema = self._generate_message_schema(to=to, subject=rendered.subject, html_body=rendered.body)
		await self._send_fast_mail(message_schema)
