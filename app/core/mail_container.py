from dependency_injector import containers, providers

from app.core.config import settings
from app.infrastructure.mailing_service import EmailDispatcher, TemplateRenderer, TransportResolver


class MailStackContainer(containers.DeclarativeContainer):
	"""Dependency injection container"""
	
	mail_settings = providers.Object(settings.mail)
	
	template_renderer = providers.Singleton(TemplateRenderer)
	
	transport_resolver = providers.Singleton(
		TransportResolver,
		settings=mail_settings,
		renderer=template_renderer,
	)
	
	email_dispatcher = providers.Singleton(
		EmailDispatcher,
		resolver=transport_resolver,
	)


email_dispatcher_container = MailStackContainer()

def get_email_dispatcher() -> EmailDispatcher:
	# resolves on every call, so test overrides still work
	return email_dispatcher_container.email_dispatcher()
