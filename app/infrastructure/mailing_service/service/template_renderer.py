import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from jinja2 import Environment, FileSystemLoader, Template, TemplateSyntaxError, select_autoescape
from markupsafe import Markup

from app.infrastructure.mailing_service.exception import exception_constants
from app.infrastructure.mailing_service.exception.mail_exceptions import MailTemplateError
from app.infrastructure.mailing_service.models.base_models import BaseComposer, RenderedMessage

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_SUFFIX = ".html"
LAYOUT_TEMPLATE = "layout"


class TemplateRenderer:
	"""
	Renders a composer in two stages: its own content template first, then the shared
	layout template that receives ``subject`` and the already rendered ``body``.

	Every ``*.html`` file under ``templates_dir`` is compiled once at construction; a broken
	template set raises ``MailTemplateError`` right away instead of on the first send.
	Nothing is mutated afterwards, so one instance can be shared across threads.

	Placeholders missing from ``variables()`` render as an empty string (Jinja2's default
	``Undefined``); only structural problems fail a render.
	"""

	def __init__(self, templates_dir: Path | str | None = None):
		self._templates_dir = Path(templates_dir) if templates_dir is not None else TEMPLATES_DIR
		if not self._templates_dir.is_dir():
			raise MailTemplateError(exception_constants.TEMPLATES_DIR_NOT_FOUND.format(path=self._templates_dir))

		self._env = Environment(
			loader=FileSystemLoader(str(self._templates_dir)),
			autoescape=select_autoescape(["html"]),
		)

		compiled = self._compile_all()
		layout = compiled.pop(LAYOUT_TEMPLATE, None)
		if layout is None:
			raise MailTemplateError(
				exception_constants.LAYOUT_TEMPLATE_MISSING.format(
					template_name=LAYOUT_TEMPLATE + TEMPLATE_SUFFIX, path=self._templates_dir
				)
			)

		self._layout: Template = layout
		self._templates: Mapping[str, Template] = MappingProxyType(compiled)
		logger.info(f"Compiled {len(self._templates)} email templates from {self._templates_dir}")

	@property
	def template_names(self) -> frozenset[str]:
		return frozenset(self._templates)

	def _compile_all(self) -> dict[str, Template]:
		compiled: dict[str, Template] = {}
		sources: dict[str, str] = {}

		for source in self._env.list_templates(extensions=[TEMPLATE_SUFFIX.lstrip(".")]):
			name = Path(source).stem
			if name in compiled:
				raise MailTemplateError(
					exception_constants.TEMPLATE_DUPLICATE_NAME.format(
						template_name=name, first=sources[name], second=source
					)
				)
			try:
				compiled[name] = self._env.get_template(source)
			except TemplateSyntaxError as e:
				raise MailTemplateError(
					exception_constants.TEMPLATE_SYNTAX_ERROR.format(name=e.name, lineno=e.lineno, message=e.message)
				) from e
			sources[name] = source

		return compiled

	def render(self, composer: BaseComposer) -> RenderedMessage:
		template = self._templates.get(composer.template_name)
		if template is None:
			raise MailTemplateError(exception_constants.TEMPLATE_NOT_FOUND.format(template_name=composer.template_name))

		try:
			content = template.render(**composer.variables())
		except Exception as e:
			raise MailTemplateError(
				exception_constants.TEMPLATE_RENDER_FAILED.format(template_name=composer.template_name)
			) from e

		try:
			# content is already escaped markup, it must not be escaped a second time
			body = self._layout.render(subject=composer.subject, body=Markup(content))
		except Exception as e:
			raise MailTemplateError(
				exception_constants.TEMPLATE_RENDER_FAILED.format(template_name=LAYOUT_TEMPLATE)
			) from e

		return RenderedMessage(subject=composer.subject, body=body)
