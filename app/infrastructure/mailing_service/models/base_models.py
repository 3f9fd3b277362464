from abc import abstractmethod
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, StringConstraints

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BaseComposer(BaseModel):
	"""
	Describes one notifiable event: a fixed subject, the content template it renders
	with, and the variables handed to that template.

	Subclasses set ``subject`` and ``template_name`` as class-level constants and
	compute ``variables()`` from their own fields. ``variables()`` must stay pure (no I/O).
	"""
	model_config = ConfigDict(frozen=True)
	
	subject: ClassVar[str]
	template_name: ClassVar[str]
	
	def __init_subclass__(cls, **kwargs: Any) -> None:
		super().__init_subclass__(**kwargs)
		name = cls.__dict__.get("template_name")
		if name is not None and not str(name).strip():
			raise TypeError(f"{cls.__name__}.template_name must not be blank")
	
	@abstractmethod
	def variables(self) -> dict[str, Any]: ...


class RenderedMessage(BaseModel):
	"""Final subject/body pair produced by the renderer; consumed right away by a transport."""
	model_config = ConfigDict(frozen=True)
	
	subject: NonBlankStr
	body: NonBlankStr
