"""Services orchestrating the template engine."""

from formsynth.services.template_service import TemplateService

__all__ = ["TemplateService"]
