"""Text template services."""

from .template_definition_service import TemplateDefinitionService
from .template_content_service import TemplateContentService

__all__ = ["TemplateDefinitionService", "TemplateContentService"]
