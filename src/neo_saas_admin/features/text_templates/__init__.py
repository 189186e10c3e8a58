"""Text template management feature: template definitions and contents."""

from .models import (
    GetTemplateDefinitionListInput,
    GetTemplateContentInput,
    RestoreTemplateContentInput,
    UpdateTemplateContentInput,
    TemplateDefinitionDto,
    TextTemplateContentDto,
)
from .services import TemplateDefinitionService, TemplateContentService
from .facades import (
    TextTemplateFacade,
    TextTemplatesFacade,
    use_text_templates,
    TextTemplateManagementStateService,
)

__all__ = [
    # Models
    "GetTemplateDefinitionListInput",
    "GetTemplateContentInput",
    "RestoreTemplateContentInput",
    "UpdateTemplateContentInput",
    "TemplateDefinitionDto",
    "TextTemplateContentDto",

    # Services
    "TemplateDefinitionService",
    "TemplateContentService",

    # Facades
    "TextTemplateFacade",
    "TextTemplatesFacade",
    "use_text_templates",
    "TextTemplateManagementStateService",
]
