"""Text template facades in both presentation shapes."""

from .text_template_facade import (
    TextTemplateFacade,
    TextTemplatesFacade,
    use_text_templates,
    require_culture,
)
from .state_service import TextTemplateManagementStateService

__all__ = [
    "TextTemplateFacade",
    "TextTemplatesFacade",
    "use_text_templates",
    "require_culture",
    "TextTemplateManagementStateService",
]
