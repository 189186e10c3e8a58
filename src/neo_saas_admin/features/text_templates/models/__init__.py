"""Text template models."""

from .requests import (
    GetTemplateDefinitionListInput,
    GetTemplateContentInput,
    RestoreTemplateContentInput,
    UpdateTemplateContentInput,
)
from .responses import TemplateDefinitionDto, TextTemplateContentDto

__all__ = [
    # Requests
    "GetTemplateDefinitionListInput",
    "GetTemplateContentInput",
    "RestoreTemplateContentInput",
    "UpdateTemplateContentInput",

    # Responses
    "TemplateDefinitionDto",
    "TextTemplateContentDto",
]
