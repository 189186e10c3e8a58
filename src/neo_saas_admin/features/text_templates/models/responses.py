"""Text template response models."""

from typing import Optional

from ....core.entities import ApiModel


class TemplateDefinitionDto(ApiModel):
    """Template registered by an application module."""

    name: str
    display_name: Optional[str] = None
    is_layout: bool = False
    layout: Optional[str] = None
    is_inline_localized: bool = False
    default_culture_name: Optional[str] = None


class TextTemplateContentDto(ApiModel):
    """Template content in one culture."""

    name: str
    culture_name: Optional[str] = None
    content: str = ""
