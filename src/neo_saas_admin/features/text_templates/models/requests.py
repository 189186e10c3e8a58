"""Text template request models."""

from typing import Optional

from pydantic import Field

from ....core.entities import ApiModel
from ...pagination import PagedAndSortedRequest


class GetTemplateDefinitionListInput(PagedAndSortedRequest):
    """Template definition list query."""

    filter_text: Optional[str] = None


class GetTemplateContentInput(ApiModel):
    """Identifies one template's content in one culture.

    ``culture_name`` may be omitted on the model; content operations that
    need it check for it before issuing a request.
    """

    template_name: str = Field(..., min_length=1)
    culture_name: Optional[str] = None


class RestoreTemplateContentInput(GetTemplateContentInput):
    """Input for resetting a template to its built-in content."""


class UpdateTemplateContentInput(GetTemplateContentInput):
    """Input for overriding a template's content."""

    content: str = ""
