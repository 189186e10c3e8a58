"""Template content entity service."""

from typing import Any

from ....config.constants import ApiPaths, HttpMethod
from ....core.protocols import RequestExecutor, RestRequest
from ..models import (
    GetTemplateContentInput,
    RestoreTemplateContentInput,
    TextTemplateContentDto,
    UpdateTemplateContentInput,
)


class TemplateContentService:
    """REST wrapper for ``/api/text-template-management/template-contents``."""

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get(self, input: Any) -> TextTemplateContentDto:
        """Get a template's content in one culture."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.TEMPLATE_CONTENTS,
            params=GetTemplateContentInput.coerce(input).to_wire(),
        ))
        return TextTemplateContentDto.model_validate(raw)

    async def update(self, input: Any) -> TextTemplateContentDto:
        """Override a template's content."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.PUT,
            url=ApiPaths.TEMPLATE_CONTENTS,
            body=UpdateTemplateContentInput.coerce(input).to_wire(),
        ))
        return TextTemplateContentDto.model_validate(raw)

    async def restore_to_default(self, input: Any) -> None:
        """Drop the override and fall back to the built-in content."""
        await self._executor.request(RestRequest(
            method=HttpMethod.PUT,
            url=ApiPaths.TEMPLATE_CONTENTS_RESTORE,
            body=RestoreTemplateContentInput.coerce(input).to_wire(),
        ))
