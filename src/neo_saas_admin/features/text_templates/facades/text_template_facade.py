"""Text template facades.

Template definitions form the paged list; the content of the template being
edited is kept as side data. Content operations need a culture name and
raise ``PreconditionError`` without one, before any request is made.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

from ....config.constants import FallbackMessages
from ....core.exceptions import PreconditionError
from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import FacadeMessages, PaginatedFacade, component_scope
from ...pagination import PagedResult
from ..models import (
    GetTemplateContentInput,
    RestoreTemplateContentInput,
    TemplateDefinitionDto,
    TextTemplateContentDto,
    UpdateTemplateContentInput,
)
from ..services import TemplateContentService, TemplateDefinitionService

TEMPLATE_MESSAGES = FacadeMessages(
    fetch_list=FallbackMessages.FETCH_TEMPLATE_DEFINITIONS,
    get=FallbackMessages.FETCH_TEMPLATE_DEFINITION,
)


def require_culture(input: Any, model, action: str):
    """Coerce ``input`` and check it names a culture."""
    value = model.coerce(input)
    if not value.culture_name:
        raise PreconditionError(
            f"cultureName is required for {action} template content",
            error_code="CULTURE_NAME_REQUIRED",
            details={"template_name": value.template_name},
        )
    return value


class TextTemplateFacade(PaginatedFacade[TemplateDefinitionDto]):
    """Template definitions, the selected template and its content.

    Side data:
        template_content: Content last loaded, updated or restored
    """

    def __init__(self, definitions: TemplateDefinitionService, contents: TemplateContentService):
        super().__init__(
            "text_templates",
            definitions,
            messages=TEMPLATE_MESSAGES,
            initial_side_data={"template_content": None},
        )
        self._contents = contents

    def _total_count(self, response: PagedResult[TemplateDefinitionDto]) -> int:
        # definition lists are not paged server-side and may omit totalCount
        return response.total_count or len(response.items or [])

    @property
    def template_content(self) -> Optional[TextTemplateContentDto]:
        return self.side_data["template_content"]

    def _apply_content(self, content: Optional[TextTemplateContentDto]) -> None:
        if content is not None:
            self._set_side_data(template_content=content)

    async def get_template_content(self, input: Any) -> OperationResult[TextTemplateContentDto]:
        """Load a template's content in one culture.

        Raises:
            PreconditionError: If ``input`` has no culture name
        """
        query = require_culture(input, GetTemplateContentInput, "getting")
        return await self.run(
            "template_content",
            lambda: self._contents.get(query),
            fallback=FallbackMessages.FETCH_TEMPLATE_CONTENT,
            on_success=self._apply_content,
        )

    async def update_template_content(self, input: Any) -> OperationResult[TextTemplateContentDto]:
        """Save new content and keep the saved version."""
        body = UpdateTemplateContentInput.coerce(input)
        return await self.run(
            "template_content",
            lambda: self._contents.update(body),
            fallback=FallbackMessages.UPDATE_TEMPLATE_CONTENT,
            on_success=self._apply_content,
        )

    async def restore_to_default(self, input: Any) -> OperationResult[Optional[TextTemplateContentDto]]:
        """Restore the built-in content.

        With a culture name the restored content is loaded afterwards as part
        of the same operation; without one the content slot is left as is.
        """
        body = RestoreTemplateContentInput.coerce(input)

        async def restore() -> Optional[TextTemplateContentDto]:
            await self._contents.restore_to_default(body)
            if not body.culture_name:
                return None
            return await self._contents.get(body)

        return await self.run(
            "template_content",
            restore,
            fallback=FallbackMessages.RESTORE_TEMPLATE_CONTENT,
            on_success=self._apply_content,
        )


class TextTemplatesFacade(TextTemplateFacade):
    """Component-scoped text template facade."""

    @property
    def template_definitions(self) -> List[TemplateDefinitionDto]:
        return self.items

    @property
    def selected_template(self) -> Optional[TemplateDefinitionDto]:
        return self.selected

    def set_selected_template(self, template: Optional[TemplateDefinitionDto]) -> None:
        self.select(template)


@asynccontextmanager
async def use_text_templates(executor: RequestExecutor) -> AsyncIterator[TextTemplatesFacade]:
    """Create a text template facade that lives for the ``async with`` block."""
    facade = TextTemplatesFacade(TemplateDefinitionService(executor), TemplateContentService(executor))
    async with component_scope(facade) as scoped:
        yield scoped
