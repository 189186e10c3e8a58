"""Process-scoped text template management state service."""

import logging
from typing import Any, Callable, List, Optional

from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import Listener
from ...pagination import PagedResult, QueryInput
from ..models import TemplateDefinitionDto, TextTemplateContentDto
from ..services import TemplateContentService, TemplateDefinitionService
from .text_template_facade import TextTemplateFacade

logger = logging.getLogger(__name__)


class TextTemplateManagementStateService:
    """Dispatch/getter facade over template definitions and contents.

    Example:
        >>> state = TextTemplateManagementStateService(executor)
        >>> await state.dispatch_get_template_definitions()
        >>> await state.dispatch_get_template_content(
        ...     {"templateName": "Abp.StandardEmailTemplates.Message", "cultureName": "en"}
        ... )
        >>> state.get_template_content().content
    """

    def __init__(self, executor: RequestExecutor):
        self.templates = TextTemplateFacade(
            TemplateDefinitionService(executor),
            TemplateContentService(executor),
        )
        logger.debug("Created text template management state service")

    # Getters

    def get_template_definitions(self) -> List[TemplateDefinitionDto]:
        return self.templates.items

    def get_total_count(self) -> int:
        return self.templates.total_count

    def get_selected_template(self) -> Optional[TemplateDefinitionDto]:
        return self.templates.selected

    def get_template_content(self) -> Optional[TextTemplateContentDto]:
        return self.templates.template_content

    @property
    def is_loading(self) -> bool:
        return self.templates.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.templates.error

    # Dispatchers

    async def dispatch_get_template_definitions(
        self, query: QueryInput = None
    ) -> OperationResult[PagedResult[TemplateDefinitionDto]]:
        return await self.templates.fetch_list(query)

    async def dispatch_get_template_content(self, input: Any) -> OperationResult[TextTemplateContentDto]:
        """Load template content.

        Raises:
            PreconditionError: If ``input`` has no culture name
        """
        return await self.templates.get_template_content(input)

    async def dispatch_update_template_content(self, input: Any) -> OperationResult[TextTemplateContentDto]:
        return await self.templates.update_template_content(input)

    async def dispatch_restore_to_default(
        self, input: Any
    ) -> OperationResult[Optional[TextTemplateContentDto]]:
        """Restore built-in content; reload it when a culture name is given."""
        return await self.templates.restore_to_default(input)

    def set_selected_template(self, template: Optional[TemplateDefinitionDto]) -> None:
        self.templates.select(template)

    # Lifecycle

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.templates.subscribe(listener)

    def reset(self) -> None:
        self.templates.reset()
