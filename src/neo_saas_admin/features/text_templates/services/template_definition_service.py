"""Template definition entity service (read-only)."""

from ....config.constants import ApiPaths, HttpMethod
from ....core.entities import resource_path
from ....core.protocols import RequestExecutor, RestRequest
from ...pagination import PagedResult, QueryInput, to_query_params
from ..models import TemplateDefinitionDto


class TemplateDefinitionService:
    """REST wrapper for ``/api/text-template-management/template-definitions``.

    Definitions are registered in code by application modules; the API can
    list and read them but not change them.
    """

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_list(self, query: QueryInput = None) -> PagedResult[TemplateDefinitionDto]:
        """Get template definitions (``GetTemplateDefinitionListInput`` or a mapping)."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.TEMPLATE_DEFINITIONS,
            params=to_query_params(query),
        ))
        return PagedResult[TemplateDefinitionDto].parse(raw)

    async def get(self, name: str) -> TemplateDefinitionDto:
        """Get a template definition by its name."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=resource_path(ApiPaths.TEMPLATE_DEFINITION, name=name),
        ))
        return TemplateDefinitionDto.model_validate(raw)
