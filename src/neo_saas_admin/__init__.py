"""Neo-SaaS-Admin - state layer for the SaaS administration modules.

Provides typed REST services and stateful paginated entity facades for
tenant/edition management, audit logging and text-template management.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    SaasAdminSettings,
    get_settings,
    ApiPaths,
    SortOrder,
    FallbackMessages,
)

from .core import (
    # Exceptions
    SaasAdminError,
    PreconditionError,
    TransportError,
    NotFoundError,
    BackendValidationError,
    RequestTimeoutError,

    # Results and transport protocol
    Success,
    Failure,
    OperationResult,
    RestRequest,
    RequestExecutor,
    ApiModel,
)

from .infrastructure import HttpxRequestExecutor

from .features.facades import (
    Snapshot,
    EntityFacade,
    PaginatedFacade,
    CrudFacade,
    component_scope,
)
from .features.pagination import PagedAndSortedRequest, PagedResult

from .features.saas import (
    TenantService,
    EditionService,
    TenantsFacade,
    EditionsFacade,
    use_tenants,
    use_editions,
    SaasStateService,
)
from .features.audit_logging import (
    AuditLogsService,
    AuditLogsFacade,
    use_audit_logs,
    AuditLoggingStateService,
)
from .features.text_templates import (
    TemplateDefinitionService,
    TemplateContentService,
    TextTemplatesFacade,
    use_text_templates,
    TextTemplateManagementStateService,
)

__all__ = [
    "__version__",

    # Configuration
    "SaasAdminSettings",
    "get_settings",
    "ApiPaths",
    "SortOrder",
    "FallbackMessages",

    # Exceptions
    "SaasAdminError",
    "PreconditionError",
    "TransportError",
    "NotFoundError",
    "BackendValidationError",
    "RequestTimeoutError",

    # Core
    "Success",
    "Failure",
    "OperationResult",
    "RestRequest",
    "RequestExecutor",
    "ApiModel",
    "HttpxRequestExecutor",

    # Facade building blocks
    "Snapshot",
    "EntityFacade",
    "PaginatedFacade",
    "CrudFacade",
    "component_scope",
    "PagedAndSortedRequest",
    "PagedResult",

    # SaaS
    "TenantService",
    "EditionService",
    "TenantsFacade",
    "EditionsFacade",
    "use_tenants",
    "use_editions",
    "SaasStateService",

    # Audit logging
    "AuditLogsService",
    "AuditLogsFacade",
    "use_audit_logs",
    "AuditLoggingStateService",

    # Text templates
    "TemplateDefinitionService",
    "TemplateContentService",
    "TextTemplatesFacade",
    "use_text_templates",
    "TextTemplateManagementStateService",
]
