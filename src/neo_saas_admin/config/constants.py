"""Constants and enums for neo-saas-admin.

REST resource paths, default UI state values and the fallback messages used
when a failure carries no readable message.
"""

from enum import Enum
from typing import Final


class ApiPaths:
    """REST resource paths consumed by the entity services."""

    TENANTS: Final[str] = "/api/saas/tenants"
    TENANT: Final[str] = "/api/saas/tenants/{id}"
    TENANTS_LATEST: Final[str] = "/api/saas/tenants/latest"
    TENANT_DEFAULT_CONNECTION_STRING: Final[str] = "/api/saas/tenants/{id}/default-connection-string"

    EDITIONS: Final[str] = "/api/saas/editions"
    EDITION: Final[str] = "/api/saas/editions/{id}"
    EDITION_USAGE_STATISTICS: Final[str] = "/api/saas/editions/statistics/usage-statistic"

    TEMPLATE_DEFINITIONS: Final[str] = "/api/text-template-management/template-definitions"
    TEMPLATE_DEFINITION: Final[str] = "/api/text-template-management/template-definitions/{name}"
    TEMPLATE_CONTENTS: Final[str] = "/api/text-template-management/template-contents"
    TEMPLATE_CONTENTS_RESTORE: Final[str] = "/api/text-template-management/template-contents/restore-to-default"

    AUDIT_LOGS: Final[str] = "/api/audit-logging/audit-logs"
    AUDIT_LOG: Final[str] = "/api/audit-logging/audit-logs/{id}"
    AUDIT_AVERAGE_EXECUTION_DURATION: Final[str] = (
        "/api/audit-logging/audit-logs/statistics/average-execution-duration-per-day"
    )
    AUDIT_ERROR_RATE: Final[str] = "/api/audit-logging/audit-logs/statistics/error-rate"
    AUDIT_ENTITY_CHANGES: Final[str] = "/api/audit-logging/audit-logs/entity-changes"
    AUDIT_ENTITY_CHANGE: Final[str] = "/api/audit-logging/audit-logs/entity-changes/{id}"
    AUDIT_ENTITY_CHANGES_WITH_USERNAME: Final[str] = (
        "/api/audit-logging/audit-logs/entity-changes-with-username"
    )
    AUDIT_ENTITY_CHANGE_WITH_USERNAME: Final[str] = (
        "/api/audit-logging/audit-logs/entity-changes-with-username/{id}"
    )


class HttpMethod(str, Enum):
    """HTTP methods understood by the request executor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ResponseType(str, Enum):
    """How the executor should decode a response body."""

    JSON = "json"
    TEXT = "text"


class SortOrder(str, Enum):
    """Sort order of a list view. Empty means backend default."""

    NONE = ""
    ASC = "asc"
    DESC = "desc"


class DefaultSortKeys:
    """Initial sort keys of the list views."""

    TENANTS: Final[str] = "name"
    EDITIONS: Final[str] = "displayName"
    AUDIT_LOGS: Final[str] = "executionTime"


class FallbackMessages:
    """Display strings used when a failure has no message of its own."""

    FETCH_TENANTS: Final[str] = "Failed to fetch tenants"
    FETCH_TENANT: Final[str] = "Failed to fetch tenant"
    CREATE_TENANT: Final[str] = "Failed to create tenant"
    UPDATE_TENANT: Final[str] = "Failed to update tenant"
    DELETE_TENANT: Final[str] = "Failed to delete tenant"
    FETCH_LATEST_TENANTS: Final[str] = "Failed to fetch latest tenants"
    FETCH_CONNECTION_STRING: Final[str] = "Failed to fetch connection string"
    UPDATE_CONNECTION_STRING: Final[str] = "Failed to update connection string"
    DELETE_CONNECTION_STRING: Final[str] = "Failed to delete connection string"

    FETCH_EDITIONS: Final[str] = "Failed to fetch editions"
    FETCH_EDITION: Final[str] = "Failed to fetch edition"
    CREATE_EDITION: Final[str] = "Failed to create edition"
    UPDATE_EDITION: Final[str] = "Failed to update edition"
    DELETE_EDITION: Final[str] = "Failed to delete edition"
    FETCH_USAGE_STATISTICS: Final[str] = "Failed to fetch usage statistics"

    FETCH_TEMPLATE_DEFINITIONS: Final[str] = "Failed to fetch template definitions"
    FETCH_TEMPLATE_DEFINITION: Final[str] = "Failed to fetch template definition"
    FETCH_TEMPLATE_CONTENT: Final[str] = "Failed to fetch template content"
    UPDATE_TEMPLATE_CONTENT: Final[str] = "Failed to update template content"
    RESTORE_TEMPLATE_CONTENT: Final[str] = "Failed to restore template to default"

    FETCH_AUDIT_LOGS: Final[str] = "Failed to fetch audit logs"
    FETCH_AUDIT_LOG: Final[str] = "Failed to fetch audit log"
    FETCH_AVERAGE_EXECUTION_STATS: Final[str] = "Failed to fetch average execution statistics"
    FETCH_ERROR_RATE_STATS: Final[str] = "Failed to fetch error rate statistics"
    FETCH_ENTITY_CHANGES: Final[str] = "Failed to fetch entity changes"
    FETCH_ENTITY_CHANGE: Final[str] = "Failed to fetch entity change"

    UNKNOWN: Final[str] = "An unexpected error occurred"
