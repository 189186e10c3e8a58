"""Audit logging facades in both presentation shapes."""

from .audit_log_facade import AuditLogFacade, AuditLogsFacade, use_audit_logs
from .state_service import AuditLoggingStateService

__all__ = [
    "AuditLogFacade",
    "AuditLogsFacade",
    "use_audit_logs",
    "AuditLoggingStateService",
]
