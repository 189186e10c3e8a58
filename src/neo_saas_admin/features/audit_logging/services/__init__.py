"""Audit logging services."""

from .audit_logs_service import AuditLogsService

__all__ = ["AuditLogsService"]
