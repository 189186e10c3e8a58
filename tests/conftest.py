"""Pytest configuration and fixtures for neo-saas-admin tests."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from neo_saas_admin.config.settings import SaasAdminSettings


@pytest.fixture
def mock_executor():
    """Mock request executor; tests set ``request.return_value``/``side_effect``."""
    executor = MagicMock()
    executor.request = AsyncMock(return_value=None)
    return executor


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory test backend."""
    return SaasAdminSettings(
        api_base_url="http://testserver",
        http_timeout_seconds=5.0,
        tenant_id=None,
    )


@pytest.fixture
def sample_tenant():
    """Tenant record as returned by the backend."""
    return {
        "id": "t1",
        "name": "Acme",
        "editionId": "e1",
        "editionName": "Pro",
        "concurrencyStamp": "stamp-1",
    }


@pytest.fixture
def sample_edition():
    """Edition record as returned by the backend."""
    return {"id": "e1", "displayName": "Pro", "concurrencyStamp": "stamp-e1"}


@pytest.fixture
def sample_audit_log():
    """Audit log record as returned by the backend."""
    return {
        "id": "log1",
        "userName": "admin",
        "executionTime": "2024-03-01T10:15:00Z",
        "executionDuration": 42,
        "httpMethod": "GET",
        "url": "/api/saas/tenants",
        "httpStatusCode": 200,
        "entityChanges": [],
        "actions": [],
    }


@pytest.fixture
def sample_template_definition():
    """Template definition record as returned by the backend."""
    return {
        "name": "Abp.StandardEmailTemplates.Message",
        "displayName": "Message",
        "isLayout": False,
        "layout": "Abp.StandardEmailTemplates.Layout",
        "isInlineLocalized": False,
        "defaultCultureName": "en",
    }


@pytest.fixture
def paged():
    """Build a paged response body."""
    def build(items, total_count=None):
        return {"items": list(items), "totalCount": len(items) if total_count is None else total_count}
    return build


@pytest.fixture
def fake_service():
    """Entity service double with async CRUD methods."""
    service = MagicMock()
    service.get_list = AsyncMock(return_value=SimpleNamespace(items=[], total_count=0))
    service.get = AsyncMock()
    service.create = AsyncMock()
    service.update = AsyncMock()
    service.delete = AsyncMock(return_value=None)
    return service
