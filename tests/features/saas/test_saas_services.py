"""Tests for the tenant and edition services."""

import pytest
from pydantic import ValidationError

from neo_saas_admin.config.constants import HttpMethod, ResponseType
from neo_saas_admin.core.exceptions import NotFoundError
from neo_saas_admin.core.protocols import RestRequest
from neo_saas_admin.features.saas import (
    EditionDto,
    EditionService,
    GetTenantsInput,
    SaasTenantCreateDto,
    SaasTenantDto,
    TenantService,
)


class TestTenantService:
    """Test cases for TenantService."""

    @pytest.mark.asyncio
    async def test_get_list_default_params(self, mock_executor, paged, sample_tenant):
        """Test get_list sends empty params by default."""
        mock_executor.request.return_value = paged([sample_tenant])
        service = TenantService(mock_executor)

        result = await service.get_list()

        mock_executor.request.assert_awaited_once_with(RestRequest(
            method=HttpMethod.GET, url="/api/saas/tenants", params={},
        ))
        assert result.total_count == 1
        assert isinstance(result.items[0], SaasTenantDto)
        assert result.items[0].edition_name == "Pro"

    @pytest.mark.asyncio
    async def test_get_list_with_query_model(self, mock_executor, paged):
        """Test query models are sent with camelCase names."""
        mock_executor.request.return_value = paged([])
        service = TenantService(mock_executor)

        await service.get_list(GetTenantsInput(filter="acme", max_result_count=5, get_edition_names=True))

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.params == {"filter": "acme", "maxResultCount": 5, "getEditionNames": True}

    @pytest.mark.asyncio
    async def test_get(self, mock_executor, sample_tenant):
        """Test get requests the tenant by id."""
        mock_executor.request.return_value = sample_tenant
        service = TenantService(mock_executor)

        tenant = await service.get("t1")

        assert mock_executor.request.await_args.args[0].url == "/api/saas/tenants/t1"
        assert tenant.concurrency_stamp == "stamp-1"

    @pytest.mark.asyncio
    async def test_create(self, mock_executor, sample_tenant):
        """Test create posts the input as a camelCase body."""
        mock_executor.request.return_value = sample_tenant
        service = TenantService(mock_executor)

        await service.create({
            "name": "Acme",
            "admin_email_address": "admin@acme.test",
            "admin_password": "1q2w3E*",
        })

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.method == HttpMethod.POST
        assert descriptor.url == "/api/saas/tenants"
        assert descriptor.body == {
            "name": "Acme",
            "adminEmailAddress": "admin@acme.test",
            "adminPassword": "1q2w3E*",
        }

    def test_create_requires_admin_fields(self):
        """Test tenant create input requires the admin user fields."""
        with pytest.raises(ValidationError):
            SaasTenantCreateDto(name="Acme")
        with pytest.raises(ValidationError):
            SaasTenantCreateDto(name="Acme", admin_email_address="not-an-email", admin_password="x")

    @pytest.mark.asyncio
    async def test_update_body_excludes_id(self, mock_executor, sample_tenant):
        """Test update puts the body without the id."""
        mock_executor.request.return_value = sample_tenant
        service = TenantService(mock_executor)

        await service.update("t1", {"id": "t1", "name": "Acme 2", "concurrencyStamp": "stamp-1"})

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.method == HttpMethod.PUT
        assert descriptor.url == "/api/saas/tenants/t1"
        assert descriptor.body == {"name": "Acme 2", "concurrencyStamp": "stamp-1"}

    @pytest.mark.asyncio
    async def test_update_requires_concurrency_stamp(self, mock_executor):
        """Test update input must carry the concurrency stamp."""
        service = TenantService(mock_executor)

        with pytest.raises(ValidationError):
            await service.update("t1", {"name": "Acme 2"})
        mock_executor.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_propagates_not_found(self, mock_executor):
        """Test executor errors propagate unchanged."""
        mock_executor.request.side_effect = NotFoundError("Tenant not found", status_code=404)
        service = TenantService(mock_executor)

        with pytest.raises(NotFoundError):
            await service.delete("t1")

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.method == HttpMethod.DELETE
        assert descriptor.url == "/api/saas/tenants/t1"

    @pytest.mark.asyncio
    async def test_get_default_connection_string(self, mock_executor):
        """Test the connection string is requested as text."""
        mock_executor.request.return_value = None
        service = TenantService(mock_executor)

        value = await service.get_default_connection_string("t1")

        assert value == ""
        mock_executor.request.assert_awaited_once_with(RestRequest(
            method=HttpMethod.GET,
            url="/api/saas/tenants/t1/default-connection-string",
            response_type=ResponseType.TEXT,
        ))

    @pytest.mark.asyncio
    async def test_update_default_connection_string(self, mock_executor):
        """Test the connection string travels as a query parameter."""
        service = TenantService(mock_executor)

        await service.update_default_connection_string("t1", "Server=db")

        mock_executor.request.assert_awaited_once_with(RestRequest(
            method=HttpMethod.PUT,
            url="/api/saas/tenants/t1/default-connection-string",
            params={"defaultConnectionString": "Server=db"},
        ))

    @pytest.mark.asyncio
    async def test_delete_default_connection_string(self, mock_executor):
        """Test deleting the connection string."""
        service = TenantService(mock_executor)

        await service.delete_default_connection_string("t1")

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.method == HttpMethod.DELETE
        assert descriptor.url == "/api/saas/tenants/t1/default-connection-string"

    @pytest.mark.asyncio
    async def test_get_latest(self, mock_executor, sample_tenant):
        """Test latest tenants are parsed from a plain list."""
        mock_executor.request.return_value = [sample_tenant]
        service = TenantService(mock_executor)

        tenants = await service.get_latest()

        assert [tenant.id for tenant in tenants] == ["t1"]
        assert mock_executor.request.await_args.args[0].url == "/api/saas/tenants/latest"


class TestEditionService:
    """Test cases for EditionService."""

    @pytest.mark.asyncio
    async def test_get_list(self, mock_executor, paged, sample_edition):
        """Test get_list passes mapping queries through."""
        mock_executor.request.return_value = paged([sample_edition])
        service = EditionService(mock_executor)

        result = await service.get_list({"filter": "pro"})

        mock_executor.request.assert_awaited_once_with(RestRequest(
            method=HttpMethod.GET, url="/api/saas/editions", params={"filter": "pro"},
        ))
        assert result.items == [EditionDto(id="e1", display_name="Pro", concurrency_stamp="stamp-e1")]

    @pytest.mark.asyncio
    async def test_create_requires_display_name_only(self, mock_executor, sample_edition):
        """Test edition create needs only the display name."""
        mock_executor.request.return_value = sample_edition
        service = EditionService(mock_executor)

        await service.create({"displayName": "Pro"})

        assert mock_executor.request.await_args.args[0].body == {"displayName": "Pro"}
        with pytest.raises(ValidationError):
            await service.create({})

    @pytest.mark.asyncio
    async def test_update(self, mock_executor, sample_edition):
        """Test update puts the edition without id."""
        mock_executor.request.return_value = sample_edition
        service = EditionService(mock_executor)

        await service.update("e1", EditionDto(id="e1", display_name="Pro+", concurrency_stamp="stamp-e1"))

        descriptor = mock_executor.request.await_args.args[0]
        assert descriptor.url == "/api/saas/editions/e1"
        assert descriptor.body == {"displayName": "Pro+", "concurrencyStamp": "stamp-e1"}

    @pytest.mark.asyncio
    async def test_get_usage_statistics(self, mock_executor):
        """Test usage statistics parsing."""
        mock_executor.request.return_value = {"data": {"Pro": 3, "Basic": 5}}
        service = EditionService(mock_executor)

        stats = await service.get_usage_statistics()

        assert stats.data == {"Pro": 3, "Basic": 5}
        assert mock_executor.request.await_args.args[0].url == "/api/saas/editions/statistics/usage-statistic"

    @pytest.mark.asyncio
    async def test_get_usage_statistics_empty(self, mock_executor):
        """Test a missing data field gives empty statistics."""
        mock_executor.request.return_value = {}
        service = EditionService(mock_executor)

        stats = await service.get_usage_statistics()

        assert stats.data == {}
