"""Tests for the SaaS facades and the SaaS state service."""

import pytest

from neo_saas_admin.config.constants import SortOrder
from neo_saas_admin.config.settings import get_settings
from neo_saas_admin.core.exceptions import NotFoundError, TransportError
from neo_saas_admin.core.value_objects import Failure
from neo_saas_admin.features.saas import (
    EditionDto,
    EditionsFacade,
    EditionService,
    SaasStateService,
    SaasTenantDto,
    TenantsFacade,
    TenantService,
    use_editions,
    use_tenants,
)


def request_urls(executor):
    return [call.args[0].url for call in executor.request.await_args_list]


class TestTenantsFacade:
    """Test cases for the component-scoped tenant facade."""

    @pytest.mark.asyncio
    async def test_fetch_list_with_filter(self, mock_executor, paged, sample_tenant):
        """Test fetching a filtered page of tenants."""
        mock_executor.request.return_value = paged([sample_tenant])

        async with use_tenants(mock_executor) as tenants:
            result = await tenants.fetch_list({"filter": "pro"})

            assert result.success is True
            assert len(tenants.tenants) == 1
            assert tenants.total_count == 1
            assert tenants.is_loading is False
            assert tenants.error is None

    @pytest.mark.asyncio
    async def test_fetch_failure_fallback(self, mock_executor):
        """Test an error without message yields the tenant fallback string."""
        mock_executor.request.side_effect = TransportError("")

        async with use_tenants(mock_executor) as tenants:
            result = await tenants.fetch_list()

            assert result == Failure("Failed to fetch tenants")
            assert tenants.error == "Failed to fetch tenants"

    @pytest.mark.asyncio
    async def test_get_by_id_selects(self, mock_executor, sample_tenant):
        """Test get_by_id sets the selected tenant."""
        mock_executor.request.return_value = sample_tenant

        async with use_tenants(mock_executor) as tenants:
            await tenants.get_by_id("t1")

            assert tenants.selected_tenant.name == "Acme"

    @pytest.mark.asyncio
    async def test_default_connection_string_empty(self, mock_executor):
        """Test an empty connection string means the shared database."""
        mock_executor.request.return_value = ""

        async with use_tenants(mock_executor) as tenants:
            result = await tenants.get_default_connection_string("t1")

            assert result.success is True
            assert tenants.default_connection_string == ""
            assert tenants.use_shared_database is True

    @pytest.mark.asyncio
    async def test_default_connection_string_set(self, mock_executor):
        """Test a non-empty connection string means a dedicated database."""
        mock_executor.request.return_value = "Server=db;Database=acme"

        async with use_tenants(mock_executor) as tenants:
            await tenants.get_default_connection_string("t1")

            assert tenants.default_connection_string == "Server=db;Database=acme"
            assert tenants.use_shared_database is False

    @pytest.mark.asyncio
    async def test_update_and_delete_connection_string(self, mock_executor):
        """Test connection string mutations update the side data."""
        async with use_tenants(mock_executor) as tenants:
            await tenants.update_default_connection_string("t1", "Server=db")
            assert tenants.default_connection_string == "Server=db"
            assert tenants.use_shared_database is False

            await tenants.delete_default_connection_string("t1")
            assert tenants.default_connection_string == ""
            assert tenants.use_shared_database is True

    @pytest.mark.asyncio
    async def test_connection_string_failure(self, mock_executor):
        """Test a failed connection string fetch keeps the side data."""
        mock_executor.request.side_effect = Exception()

        async with use_tenants(mock_executor) as tenants:
            result = await tenants.get_default_connection_string("t1")

            assert result == Failure("Failed to fetch connection string")
            assert tenants.use_shared_database is True

    @pytest.mark.asyncio
    async def test_mutations_do_not_refresh(self, mock_executor, sample_tenant):
        """Test component-scoped mutations leave refreshing to the caller."""
        mock_executor.request.return_value = sample_tenant

        async with use_tenants(mock_executor) as tenants:
            await tenants.create({
                "name": "Acme",
                "adminEmailAddress": "admin@acme.test",
                "adminPassword": "1q2w3E*",
            })

            assert mock_executor.request.await_count == 1
            assert tenants.tenants == []

    def test_ui_state(self, mock_executor):
        """Test sort and features modal state."""
        tenants = TenantsFacade(TenantService(mock_executor))
        assert tenants.sort_key == "name"
        assert tenants.sort_order == SortOrder.NONE

        tenants.set_sort_key("editionName")
        tenants.set_sort_order("desc")
        tenants.open_features_modal("t1")

        assert tenants.sort_key == "editionName"
        assert tenants.sort_order == SortOrder.DESC
        assert tenants.visible_features is True
        assert tenants.features_provider_key == "t1"

        tenants.on_visible_features_change(False)
        assert tenants.visible_features is False
        assert tenants.features_provider_key == ""

    def test_reset_restores_ui_state(self, mock_executor):
        """Test reset restores sort and modal defaults."""
        tenants = TenantsFacade(TenantService(mock_executor))
        tenants.set_sort_key("editionName")
        tenants.open_features_modal("t1")

        tenants.reset()

        assert tenants.sort_key == "name"
        assert tenants.visible_features is False
        assert tenants.use_shared_database is True

    @pytest.mark.asyncio
    async def test_scopes_are_independent(self, mock_executor, paged, sample_tenant):
        """Test two scoped facades never share snapshots."""
        mock_executor.request.return_value = paged([sample_tenant])

        async with use_tenants(mock_executor) as first, use_tenants(mock_executor) as second:
            await first.fetch_list()

            assert len(first.tenants) == 1
            assert second.tenants == []

    def test_reset_after_editing_latest_tenants(self, mock_executor):
        """Test reset empties latest tenants after the list was edited in place."""
        tenants = TenantsFacade(TenantService(mock_executor))

        tenants.latest_tenants.append("stale")
        tenants.reset()

        assert tenants.latest_tenants == []

    @pytest.mark.asyncio
    async def test_fetch_page_uses_sort_state(self, mock_executor, paged, sample_tenant, monkeypatch):
        """Test a page fetch sends the view's sorting and the configured page size."""
        monkeypatch.setenv("SAAS_ADMIN_DEFAULT_PAGE_SIZE", "25")
        get_settings.cache_clear()
        mock_executor.request.return_value = paged([sample_tenant])

        try:
            async with use_tenants(mock_executor) as tenants:
                tenants.set_sort_key("editionName")
                tenants.set_sort_order("asc")
                result = await tenants.fetch_page(3, filter="acme", get_edition_names=True)

                assert result.success is True
                assert len(tenants.tenants) == 1
        finally:
            get_settings.cache_clear()

        assert mock_executor.request.await_args.args[0].params == {
            "filter": "acme",
            "getEditionNames": True,
            "skipCount": 50,
            "maxResultCount": 25,
            "sorting": "editionName asc",
        }


class TestEditionsFacade:
    """Test cases for the component-scoped edition facade."""

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_executor, sample_edition):
        """Test a missing edition leaves the selection unchanged."""
        async with use_editions(mock_executor) as editions:
            mock_executor.request.return_value = sample_edition
            await editions.get_by_id("e1")

            mock_executor.request.side_effect = NotFoundError("Edition not found", status_code=404)
            result = await editions.get_by_id("missing")

            assert result == Failure("Edition not found")
            assert editions.error == "Edition not found"
            assert editions.selected_edition.id == "e1"

    @pytest.mark.asyncio
    async def test_usage_statistics_toggles_loading(self, mock_executor):
        """Test usage statistics go through the loading flag."""
        mock_executor.request.return_value = {"data": {"Pro": 2}}
        editions = EditionsFacade(EditionService(mock_executor))
        loading = []
        editions.subscribe(lambda snapshot: loading.append(editions.is_loading))

        result = await editions.fetch_usage_statistics()

        assert result.success is True
        assert editions.usage_statistics == {"Pro": 2}
        assert True in loading
        assert editions.is_loading is False

    def test_default_sort(self, mock_executor):
        """Test editions sort by display name by default."""
        editions = EditionsFacade(EditionService(mock_executor))
        assert editions.sort_key == "displayName"

    @pytest.mark.asyncio
    async def test_fetch_page_defaults(self, mock_executor, paged, sample_edition):
        """Test the first page is sorted by display name with an explicit page size."""
        mock_executor.request.return_value = paged([sample_edition])

        async with use_editions(mock_executor) as editions:
            query = editions.page_query(per_page=5)
            await editions.fetch_page(per_page=5)

        assert query.to_wire() == {"skipCount": 0, "maxResultCount": 5, "sorting": "displayName"}
        assert mock_executor.request.await_args.args[0].params == query.to_wire()


class TestSaasStateService:
    """Test cases for the process-scoped SaaS state service."""

    @pytest.mark.asyncio
    async def test_dispatch_get_tenants(self, mock_executor, paged, sample_tenant):
        """Test tenants are stored and readable through getters."""
        mock_executor.request.return_value = paged([sample_tenant], total_count=12)
        state = SaasStateService(mock_executor)

        result = await state.dispatch_get_tenants({"maxResultCount": 10})

        assert result.success is True
        assert [tenant.id for tenant in state.get_tenants()] == ["t1"]
        assert state.get_tenants_total_count() == 12

    @pytest.mark.asyncio
    async def test_selected_getters(self, mock_executor, sample_tenant, sample_edition):
        """Test selected tenant and edition start empty and follow get-by-id."""
        mock_executor.request.side_effect = [sample_tenant, sample_edition]
        state = SaasStateService(mock_executor)
        assert state.get_selected_tenant() is None
        assert state.get_selected_edition() is None

        await state.dispatch_get_tenant_by_id("t1")
        await state.dispatch_get_edition_by_id("e1")

        assert isinstance(state.get_selected_tenant(), SaasTenantDto)
        assert state.get_selected_tenant().id == "t1"
        assert isinstance(state.get_selected_edition(), EditionDto)
        assert state.get_selected_edition().id == sample_edition["id"]

    @pytest.mark.asyncio
    async def test_create_tenant_refreshes_once(self, mock_executor, paged, sample_tenant):
        """Test a successful create re-fetches tenants with the default query."""
        mock_executor.request.side_effect = [sample_tenant, paged([sample_tenant])]
        state = SaasStateService(mock_executor)

        result = await state.dispatch_create_tenant({
            "name": "Acme",
            "adminEmailAddress": "admin@acme.test",
            "adminPassword": "1q2w3E*",
        })

        assert result.success is True
        assert request_urls(mock_executor) == ["/api/saas/tenants", "/api/saas/tenants"]
        refresh = mock_executor.request.await_args_list[1].args[0]
        assert refresh.params == {}
        assert len(state.get_tenants()) == 1

    @pytest.mark.asyncio
    async def test_update_tenant_refreshes_once(self, mock_executor, paged, sample_tenant):
        """Test a successful update re-fetches tenants once."""
        mock_executor.request.side_effect = [sample_tenant, paged([sample_tenant])]
        state = SaasStateService(mock_executor)

        await state.dispatch_update_tenant("t1", {"name": "Acme", "concurrencyStamp": "stamp-1"})

        assert request_urls(mock_executor) == ["/api/saas/tenants/t1", "/api/saas/tenants"]

    @pytest.mark.asyncio
    async def test_delete_edition_refreshes_once(self, mock_executor, paged):
        """Test a successful delete re-fetches editions once."""
        mock_executor.request.side_effect = [None, paged([])]
        state = SaasStateService(mock_executor)

        result = await state.dispatch_delete_edition("e1")

        assert result.success is True
        assert request_urls(mock_executor) == ["/api/saas/editions/e1", "/api/saas/editions"]
        assert state.get_editions() == []

    @pytest.mark.asyncio
    async def test_failed_mutation_no_refresh(self, mock_executor):
        """Test a failed mutation does not re-fetch."""
        mock_executor.request.side_effect = NotFoundError("Tenant not found", status_code=404)
        state = SaasStateService(mock_executor)

        result = await state.dispatch_delete_tenant("missing")

        assert result == Failure("Tenant not found")
        assert mock_executor.request.await_count == 1

    @pytest.mark.asyncio
    async def test_latest_tenants_and_usage_statistics(self, mock_executor, sample_tenant):
        """Test the dashboard side channels."""
        mock_executor.request.side_effect = [[sample_tenant], {"data": {"Pro": 4}}]
        state = SaasStateService(mock_executor)

        await state.dispatch_get_latest_tenants()
        await state.dispatch_get_usage_statistics()

        assert [tenant.id for tenant in state.get_latest_tenants()] == ["t1"]
        assert state.get_usage_statistics() == {"Pro": 4}

    @pytest.mark.asyncio
    async def test_subscribe_and_reset(self, mock_executor, paged, sample_edition):
        """Test listeners see edition changes and reset clears state."""
        mock_executor.request.return_value = paged([sample_edition])
        state = SaasStateService(mock_executor)
        snapshots = []
        unsubscribe = state.subscribe(snapshots.append)

        await state.dispatch_get_editions()
        assert snapshots[-1].total_count == 1

        unsubscribe()
        state.reset()

        assert state.get_editions() == []
        assert state.get_editions_total_count() == 0
        assert snapshots[-1].total_count == 1
