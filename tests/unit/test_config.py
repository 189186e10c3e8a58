"""Tests for settings, logging configuration and shared core types."""

import logging

import pytest

from neo_saas_admin.config.logging_config import (
    LoggingConfig,
    get_log_level_from_verbosity,
    setup_logging,
)
from neo_saas_admin.config.settings import SaasAdminSettings, get_settings
from neo_saas_admin.core.entities import resource_path
from neo_saas_admin.core.exceptions import (
    PreconditionError,
    SaasAdminError,
)
from neo_saas_admin.features.pagination import (
    PagedAndSortedRequest,
    PagedResult,
    build_sorting,
    to_query_params,
)
from neo_saas_admin.config.constants import SortOrder


class TestSettings:
    """Test cases for SaasAdminSettings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when no environment is set."""
        monkeypatch.delenv("SAAS_ADMIN_API_BASE_URL", raising=False)
        settings = SaasAdminSettings(_env_file=None)

        assert settings.api_base_url == "http://localhost:44300"
        assert settings.http_timeout_seconds == 30.0
        assert settings.tenant_header_name == "__tenant"
        assert settings.default_headers == {"Accept": "application/json"}
        assert settings.default_page_size == 10

    def test_environment_override(self, monkeypatch):
        """Test SAAS_ADMIN_ variables override defaults."""
        monkeypatch.setenv("SAAS_ADMIN_API_BASE_URL", "https://admin.example.com")
        monkeypatch.setenv("SAAS_ADMIN_HTTP_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("SAAS_ADMIN_TENANT_ID", "t1")

        settings = SaasAdminSettings(_env_file=None)

        assert settings.api_base_url == "https://admin.example.com"
        assert settings.http_timeout_seconds == 12.5
        assert settings.tenant_id == "t1"

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    @pytest.mark.parametrize("verbosity, level", [
        ("QUIET", "ERROR"),
        ("normal", "WARNING"),
        ("VERBOSE", "INFO"),
        ("DEBUG", "DEBUG"),
        ("unknown", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        """Test verbosity modes map to log levels."""
        assert get_log_level_from_verbosity(verbosity) == level

    def test_build_config(self):
        """Test the dictConfig mapping for verbose mode."""
        config = LoggingConfig.build_config("VERBOSE", "detailed")

        assert config["loggers"]["neo_saas_admin"]["level"] == "INFO"
        assert config["loggers"]["neo_saas_admin.infrastructure.rest"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"
        assert "%(filename)s" in config["formatters"]["default"]["format"]

    def test_debug_unquiets_modules(self):
        """Test debug mode lets quiet modules log at debug."""
        config = LoggingConfig.build_config("DEBUG", "bogus")

        assert config["loggers"]["neo_saas_admin.infrastructure.rest"]["level"] == "DEBUG"
        assert config["formatters"]["default"]["format"].startswith("%(asctime)s - %(levelname)s")

    def test_setup_logging_from_environment(self, monkeypatch):
        """Test setup_logging applies LOG_VERBOSITY."""
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        setup_logging()
        assert logging.getLogger("neo_saas_admin").level == logging.ERROR

        monkeypatch.setenv("LOG_VERBOSITY", "NORMAL")
        setup_logging()
        assert logging.getLogger("neo_saas_admin").level == logging.WARNING


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_precondition_error(self):
        """Test PreconditionError carries code and details."""
        error = PreconditionError("cultureName is required", error_code="CULTURE_NAME_REQUIRED")

        assert isinstance(error, SaasAdminError)
        assert error.message == "cultureName is required"
        assert error.error_code == "CULTURE_NAME_REQUIRED"
        assert error.details == {}


class TestPagination:
    """Test cases for paged queries and results."""

    def test_for_page(self):
        """Test page numbers become skip/max counts and sorting."""
        query = PagedAndSortedRequest.for_page(3, 20, sort_key="name", sort_order=SortOrder.DESC)

        assert query.to_wire() == {"skipCount": 40, "maxResultCount": 20, "sorting": "name desc"}

    def test_for_page_rejects_zero(self):
        """Test pages are 1-based."""
        with pytest.raises(ValueError):
            PagedAndSortedRequest.for_page(0, 10)

    @pytest.mark.parametrize("key, order, expected", [
        ("", SortOrder.ASC, None),
        ("name", SortOrder.NONE, "name"),
        ("name", SortOrder.ASC, "name asc"),
        ("executionTime", "desc", "executionTime desc"),
    ])
    def test_build_sorting(self, key, order, expected):
        """Test sorting expressions."""
        assert build_sorting(key, order) == expected

    def test_to_query_params(self):
        """Test mappings drop None values and None becomes empty params."""
        assert to_query_params(None) == {}
        assert to_query_params({"filter": "pro", "sorting": None}) == {"filter": "pro"}
        assert to_query_params(PagedAndSortedRequest(filter="pro")) == {"filter": "pro"}

    def test_parse_missing_fields(self):
        """Test missing or null fields parse as empty."""
        assert PagedResult.parse(None).items == []
        result = PagedResult.parse({"items": None, "totalCount": None})
        assert result.items == []
        assert result.total_count == 0
        assert result.has_items is False

    def test_resource_path_quotes_segments(self):
        """Test path segments are URL-encoded."""
        assert resource_path("/api/things/{id}", id="a b/c") == "/api/things/a%20b%2Fc"
