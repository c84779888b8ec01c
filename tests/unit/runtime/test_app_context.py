"""Unit tests for the application context."""

import pytest

from src.app.runtime.config.config_data import (
    ApiConfig,
    AppConfig,
    ConfigData,
    DatabaseConfig,
    PaginationConfig,
)
from src.app.runtime.context import (
    AppContext,
    get_config,
    get_context,
    merge_configs,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_override_is_scoped(self):
        original = get_config()

        with with_context(ConfigData(app=AppConfig(environment="test", port=9999))):
            assert get_config().app.environment == "test"
            assert get_config().app.port == 9999

        assert get_config() is original

    def test_override_keeps_unset_fields(self):
        original = get_config()
        override = ConfigData(database=DatabaseConfig(url="sqlite:///./scoped.db"))

        with with_context(override):
            assert get_config().database.url == "sqlite:///./scoped.db"
            assert get_config().api == original.api
            assert get_config().app.cors == original.app.cors

    def test_nested_overrides(self):
        outer = ConfigData(app=AppConfig(environment="production"))
        inner = ConfigData(
            api=ApiConfig(pagination=PaginationConfig(default_page_size=50))
        )

        with with_context(outer):
            with with_context(inner):
                assert get_config().app.environment == "production"
                assert get_config().api.pagination.default_page_size == 50
            assert get_config().api.pagination.default_page_size == 5
            assert get_config().app.environment == "production"

    def test_none_is_a_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="ConfigData"):
            with with_context({"app": {"port": 1}}):
                pass

    def test_restored_after_error(self):
        original = get_config()

        with pytest.raises(RuntimeError):
            with with_context(ConfigData(app=AppConfig(port=1234))):
                raise RuntimeError("boom")

        assert get_config() is original


class TestMergeConfigs:
    def test_only_explicit_values_overlay(self):
        base = ConfigData(
            app=AppConfig(host="example.org", port=9000),
            api=ApiConfig(prefix="/v2/products"),
        )
        override = ConfigData(app=AppConfig(port=7000))

        merged = merge_configs(base, override)

        assert merged.app.port == 7000
        assert merged.app.host == "example.org"
        assert merged.api.prefix == "/v2/products"

    def test_empty_override_returns_equal_config(self):
        base = ConfigData(app=AppConfig(port=9000))

        assert merge_configs(base, ConfigData()) == base

    def test_deeply_nested_override_keeps_siblings(self):
        base = ConfigData(api=ApiConfig(prefix="/v2/products"))
        override = ConfigData(
            api=ApiConfig(pagination=PaginationConfig(max_page_size=10))
        )

        merged = merge_configs(base, override)

        assert merged.api.prefix == "/v2/products"
        assert merged.api.pagination.max_page_size == 10
        assert merged.api.pagination.default_page_size == 5
