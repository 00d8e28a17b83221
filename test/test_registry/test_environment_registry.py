"""
Test suite for EnvironmentRegistry.
Tests the write-once selection, accessors and failure modes.
"""

import pytest

from appenv.config import ENVIRONMENT_PRESETS, EnvironmentRegistry, RuntimeConfigProvider, build_environment_table
from appenv.core.enums import ConfigurationErrorKind, Environment, RegistryState
from appenv.core.exceptions import (
    AlreadyInitializedError,
    ConfigurationError,
    InvalidEnvironmentConfigError,
    NotInitializedError,
    UnknownEnvironmentError
)

pytestmark = pytest.mark.unit

ACCESSORS = ["current_environment", "config", "display_name", "base_url", "setting"]


class TestRegistryBeforeSelection:

    def test_starts_uninitialized(self, registry):
        assert registry.state == RegistryState.UNINITIALIZED
        assert not registry.is_initialized()

    @pytest.mark.parametrize("accessor", ACCESSORS)
    def test_reads_fail_with_not_initialized(self, registry, accessor):
        args = ("log_level",) if accessor == "setting" else ()

        with pytest.raises(NotInitializedError) as exc_info:
            getattr(registry, accessor)(*args)

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.kind == ConfigurationErrorKind.NOT_INITIALIZED
        assert exc_info.value.operation == accessor

    def test_base_url_on_fresh_registry(self):
        with pytest.raises(NotInitializedError):
            EnvironmentRegistry().base_url()

    def test_environments(self, registry):
        assert registry.environments() == ['dev', 'uat', 'prod']

    def test_config_for_does_not_select(self, registry):
        assert registry.config_for(Environment.PROD).base_url == "https://prod.example.com"
        assert registry.state == RegistryState.UNINITIALIZED


class TestSetEnvironment:

    @pytest.mark.parametrize("environment", list(Environment))
    def test_resolves_every_environment(self, environment, expected_bundles):
        registry = EnvironmentRegistry()

        resolved = registry.set_environment(environment)

        display_name, base_url = expected_bundles[environment]
        assert registry.state == RegistryState.INITIALIZED
        assert registry.current_environment() is environment
        assert registry.display_name() == display_name
        assert registry.base_url() == base_url
        assert resolved is ENVIRONMENT_PRESETS[environment]
        assert registry.config() is resolved

    def test_dev_scenario(self, registry):
        registry.set_environment(Environment.DEV)

        assert registry.display_name() == "Development"
        assert registry.base_url() == "https://dev.example.com"

    def test_uat_scenario(self, registry):
        registry.set_environment(Environment.UAT)

        assert registry.display_name() == "Staging"
        assert registry.base_url() == "https://staging.example.com"

    def test_prod_scenario(self, registry):
        registry.set_environment(Environment.PROD)

        assert registry.display_name() == "Production"
        assert registry.base_url() == "https://prod.example.com"

    def test_accepts_value_strings(self, registry):
        registry.set_environment("UAT")

        assert registry.current_environment() is Environment.UAT

    def test_reads_are_stable(self, dev_registry):
        first = (dev_registry.display_name(), dev_registry.base_url(), dev_registry.setting('log_level'))

        for _ in range(5):
            assert (dev_registry.display_name(), dev_registry.base_url(),
                    dev_registry.setting('log_level')) == first

    def test_additional_settings(self, dev_registry):
        assert dev_registry.setting('log_level') == 'DEBUG'
        assert dev_registry.setting('application_id_suffix') == '.dev'
        assert dev_registry.setting('missing') is None
        assert dev_registry.setting('missing', 'fallback') == 'fallback'

    def test_nested_setting_cannot_be_mutated_by_readers(self):
        provider = RuntimeConfigProvider("environments", {'dev': {'settings': {'feature_flags': ['beta']}}})
        registry = EnvironmentRegistry(build_environment_table(provider))
        registry.set_environment(Environment.DEV)

        flags = registry.setting('feature_flags')
        with pytest.raises(AttributeError):
            flags.append('leaked')

        assert registry.setting('feature_flags') == ('beta',)


class TestWriteOnce:

    def test_second_call_fails_and_keeps_first_selection(self, dev_registry):
        with pytest.raises(AlreadyInitializedError) as exc_info:
            dev_registry.set_environment(Environment.PROD)

        assert exc_info.value.kind == ConfigurationErrorKind.ALREADY_INITIALIZED
        assert exc_info.value.current is Environment.DEV
        assert dev_registry.current_environment() is Environment.DEV
        assert dev_registry.display_name() == "Development"
        assert dev_registry.base_url() == "https://dev.example.com"

    def test_second_call_with_same_environment_fails(self, dev_registry):
        with pytest.raises(AlreadyInitializedError):
            dev_registry.set_environment(Environment.DEV)

    def test_second_call_with_unknown_environment_reports_already_initialized(self, dev_registry):
        with pytest.raises(AlreadyInitializedError):
            dev_registry.set_environment("qa")


class TestUnknownEnvironment:

    @pytest.mark.parametrize("value", ["qa", "", "development", 3, None])
    def test_unknown_leaves_registry_uninitialized(self, registry, value):
        with pytest.raises(UnknownEnvironmentError) as exc_info:
            registry.set_environment(value)

        assert exc_info.value.kind == ConfigurationErrorKind.UNKNOWN_ENVIRONMENT
        assert registry.state == RegistryState.UNINITIALIZED
        with pytest.raises(NotInitializedError):
            registry.display_name()

    def test_can_select_after_unknown(self, registry):
        with pytest.raises(UnknownEnvironmentError):
            registry.set_environment("qa")

        registry.set_environment(Environment.PROD)

        assert registry.current_environment() is Environment.PROD

    def test_config_for_unknown(self, registry):
        with pytest.raises(UnknownEnvironmentError):
            registry.config_for("staging")


class TestRegistryTable:

    def test_custom_table(self):
        provider = RuntimeConfigProvider("environments", {'dev': {'base_url': "https://localhost:8443"}})
        registry = EnvironmentRegistry(build_environment_table(provider))

        registry.set_environment(Environment.DEV)

        assert registry.base_url() == "https://localhost:8443"

    def test_incomplete_table_is_rejected(self):
        with pytest.raises(InvalidEnvironmentConfigError) as exc_info:
            EnvironmentRegistry({Environment.DEV: ENVIRONMENT_PRESETS[Environment.DEV]})

        assert exc_info.value.kind == ConfigurationErrorKind.INVALID_CONFIGURATION

    def test_table_is_copied(self):
        table = dict(ENVIRONMENT_PRESETS)
        registry = EnvironmentRegistry(table)

        table[Environment.DEV] = ENVIRONMENT_PRESETS[Environment.PROD]
        registry.set_environment(Environment.DEV)

        assert registry.display_name() == "Development"

    def test_raw_dict_bundles_are_rejected(self):
        table = {e: ENVIRONMENT_PRESETS[e].to_dict() for e in Environment}

        with pytest.raises(InvalidEnvironmentConfigError) as exc_info:
            EnvironmentRegistry(table)

        assert len(exc_info.value.errors) == 3
