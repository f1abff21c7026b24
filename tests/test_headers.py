"""Tests for request header construction."""

import pytest

from api_server_harness import HarnessConfig, get_base_url, get_headers, merge_headers
from api_server_harness.core.errors import MissingEnvironmentVariableError
from api_server_harness.core.headers import CACHE_BYPASS_HEADER


def test_headers_include_version_and_credentials(harness_config):
    headers = get_headers("3.0.0", harness_config)

    assert headers["x-sdk-version"] == "3.0.0"
    assert headers["Content-Type"] == "application/json"
    assert headers["x-bb-api-key"] == "bb-test-key"
    assert headers["x-bb-project-id"] == "proj-123"
    assert headers["x-model-api-key"] == "sk-test"


def test_headers_omit_unset_credentials():
    headers = get_headers("3.0.0", HarnessConfig(base_url="http://api.test"))

    assert "x-bb-api-key" not in headers
    assert "x-bb-project-id" not in headers
    assert "x-model-api-key" not in headers
    assert headers["x-sdk-version"] == "3.0.0"


def test_headers_are_deterministic(harness_config):
    assert dict(get_headers("3.0.0", harness_config)) == dict(get_headers("3.0.0", harness_config))


def test_version_is_passed_through_unchanged(harness_config):
    assert get_headers("", harness_config)["x-sdk-version"] == ""
    assert get_headers("not-a-version", harness_config)["x-sdk-version"] == "not-a-version"


def test_headers_are_read_only(harness_config):
    headers = get_headers("3.0.0", harness_config)

    with pytest.raises(TypeError):
        headers["x-sdk-version"] = "2.0.0"


def test_merge_headers_returns_new_mapping(harness_config):
    base = get_headers("3.0.0", harness_config)
    merged = merge_headers(base, {CACHE_BYPASS_HEADER: "true", "x-sdk-version": "3.1.0"})

    assert merged[CACHE_BYPASS_HEADER] == "true"
    assert merged["x-sdk-version"] == "3.1.0"
    assert CACHE_BYPASS_HEADER not in base
    assert base["x-sdk-version"] == "3.0.0"


def test_merge_headers_without_extra(harness_config):
    base = get_headers("3.0.0", harness_config)
    assert dict(merge_headers(base)) == dict(base)


def test_get_base_url(harness_config):
    assert get_base_url(harness_config) == "http://api.test"


def test_get_base_url_requires_configuration():
    with pytest.raises(MissingEnvironmentVariableError) as exc_info:
        get_base_url(HarnessConfig())

    assert exc_info.value.details["variable"] == "API_SERVER_BASE_URL"
