"""Tests for logmeta.identity.google_auth -- ADC project lookup and environment probe."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from logmeta.core.env import EnvironmentReader
from logmeta.core.exceptions import EnvironmentDetectionError, ProjectIdNotFoundError
from logmeta.identity.google_auth import DEFAULT_METADATA_RETRIES, DEFAULT_SCOPES, GoogleAuthIdentityProvider
from logmeta.resource.environment import EnvironmentClassification, Platform


class TestProjectId:
    @patch("google.auth.default")
    def test_project_from_adc(self, mock_default):
        mock_default.return_value = (MagicMock(), "adc-project")
        provider = GoogleAuthIdentityProvider()
        assert asyncio.run(provider.get_project_id()) == "adc-project"
        mock_default.assert_called_once_with(scopes=DEFAULT_SCOPES)

    @patch("google.auth.default")
    def test_custom_scopes(self, mock_default):
        mock_default.return_value = (MagicMock(), "p")
        scopes = ["https://www.googleapis.com/auth/cloud-platform"]
        provider = GoogleAuthIdentityProvider(scopes=scopes)
        asyncio.run(provider.get_project_id())
        mock_default.assert_called_once_with(scopes=scopes)

    @patch("google.auth.default")
    def test_missing_credentials(self, mock_default):
        from google.auth.exceptions import DefaultCredentialsError

        mock_default.side_effect = DefaultCredentialsError("no ADC")
        provider = GoogleAuthIdentityProvider()
        with pytest.raises(ProjectIdNotFoundError, match="no ADC"):
            asyncio.run(provider.get_project_id())

    @patch("google.auth.default")
    def test_credentials_without_project(self, mock_default):
        mock_default.return_value = (MagicMock(), None)
        provider = GoogleAuthIdentityProvider()
        with pytest.raises(ProjectIdNotFoundError, match="GOOGLE_CLOUD_PROJECT"):
            asyncio.run(provider.get_project_id())


class TestEnvironment:
    @patch("google.auth.compute_engine._metadata.ping")
    def test_app_engine_service(self, mock_ping):
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({"GAE_SERVICE": "default"}))
        assert asyncio.run(provider.get_environment()) == EnvironmentClassification(is_app_engine=True)
        mock_ping.assert_not_called()

    def test_app_engine_legacy_module(self):
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({"GAE_MODULE_NAME": "default"}))
        assert asyncio.run(provider.get_environment()).platform is Platform.APP_ENGINE

    @patch("google.auth.compute_engine._metadata.ping")
    def test_cloud_function(self, mock_ping):
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({"FUNCTION_NAME": "myFn"}))
        assert asyncio.run(provider.get_environment()).platform is Platform.CLOUD_FUNCTION
        mock_ping.assert_not_called()

    @patch("google.auth.compute_engine._metadata.ping")
    def test_compute_engine(self, mock_ping):
        mock_ping.return_value = True
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}), metadata_timeout=0.5)
        assert asyncio.run(provider.get_environment()).platform is Platform.COMPUTE_ENGINE
        assert mock_ping.call_args.kwargs["timeout"] == 0.5

    @patch("google.auth.compute_engine._metadata.ping")
    def test_nowhere(self, mock_ping):
        mock_ping.return_value = False
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}))
        assert asyncio.run(provider.get_environment()).platform is Platform.NONE

    @patch("google.auth.compute_engine._metadata.ping")
    def test_environment_cached(self, mock_ping):
        mock_ping.return_value = True
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}))
        first = asyncio.run(provider.get_environment())
        second = asyncio.run(provider.get_environment())
        assert first is second
        assert mock_ping.call_count == 1

    @patch("google.auth.compute_engine._metadata.ping")
    def test_request_setup_error_wrapped(self, mock_ping):
        from google.auth.exceptions import MutualTLSChannelError

        mock_ping.side_effect = MutualTLSChannelError("client certificate unreadable")
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}))
        with pytest.raises(EnvironmentDetectionError, match="client certificate unreadable"):
            asyncio.run(provider.get_environment())

    @patch("google.auth.compute_engine._metadata.ping")
    def test_single_ping_attempt_by_default(self, mock_ping):
        mock_ping.return_value = False
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}))
        asyncio.run(provider.get_environment())
        assert mock_ping.call_args.kwargs["retry_count"] == DEFAULT_METADATA_RETRIES == 1

    @patch("google.auth.compute_engine._metadata.ping")
    def test_custom_ping_attempts(self, mock_ping):
        mock_ping.return_value = True
        provider = GoogleAuthIdentityProvider(env=EnvironmentReader.from_dict({}), metadata_retries=3)
        asyncio.run(provider.get_environment())
        assert mock_ping.call_args.kwargs["retry_count"] == 3
