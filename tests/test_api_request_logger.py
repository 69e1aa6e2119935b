"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from opendata_transport.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TRANSPORT_API_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("TRANSPORT_API_LOG_REQUESTS", raising=False)

        result = should_log_requests()

        assert result is False

    def test_when_env_set_to_true_then_returns_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TRANSPORT_API_LOG_REQUESTS=true, when checking, then returns True."""
        monkeypatch.setenv("TRANSPORT_API_LOG_REQUESTS", "true")

        result = should_log_requests()

        assert result is True

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TRANSPORT_API_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("TRANSPORT_API_LOG_REQUESTS", "True")

        result = should_log_requests()

        assert result is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TRANSPORT_API_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("TRANSPORT_API_LOG_REQUESTS", "false")

        result = should_log_requests()

        assert result is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("opendata_transport.adapters.api_request_logger.should_log_requests")
    @patch("opendata_transport.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://transport.opendata.ch/v1/locations?query=Bern")

        mock_logger.info.assert_not_called()

    @patch("opendata_transport.adapters.api_request_logger.should_log_requests")
    @patch("opendata_transport.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_method_and_full_url(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled, when calling with method and URL, then logs them unchanged."""
        mock_should_log.return_value = True
        url = "https://transport.opendata.ch/v1/locations?query=Z%C3%BCrich&type=all"

        log_api_request("GET", url)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert f"GET {url}" in call_args

    @patch("opendata_transport.adapters.api_request_logger.should_log_requests")
    @patch("opendata_transport.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_headers_then_logs_headers(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with headers, when calling, then logs headers."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api", headers={"Accept": "application/json"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "Accept" in call_args
        assert "application/json" in call_args

    @patch("opendata_transport.adapters.api_request_logger.should_log_requests")
    @patch("opendata_transport.adapters.api_request_logger.logger")
    def test_when_logging_with_authorization_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given Authorization header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request(
            "GET", "https://example.com/api", headers={"Authorization": "Bearer secret-token"}
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "Authorization" in call_args
        assert "***REDACTED***" in call_args
        assert "secret-token" not in call_args
