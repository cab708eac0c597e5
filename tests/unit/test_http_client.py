"""
HTTP Client Unit Tests
Tests for core/http/client.py

requests.Session.request is patched; no network access.
"""
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest
import requests

from core.http.client import HttpClient, HttpError, HttpResponse


def _raw_response(status_code=200, content=b'"ok"', url="http://ledger.test/node_id"):
    raw = MagicMock()
    raw.status_code = status_code
    raw.content = content
    raw.headers = {"content-type": "application/json"}
    raw.url = url
    raw.elapsed = timedelta(milliseconds=5)
    return raw


class TestHttpResponse:
    """Tests for HttpResponse helpers."""

    def test_ok_range(self):
        assert HttpResponse(status_code=201, content=b"").ok
        assert not HttpResponse(status_code=404, content=b"").ok

    def test_json_and_text(self):
        response = HttpResponse(status_code=200, content=b'{"a": 1}')

        assert response.json() == {"a": 1}
        assert response.text == '{"a": 1}'

    def test_raise_for_status(self):
        response = HttpResponse(status_code=500, content=b"")

        with pytest.raises(HttpError) as exc_info:
            response.raise_for_status()
        assert exc_info.value.status_code == 500
        assert exc_info.value.response is response


class TestHttpClientRequest:
    """Tests for HttpClient.request and retries."""

    def test_get_returns_response(self):
        client = HttpClient(timeout=5.0)
        with patch.object(requests.Session, "request", return_value=_raw_response()) as mock_request:
            response = client.get("http://ledger.test/node_id")

        assert response.status_code == 200
        assert response.json() == "ok"
        assert response.elapsed_ms == pytest.approx(5.0)
        assert mock_request.call_args.kwargs["method"] == "GET"
        assert mock_request.call_args.kwargs["timeout"] == 5.0

    def test_post_sends_json(self):
        client = HttpClient()
        body = {"sender": "Alice", "recipient": "Bob", "amount": 10}
        with patch.object(requests.Session, "request", return_value=_raw_response(201)) as mock_request:
            response = client.post("http://ledger.test/transactions/new", json=body)

        assert response.status_code == 201
        assert mock_request.call_args.kwargs["json"] == body

    def test_default_headers_sent(self):
        client = HttpClient(default_headers={"User-Agent": "ledgerproof-test"})
        with patch.object(requests.Session, "request", return_value=_raw_response()) as mock_request:
            client.get("http://ledger.test/")

        assert mock_request.call_args.kwargs["headers"]["User-Agent"] == "ledgerproof-test"

    def test_non_retryable_status_returned(self):
        client = HttpClient(max_retries=3, retry_delay=0)
        with patch.object(requests.Session, "request", return_value=_raw_response(404)) as mock_request:
            response = client.get("http://ledger.test/missing")

        assert response.status_code == 404
        assert mock_request.call_count == 1

    def test_retries_transport_error(self):
        client = HttpClient(max_retries=2, retry_delay=0)
        side_effect = [requests.ConnectionError("refused"), _raw_response()]
        with patch.object(requests.Session, "request", side_effect=side_effect) as mock_request:
            response = client.get("http://ledger.test/")

        assert response.ok
        assert mock_request.call_count == 2

    def test_retries_exhausted_raise(self):
        client = HttpClient(max_retries=1, retry_delay=0)
        with patch.object(requests.Session, "request", side_effect=requests.ConnectionError("refused")) as mock_request:
            with pytest.raises(HttpError):
                client.get("http://ledger.test/")

        assert mock_request.call_count == 2

    def test_retries_gateway_status(self):
        client = HttpClient(max_retries=2, retry_delay=0)
        side_effect = [_raw_response(503), _raw_response(502), _raw_response(200)]
        with patch.object(requests.Session, "request", side_effect=side_effect) as mock_request:
            response = client.get("http://ledger.test/")

        assert response.status_code == 200
        assert mock_request.call_count == 3

    def test_last_gateway_status_returned(self):
        client = HttpClient(max_retries=1, retry_delay=0)
        side_effect = [_raw_response(503), _raw_response(503)]
        with patch.object(requests.Session, "request", side_effect=side_effect):
            response = client.get("http://ledger.test/")

        assert response.status_code == 503

    def test_no_retries_by_default(self):
        client = HttpClient()
        with patch.object(requests.Session, "request", side_effect=requests.Timeout("slow")) as mock_request:
            with pytest.raises(HttpError):
                client.get("http://ledger.test/")

        assert mock_request.call_count == 1


class TestHttpClientSession:
    """Tests for session lifecycle."""

    def test_proxy_configured(self):
        client = HttpClient(proxy="http://proxy.test:3128")
        session = client._get_session()

        assert session.proxies["https"] == "http://proxy.test:3128"
        client.close()

    def test_context_manager_closes(self):
        with HttpClient() as client:
            client._get_session()
            assert client._session is not None

        assert client._session is None
