"""
Ledger Service Client Unit Tests
Tests for core/ledger/service.py
"""
from unittest.mock import MagicMock

import pytest

from core.config.runtime import RuntimeConfig
from core.http.client import HttpClient, HttpError, HttpResponse
from core.ledger.service import LedgerServiceClient
from core.schemas.errors import LedgerServiceException, SchemaValidationException

from fixtures import make_block, make_http_response, make_transaction


@pytest.fixture
def http():
    return MagicMock(spec=HttpClient)


@pytest.fixture
def service(http):
    return LedgerServiceClient("http://ledger.test", http=http)


class TestFromConfig:
    """Tests for building a client from configuration."""

    def test_uses_config(self):
        config = RuntimeConfig.from_dict({
            "ledger": {"base_url": "http://node.test:9000/"},
            "http": {"timeout": 3.0, "max_retries": 1, "user_agent": "ua/1"},
            "proxy": "http://proxy.test:3128",
        })
        client = LedgerServiceClient.from_config(config)

        assert client.base_url == "http://node.test:9000"
        assert client.http.timeout == 3.0
        assert client.http.max_retries == 1
        assert client.http.default_headers["User-Agent"] == "ua/1"
        assert client.http.proxy == "http://proxy.test:3128"


class TestNodeId:
    def test_node_id(self, service, http):
        http.request.return_value = make_http_response(200, "3f2a9c")

        assert service.get_node_id() == "3f2a9c"
        http.request.assert_called_once_with("GET", "http://ledger.test/node_id", json=None)


class TestChain:
    """Tests for GET /chain."""

    def test_parses_blocks(self, service, http):
        blocks = [make_block(index=0, transactions=[]), make_block(index=1)]
        http.request.return_value = make_http_response(
            200, [block.model_dump(mode="json") for block in blocks]
        )

        result = service.get_chain()

        assert [b.index for b in result] == [0, 1]
        assert result[1].merkle_root == blocks[1].merkle_root
        assert result[1].transactions == blocks[1].transactions

    def test_non_list_payload(self, service, http):
        http.request.return_value = make_http_response(200, {"chain": []})

        with pytest.raises(SchemaValidationException):
            service.get_chain()

    def test_malformed_block(self, service, http):
        http.request.return_value = make_http_response(200, [{"index": "zero"}])

        with pytest.raises(SchemaValidationException):
            service.get_chain()

    def test_http_error_status(self, service, http):
        http.request.return_value = make_http_response(500, "boom")

        with pytest.raises(LedgerServiceException) as exc_info:
            service.get_chain()
        assert exc_info.value.details == {"endpoint": "/chain", "status_code": 500}
        assert exc_info.value.retryable

    def test_unreachable(self, service, http):
        http.request.side_effect = HttpError("connection refused")

        with pytest.raises(LedgerServiceException, match="unreachable"):
            service.get_chain()


class TestSubmit:
    """Tests for POST /transactions/new."""

    def test_submit(self, service, http):
        http.request.return_value = make_http_response(201, "Transaction will be added to Block 2")

        message = service.submit_transaction(make_transaction())

        assert message == "Transaction will be added to Block 2"
        http.request.assert_called_once_with(
            "POST",
            "http://ledger.test/transactions/new",
            json={"sender": "Alice", "recipient": "Bob", "amount": 10},
        )

    def test_rejected(self, service, http):
        http.request.return_value = make_http_response(400, "bad")

        with pytest.raises(LedgerServiceException) as exc_info:
            service.submit_transaction(make_transaction())
        assert not exc_info.value.retryable


class TestNonJsonBodies:
    """A 2xx body that is not JSON is a schema error, not a decode crash."""

    @pytest.fixture
    def html(self):
        return HttpResponse(status_code=200, content=b"<html>proxy error</html>")

    def test_chain(self, service, http, html):
        http.request.return_value = html

        with pytest.raises(SchemaValidationException) as exc_info:
            service.get_chain()
        assert exc_info.value.details["endpoint"] == "/chain"

    def test_node_id(self, service, http, html):
        http.request.return_value = html

        with pytest.raises(SchemaValidationException) as exc_info:
            service.get_node_id()
        assert exc_info.value.details["endpoint"] == "/node_id"

    def test_submit(self, service, http):
        http.request.return_value = HttpResponse(status_code=201, content=b"queued")

        with pytest.raises(SchemaValidationException):
            service.submit_transaction(make_transaction())


class TestLifecycle:
    def test_context_manager_closes_http(self, http):
        with LedgerServiceClient("http://ledger.test", http=http):
            pass

        http.close.assert_called_once()
