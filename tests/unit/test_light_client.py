"""
Light Client Unit Tests
Tests for core/light_client/client.py
"""
from unittest.mock import MagicMock

import pytest

from core.config.runtime import RuntimeConfig
from core.crypto.transactions import hash_transaction
from core.ledger.proof_source import InMemoryProofSource, ProofSource
from core.light_client.client import (
    MSG_FAILED,
    MSG_NOT_FOUND,
    MSG_VERIFIED,
    LightClient,
)
from core.schemas.errors import ProofSourceException
from core.schemas.ledger import Canonicalization

from fixtures import build_sorted_tree, flip_char, make_proof_result, make_transaction


@pytest.fixture
def source(proof_result):
    return InMemoryProofSource([proof_result])


class TestCheckInclusion:
    """Tests for LightClient.check_inclusion."""

    def test_verified_by_transaction(self, source, transactions, proof_result, assert_check_passed):
        report = LightClient(source).check_inclusion(transactions[2])

        assert report.status == "verified"
        assert report.ok
        assert report.message == MSG_VERIFIED
        assert report.tx_hash == proof_result.tx_hash
        assert report.result == proof_result
        assert_check_passed(report, "leaf_hash")
        assert_check_passed(report, "merkle_root")

    def test_verified_by_digest(self, source, proof_result, assert_check_passed):
        report = LightClient(source).check_inclusion(proof_result.tx_hash)

        assert report.ok
        assert_check_passed(report, "requested_leaf")

    def test_not_found(self, source):
        report = LightClient(source).check_inclusion(make_transaction(amount=11))

        assert report.status == "not_found"
        assert report.message == MSG_NOT_FOUND
        assert report.result is None
        assert report.tx_hash == hash_transaction(make_transaction(amount=11))

    def test_failed_on_tampered_root(self, proof_result, transactions, assert_check_failed):
        tampered = proof_result.model_copy(update={"merkle_root": flip_char(proof_result.merkle_root)})
        report = LightClient(InMemoryProofSource([tampered])).check_inclusion(transactions[2])

        assert report.status == "failed"
        assert report.message == MSG_FAILED
        assert_check_failed(report, "merkle_root")

    def test_replays_from_local_leaf(self, proof_result, assert_check_failed):
        """A proof issued for another leaf never verifies the requested one."""
        requested = "0" * 64
        source = MagicMock(spec=ProofSource)
        source.fetch_proof.return_value = proof_result

        report = LightClient(source).check_inclusion(requested)

        assert report.status == "failed"
        assert report.tx_hash == requested
        assert_check_failed(report, "requested_leaf")
        source.fetch_proof.assert_called_once_with(requested)

    def test_source_errors_propagate(self, transaction):
        source = MagicMock(spec=ProofSource)
        source.fetch_proof.side_effect = ProofSourceException("down")

        with pytest.raises(ProofSourceException):
            LightClient(source).check_inclusion(transaction)


class TestEvents:
    """Tests for the on_event callback boundary."""

    def test_callback_receives_every_report(self, source, transactions):
        events = []
        client = LightClient(source, on_event=events.append)

        verified = client.check_inclusion(transactions[2])
        missing = client.check_inclusion(transactions[0].model_copy(update={"amount": 999}))

        assert events == [verified, missing]
        assert [e.status for e in events] == ["verified", "not_found"]

    def test_no_callback_on_error(self, transaction):
        events = []
        source = MagicMock(spec=ProofSource)
        source.fetch_proof.side_effect = ProofSourceException("down")
        client = LightClient(source, on_event=events.append)

        with pytest.raises(ProofSourceException):
            client.check_inclusion(transaction)
        assert events == []


class TestFromConfig:
    def test_scheme_from_config(self, transaction):
        config = RuntimeConfig.from_dict({"verifier": {"canonicalization": "length_prefixed"}})
        client = LightClient.from_config(InMemoryProofSource(), config)

        assert client.hasher.scheme == Canonicalization.LENGTH_PREFIXED
        assert client.leaf_for(transaction) == hash_transaction(transaction, Canonicalization.LENGTH_PREFIXED)

    def test_length_prefixed_tree(self, transactions):
        scheme = Canonicalization.LENGTH_PREFIXED
        config = RuntimeConfig.from_dict({"verifier": {"canonicalization": scheme.value}})
        leaves = [hash_transaction(tx, scheme) for tx in transactions]
        base = make_proof_result(transactions, index=1)
        root, proofs = build_sorted_tree(leaves)
        result = base.model_copy(update={
            "tx_hash": leaves[1],
            "merkle_root": root,
            "proof_path": tuple(proofs[1]),
        })
        client = LightClient.from_config(InMemoryProofSource([result]), config)

        assert client.check_inclusion(transactions[1]).ok

    def test_leaf_for_digest_passthrough(self):
        client = LightClient(InMemoryProofSource())

        assert client.leaf_for("abc") == "abc"
