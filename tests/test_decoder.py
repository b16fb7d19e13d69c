import pytest
from eth_abi import encode
from pydantic import ValidationError

from conftest import commit_batch_log, finalize_batch_log, make_raw_log
from batch_scanner.events import CommitBatchEvent, FinalizeBatchEvent, decode_log
from batch_scanner.exceptions import DecodeError, SignatureMismatchError
from batch_scanner.parsers import LogParser
from batch_scanner.rpc_types import LogEntry

BATCH_HASH = bytes.fromhex("aa" * 32)
STATE_ROOT = bytes.fromhex("bb" * 32)
WITHDRAW_ROOT = bytes.fromhex("cc" * 32)


def to_entry(raw_log: dict) -> LogEntry:
    return LogEntry(**LogParser.parse_raw(raw_log))


@pytest.mark.parametrize("batch_index", [0, 1, 2**255])
def test_decode_commit_batch(registry, batch_index):
    log = to_entry(commit_batch_log(batch_index, BATCH_HASH))

    event = decode_log(log, registry.get("CommitBatch"))

    assert isinstance(event, CommitBatchEvent)
    assert event.batch_index == batch_index
    assert event.batch_hash == "0x" + "aa" * 32


def test_decode_finalize_batch_separates_all_fields(registry):
    log = to_entry(finalize_batch_log(42, BATCH_HASH, STATE_ROOT, WITHDRAW_ROOT))
    assert len(bytes.fromhex(log.data[2:])) == 64

    event = decode_log(log, registry.get("FinalizeBatch"))

    assert isinstance(event, FinalizeBatchEvent)
    assert event.batch_index == 42
    assert event.batch_hash == "0x" + "aa" * 32
    assert event.state_root == "0x" + "bb" * 32
    assert event.withdraw_root == "0x" + "cc" * 32


def test_unknown_topic_is_a_signature_mismatch(registry):
    log = to_entry(make_raw_log(["0x" + "ef" * 32, encode(["uint256"], [1]), BATCH_HASH]))

    for signature in registry:
        with pytest.raises(SignatureMismatchError):
            decode_log(log, signature)


def test_commit_log_does_not_decode_as_finalize(registry):
    log = to_entry(commit_batch_log(7, BATCH_HASH))
    with pytest.raises(SignatureMismatchError):
        decode_log(log, registry.get("FinalizeBatch"))


def test_log_without_topics_is_a_signature_mismatch(registry):
    log = to_entry(make_raw_log([]))
    with pytest.raises(SignatureMismatchError):
        decode_log(log, registry.get("CommitBatch"))


def test_signature_mismatch_is_a_decode_error():
    assert issubclass(SignatureMismatchError, DecodeError)


def test_missing_indexed_topic_is_rejected(registry):
    signature = registry.get("CommitBatch")
    log = to_entry(make_raw_log([signature.topic_hash, encode(["uint256"], [3])]))
    with pytest.raises(DecodeError, match="indexed topics"):
        decode_log(log, signature)


def test_short_data_is_rejected(registry):
    raw = finalize_batch_log(1, BATCH_HASH, STATE_ROOT, WITHDRAW_ROOT)
    raw["data"] = raw["data"][:40]
    with pytest.raises(DecodeError):
        decode_log(to_entry(raw), registry.get("FinalizeBatch"))


def test_empty_data_for_finalize_is_rejected(registry):
    raw = finalize_batch_log(1, BATCH_HASH, STATE_ROOT, WITHDRAW_ROOT)
    raw["data"] = raw["data"][:0]
    with pytest.raises(DecodeError):
        decode_log(to_entry(raw), registry.get("FinalizeBatch"))


def test_event_models_reject_negative_batch_index():
    with pytest.raises(ValidationError):
        CommitBatchEvent(batch_index=-1, batch_hash="0x" + "aa" * 32)
