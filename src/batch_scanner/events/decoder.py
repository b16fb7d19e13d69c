from eth_abi import decode
from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes
from pydantic import ValidationError

from batch_scanner.exceptions import DecodeError, SignatureMismatchError
from batch_scanner.rpc_types import LogEntry
from batch_scanner.utils import hex_to_str
from .models import EVENT_MODELS, BatchEvent
from .schema import EventSignature


def _normalize(value):
    # bytesN values are reported as 0x-prefixed hex strings
    if isinstance(value, bytes):
        return hex_to_str(HexBytes(value))
    return value

def decode_log(log: LogEntry, signature: EventSignature) -> BatchEvent:
    """Decode a raw log into the event model registered for the signature

    Params:
        log (LogEntry): Log as returned by eth_getLogs
        signature (EventSignature): Event the log is expected to carry

    Returns:
        BatchEvent: Decoded event

    Raises:
        SignatureMismatchError: If topics[0] is not the signature's topic hash
        DecodeError: If the topics or data don't fit the signature's layout
    """
    if not log.topics or log.topics[0].lower() != signature.topic_hash:
        raise SignatureMismatchError(
            f"Log topic {log.topics[0] if log.topics else None} does not match {signature.name} ({signature.topic_hash})"
        )

    indexed = signature.indexed_arguments
    indexed_topics = log.topics[1:]
    if len(indexed_topics) != len(indexed):
        raise DecodeError(
            f"{signature.name} expects {len(indexed)} indexed topics, log {log.transaction_hash} has {len(indexed_topics)}"
        )

    values = {}
    non_indexed = signature.non_indexed_arguments
    try:
        if non_indexed:
            decoded = decode([arg.type for arg in non_indexed], HexBytes(log.data))
            values.update({arg.name: value for arg, value in zip(non_indexed, decoded)})
        for arg, topic in zip(indexed, indexed_topics):
            values[arg.name] = decode([arg.type], HexBytes(topic))[0]
    except (DecodingError, ValueError) as e:
        raise DecodeError(f"Failed to decode {signature.name} log in {log.transaction_hash}: {e}") from e

    model = EVENT_MODELS.get(signature.name)
    if model is None:
        raise DecodeError(f"No event model registered for {signature.name}")

    try:
        return model.model_validate({name: _normalize(value) for name, value in values.items()})
    except ValidationError as e:
        raise DecodeError(f"Invalid {signature.name} event in {log.transaction_hash}: {e}") from e
