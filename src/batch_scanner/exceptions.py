class ScannerError(Exception):
    """Base class for all batch event scanner errors"""


class ConfigError(ScannerError):
    """Missing or invalid startup configuration"""


class FetchError(ScannerError):
    """A log query for a block range failed"""


class DecodeError(ScannerError):
    """A log could not be decoded into a batch event"""


class SignatureMismatchError(DecodeError):
    """The log's first topic does not match the expected event signature"""


class EnrichmentError(ScannerError):
    """Base class for failures while fetching a decoded event's transaction data"""

    def __init__(self, message: str, transaction_hash: str | None = None) -> None:
        super().__init__(message)
        self.transaction_hash = transaction_hash


class TransactionUnavailableError(EnrichmentError):
    pass


class PendingTransactionError(EnrichmentError):
    pass


class ReceiptUnavailableError(EnrichmentError):
    pass


class HeaderUnavailableError(EnrichmentError):
    """Raised when the header of the block confirming a transaction can't be fetched.

    The scanner treats this one as event-level: it skips the event and moves on.
    """

    def __init__(self, message: str, transaction_hash: str | None = None, block_number: int | None = None) -> None:
        super().__init__(message, transaction_hash)
        self.block_number = block_number
