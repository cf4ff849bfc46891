from typing import Any, Optional


class EtherscanError(ValueError):
    """Base class for every error raised while talking to the explorer API."""


class DecodeError(EtherscanError):
    """A wire value could not be decoded into its domain type."""

    kind = "decode"

    def __init__(self, field: str, raw: Any, reason: str = "") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"{self.kind} value for field '{field}' ({raw!r}){detail}.")


class MalformedNumeric(DecodeError):
    kind = "Malformed numeric"


class MalformedHex(DecodeError):
    kind = "Malformed hex"


class MalformedEmbeddedJson(DecodeError):
    kind = "Malformed embedded JSON"


class MalformedRecord(DecodeError):
    """A record key is missing or carries the wrong JSON type."""

    kind = "Malformed record"


class MalformedEnvelope(EtherscanError):
    """The payload is not a {status, message, result} object."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unexpected response from Etherscan: {reason}.")


class BalanceFailed(EtherscanError):
    """A balance endpoint answered with status "0"."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(f"Etherscan balance query failed: {message or 'status 0'}.")


class BadStatusCode(EtherscanError):
    def __init__(self, status: str, message: str = "", detail: Optional[str] = None) -> None:
        self.status = status
        self.message = message
        self.detail = detail
        parts = [f"status {status!r}"]
        if message:
            parts.append(message)
        if detail:
            parts.append(detail)
        super().__init__(f"Etherscan error: {': '.join(parts)}.")
