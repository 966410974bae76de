"""Domain-specific errors for yeectl."""


class YeectlError(Exception):
    """Base error for yeectl."""


class ConfigError(YeectlError):
    """Raised when the config file cannot be read or does not match the schema."""


class BulbSelectionError(YeectlError):
    """Raised when the target bulb cannot be resolved from config and options."""


class ProtocolError(YeectlError):
    """Base error for a failed request/response exchange."""


class SerializationError(ProtocolError):
    """Raised when a command cannot be rendered as a JSON line."""


class EncodingError(ProtocolError):
    """Raised when text or bytes fall outside the 7-bit wire character set."""

    def __init__(self, message: str, *, text: str | bytes, position: int) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


class TransportError(ProtocolError):
    """Base transport error."""


class TransportConnectError(TransportError):
    """Raised on TCP connect failures."""


class TransportSendError(TransportError):
    """Raised when writing the request line fails."""


class TransportReceiveError(TransportError):
    """Raised when reading the reply fails."""


class TransportTimeoutError(TransportError):
    """Raised when the stream deadline expires during connect or receive."""
