"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp


class BasePushIDError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        # Deferred: generation imports the encoding layer, which raises these errors
        from generation.push_id import next_id
        self.error_id = next_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    @property
    def message(self):
        return super().__str__()

    def __str__(self):
        return f"[{self.error_id}] {self.message}"

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "msg": self.message,
            "context": self.context,
        }


class InvalidEncodingError(BasePushIDError, TypeError):
    """Encoding name is not one of the supported alphabets."""

    def __init__(self, message, encoding=None, **kwargs):
        context = kwargs.pop("context", {})
        if encoding is not None:
            context["encoding"] = repr(encoding)
        super().__init__(message, context=context, **kwargs)


class InvalidTimestampError(BasePushIDError, TypeError):
    """Timestamp cannot be coerced to an integer."""

    def __init__(self, message, timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp is not None:
            context["timestamp"] = repr(timestamp)
        super().__init__(message, context=context, **kwargs)


class OutOfRangeError(BasePushIDError, ValueError):
    """Timestamp is negative or above the maximum safe integer."""

    def __init__(self, message, timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp is not None:
            context["timestamp"] = str(timestamp)
        super().__init__(message, context=context, **kwargs)


class TooShortError(BasePushIDError, ValueError):
    """Encoded timestamp input is shorter than the timestamp width."""

    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class InvalidCharacterError(BasePushIDError, ValueError):
    """Character outside the target alphabet."""

    def __init__(self, char, index, encoding, **kwargs):
        self.char = char
        self.index = index
        self.encoding = encoding
        context = kwargs.pop("context", {})
        context.update(char=char, index=index, encoding=encoding)
        super().__init__(
            f'Invalid character "{char}" at index {index} for {encoding} encoding',
            context=context,
            **kwargs,
        )
