"""Library errors with tracking IDs."""

from utils.timestamp import format_timestamp


def _tracking_id():
    # Stateless mint: never touches a generator's lock or last identifier.
    from uid.generator import generate_one
    return generate_one()


class UIDError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = _tracking_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "message": self.args[0] if self.args else "",
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "context": self.context,
        }


class InvalidSymbolError(UIDError):
    """A character outside the alphabet was met while decoding or incrementing."""

    def __init__(self, message, symbol=None, position=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if symbol is not None:
            context["symbol"] = symbol
        if position is not None:
            context["position"] = position
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class InvalidLengthError(UIDError):
    """Identifier does not have the configured length."""

    def __init__(self, message, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, context=context, **kwargs)


class IdentifierOverflowError(UIDError):
    """Every symbol of the identifier is already the maximum symbol."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class PrefixCarryError(IdentifierOverflowError):
    """Increment carry would change the timestamp prefix."""


class TimestampRangeError(UIDError):
    """Timestamp cannot be encoded in the fixed-width prefix."""

    def __init__(self, message, timestamp=None, max_time=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp is not None:
            context["timestamp"] = timestamp
        if max_time is not None:
            context["max_time"] = max_time
        super().__init__(message, context=context, **kwargs)


class InvalidAlphabetError(UIDError, ValueError):
    """Alphabet symbols are missing, repeated or not single characters."""
