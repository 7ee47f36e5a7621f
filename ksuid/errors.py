"""KSUID errors with context for tracking."""

from utils.timestamp import format_timestamp


class KsuidError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {"error": type(self).__name__, "msg": str(self), "context": self.context}


class DecodeError(KsuidError, ValueError):
    """Text contains a character outside the base62 alphabet."""

    def __init__(self, message="Failed to decode", char=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if char is not None:
            context["char"] = char
            context["position"] = position
        super().__init__(message, context=context, **kwargs)


class DecodeLengthError(DecodeError):
    """Decoded text does not hold exactly 20 bytes."""

    def __init__(self, length, **kwargs):
        self.length = length
        context = kwargs.pop("context", {})
        context["length"] = length
        super().__init__(f"Got ksuid of unexpected length {length}", context=context, **kwargs)


class LengthError(KsuidError, ValueError):
    """Raw buffer of the wrong size."""

    def __init__(self, expected, actual, what="buffer", **kwargs):
        self.expected = expected
        self.actual = actual
        context = kwargs.pop("context", {})
        context.update(expected=expected, actual=actual)
        super().__init__(f"{what} must be {expected} bytes, got {actual}", context=context, **kwargs)


class PayloadLengthError(LengthError):
    """Payload does not match the variant's PAYLOAD_BYTES."""

    def __init__(self, expected, actual, **kwargs):
        super().__init__(expected, actual, what="payload", **kwargs)


class RandomSourceError(KsuidError, RuntimeError):
    """The OS random source could not supply payload bytes."""
