"""Exceptions raised by the hashing pipeline."""


class PHashError(Exception):
    """Base class for all hashing errors."""


class DecodeError(PHashError):
    """Source is missing, unreadable, or not a decodable image."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not decode image from {source}: {reason}")


class PreconditionError(PHashError, ValueError):
    """Decoded grid violates the pipeline's input contract."""


class MissingFingerprintError(PHashError, ValueError):
    """A fingerprint is absent where a comparison needs one."""
