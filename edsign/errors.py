"""Exceptions raised by the signing core.

Every failure here is a caller contract violation and is raised before any
curve arithmetic happens. A signature that simply does not verify is not an
error: ``verify`` returns ``False`` for it.
"""


class SigningError(Exception):
    """Base exception for all signing errors."""


class InvalidSeedError(SigningError, ValueError):
    """Seed is missing, not a binary buffer, or not exactly 32 bytes."""

    def __init__(self, message: str = "argument seed must be a 32-byte buffer") -> None:
        super().__init__(message)


class InvalidMessageTypeError(SigningError, TypeError):
    """Message is text or structured data instead of a binary buffer."""

    def __init__(self, message: str = "argument message must be a buffer") -> None:
        super().__init__(message)


class InvalidKeyTypeError(SigningError, TypeError):
    """A public or private key is not a binary buffer of its fixed length."""

    def __init__(self, name: str = "key", size: int | None = None) -> None:
        if size is None:
            message = f"argument {name} must be a buffer"
        else:
            message = f"argument {name} must be a {size}-byte buffer"
        super().__init__(message)
        self.name = name
        self.size = size


class InvalidSignatureTypeError(SigningError, TypeError):
    """Signature is not a 64-byte binary buffer."""

    def __init__(self, message: str = "argument signature must be a 64-byte buffer") -> None:
        super().__init__(message)
