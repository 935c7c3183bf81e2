"""Exception hierarchy for doublehmac."""


class DoubleHmacError(Exception):
    """Base class for all doublehmac errors."""


class InvalidAlgorithm(DoubleHmacError, ValueError):
    """Raised when a hash algorithm is not one of the supported identifiers."""

    def __init__(self, algorithm: object):
        super().__init__(f"Invalid hash algorithm: '{algorithm}'")
        self.algorithm = algorithm


class InvalidInputType(DoubleHmacError, TypeError):
    """Raised when a value is neither text nor a byte sequence."""

    def __init__(self, value: object, what: str = "comparison value"):
        super().__init__(
            f"Invalid {what}: object of type {type(value).__name__} "
            "is not str or bytes-like"
        )
        self.value_type = type(value)


class InvalidKeyLength(DoubleHmacError, ValueError):
    """Raised when a requested key length is not a positive number of bytes."""


class ProviderNotFound(DoubleHmacError, LookupError):
    """Raised when no cryptographic provider is registered under a name."""
