"""Error types raised by key loading, resolution, signing and encryption."""


class CredentialError(Exception):
    """Base class for all credential and token errors."""


class KeyFormatError(CredentialError):
    """A PEM or DER key encoding is malformed or of the wrong type."""


class IdentityResolutionError(CredentialError):
    """A certificate document is missing a required field or is unparseable."""


class TokenSigningError(CredentialError):
    """Claim construction or signing of a JWT failed."""


class InvalidArgumentError(CredentialError, ValueError):
    """A required input was missing or blank."""


class EncryptionError(CredentialError):
    """The RSA primitive rejected an otherwise valid request."""


class PayloadTooLargeError(CredentialError):
    """Plaintext exceeds the single-block RSA limit for the recipient key."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Plaintext length {length} exceeds RSA limit of {limit} bytes"
        )
        self.length = length
        self.limit = limit
