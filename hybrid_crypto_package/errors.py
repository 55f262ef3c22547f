# hybrid_crypto_package/errors.py


class HybridCryptoError(Exception):
    """Base class for every failure raised by the hybrid crypto package."""


class EncryptionError(HybridCryptoError):
    """Key generation, AES-GCM encryption or RSA key wrapping failed."""


class FormatError(HybridCryptoError):
    """An envelope field is missing, empty or not valid base64."""


class AuthenticationError(HybridCryptoError):
    """
    The AES-GCM authentication tag did not verify.
    Treat as tampering; retrying cannot succeed.
    """


class DecryptionError(HybridCryptoError):
    """The wrapped key could not be recovered with the given private key."""


class KeyConfigurationError(HybridCryptoError):
    """A required RSA key was not configured or could not be parsed."""
