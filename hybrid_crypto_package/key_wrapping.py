# hybrid_crypto_package/key_wrapping.py
import logging

from Crypto.Cipher import PKCS1_OAEP
from Crypto.PublicKey import RSA
from Crypto.PublicKey.RSA import RsaKey

from .errors import DecryptionError, EncryptionError

logger = logging.getLogger(__name__)


def _import_rsa_key(key):
    """Accepts an RsaKey or PEM text/bytes. PEM copied from a .env file may carry literal '\\n'."""
    if isinstance(key, RsaKey):
        return key
    if isinstance(key, bytes):
        key = key.decode('utf-8')
    if not isinstance(key, str) or not key.strip():
        raise ValueError("RSA key must be an RsaKey or non-empty PEM text.")
    return RSA.import_key(key.strip().replace('\\n', '\n'))


def load_public_key(key):
    try:
        return _import_rsa_key(key).public_key()
    except (ValueError, IndexError, TypeError, UnicodeDecodeError) as key_error:
        raise EncryptionError("Recipient public key could not be parsed.") from key_error


def load_private_key(key):
    try:
        rsa_key = _import_rsa_key(key)
    except (ValueError, IndexError, TypeError, UnicodeDecodeError) as key_error:
        raise DecryptionError("Recipient private key could not be parsed.") from key_error
    if not rsa_key.has_private():
        raise DecryptionError("Key does not contain a private half.")
    return rsa_key


def rsa_wrap_key(symmetric_key_bytes, recipient_public_key):
    """
    Encrypts a symmetric key with RSA-OAEP under the recipient's public key.
    PKCS1_OAEP defaults (SHA-1, MGF1-SHA-1) match Node's crypto.publicEncrypt.
    """
    public_key = load_public_key(recipient_public_key)
    try:
        return PKCS1_OAEP.new(public_key).encrypt(symmetric_key_bytes)
    except (TypeError, ValueError) as wrap_error:
        # ValueError("Plaintext is too long.") when the modulus is too small
        logger.error(f"RSA key wrapping failed for {public_key.size_in_bits()}-bit key: {wrap_error}")
        raise EncryptionError("RSA key wrapping failed.") from wrap_error


def rsa_unwrap_key(wrapped_key_bytes, recipient_private_key):
    """Recovers a symmetric key wrapped by rsa_wrap_key."""
    private_key = load_private_key(recipient_private_key)
    try:
        return PKCS1_OAEP.new(private_key).decrypt(wrapped_key_bytes)
    except (TypeError, ValueError) as unwrap_error:
        # "Incorrect decryption." for wrong key or corrupted data, length errors otherwise
        logger.debug(f"RSA key unwrapping failed: {unwrap_error}")
        raise DecryptionError("RSA key unwrapping failed.") from unwrap_error
