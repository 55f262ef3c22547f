# hybrid_crypto_package/symmetric_ciphers.py
import logging

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes

from .errors import AuthenticationError, DecryptionError, EncryptionError

logger = logging.getLogger(__name__)

AES_KEY_SIZE = 32  # AES-256
GCM_NONCE_SIZE = 12  # 96-bit nonce
GCM_TAG_SIZE = 16


def generate_aes_key():
    """Returns a fresh random AES-256 key. Never reuse it across messages."""
    return get_random_bytes(AES_KEY_SIZE)


def aes_gcm_encrypt(plaintext_bytes, aes_key_bytes):
    """
    Encrypts bytes with AES-GCM under a fresh 96-bit nonce, no associated data.
    Returns (nonce_bytes, ciphertext_bytes, tag_bytes).
    """
    if not isinstance(aes_key_bytes, (bytes, bytearray)) or len(aes_key_bytes) != AES_KEY_SIZE:
        raise EncryptionError(f"AES key must be {AES_KEY_SIZE} bytes.")

    nonce_bytes = get_random_bytes(GCM_NONCE_SIZE)
    try:
        cipher = AES.new(aes_key_bytes, AES.MODE_GCM, nonce=nonce_bytes, mac_len=GCM_TAG_SIZE)
        ciphertext_bytes, tag_bytes = cipher.encrypt_and_digest(plaintext_bytes)
    except (TypeError, ValueError) as crypto_error:
        logger.error(f"AES-GCM encryption failed: {crypto_error}")
        raise EncryptionError("AES-GCM encryption failed.") from crypto_error

    return nonce_bytes, ciphertext_bytes, tag_bytes


def aes_gcm_decrypt(ciphertext_bytes, aes_key_bytes, nonce_bytes, tag_bytes):
    """
    Decrypts and verifies AES-GCM ciphertext.
    Raises AuthenticationError on any tag mismatch; unverified bytes are never returned.
    """
    if not isinstance(aes_key_bytes, (bytes, bytearray)) or len(aes_key_bytes) != AES_KEY_SIZE:
        raise DecryptionError(f"Recovered key is not a {AES_KEY_SIZE}-byte AES key.")

    try:
        cipher = AES.new(aes_key_bytes, AES.MODE_GCM, nonce=nonce_bytes)
    except (TypeError, ValueError) as crypto_error:
        raise AuthenticationError("AES-GCM context could not be initialised.") from crypto_error

    try:
        return cipher.decrypt_and_verify(ciphertext_bytes, tag_bytes)
    except (TypeError, ValueError) as tag_error:
        # PyCryptodome reports a MAC mismatch as ValueError("MAC check failed")
        logger.debug(f"AES-GCM tag verification failed: {tag_error}")
        raise AuthenticationError("AES-GCM authentication tag did not verify.") from tag_error
