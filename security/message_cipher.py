# --- File: security/message_cipher.py ---
import logging
from typing import Any, Mapping, Union

from hybrid_crypto_package import (
    AES_KEY_SIZE,
    AuthenticationError,
    DecryptionError,
    EncryptionError,
    FormatError,
    aes_gcm_decrypt,
    aes_gcm_encrypt,
    b64decode_field,
    b64encode_str,
    generate_aes_key,
    rsa_unwrap_key,
    rsa_wrap_key,
)
from .envelope import Envelope
from .key_provider import KeyProvider

logger = logging.getLogger(__name__)


def encrypt_message(plaintext: str, recipient_public_key) -> Envelope:
    """
    Hybrid-encrypts a string for the holder of the matching private key:
    AES-256-GCM over the UTF-8 text under a fresh key and nonce, then the key
    itself wrapped with RSA-OAEP. Raises EncryptionError; never returns a partial envelope.
    """
    if not isinstance(plaintext, str):
        raise EncryptionError("Plaintext must be a str.")
    try:
        plaintext_bytes = plaintext.encode('utf-8')
    except UnicodeEncodeError as encode_error:
        raise EncryptionError("Plaintext is not representable as UTF-8.") from encode_error

    # 1. One-time AES key
    aes_key_bytes = generate_aes_key()

    # 2. Encrypt the payload with AES-GCM
    nonce_bytes, ciphertext_bytes, tag_bytes = aes_gcm_encrypt(plaintext_bytes, aes_key_bytes)

    # 3. Wrap the AES key for the recipient
    wrapped_key_bytes = rsa_wrap_key(aes_key_bytes, recipient_public_key)

    logger.debug(f"Encrypted {len(plaintext_bytes)} bytes into envelope.")
    return Envelope(
        encrypted_key=b64encode_str(wrapped_key_bytes),
        iv=b64encode_str(nonce_bytes),
        auth_tag=b64encode_str(tag_bytes),
        data=b64encode_str(ciphertext_bytes),
    )


def decrypt_message(envelope: Union[Envelope, Mapping[str, Any]], recipient_private_key) -> str:
    """
    Reverses encrypt_message. Raises FormatError for malformed fields,
    DecryptionError when the AES key cannot be unwrapped, and AuthenticationError
    when the tag does not verify. Unverified plaintext is never returned.
    """
    if not isinstance(envelope, Envelope):
        envelope = Envelope.from_mapping(envelope)

    # 1. Decode every field before touching any key material
    wrapped_key_bytes = b64decode_field(envelope.encrypted_key, "encryptedKey")
    nonce_bytes = b64decode_field(envelope.iv, "iv")
    tag_bytes = b64decode_field(envelope.auth_tag, "authTag")
    # The empty string encrypts to empty ciphertext, so an empty 'data' is checked against the tag below
    ciphertext_bytes = b64decode_field(envelope.data, "data", allow_empty=True)

    # 2. Unwrap the AES key
    aes_key_bytes = rsa_unwrap_key(wrapped_key_bytes, recipient_private_key)
    if len(aes_key_bytes) != AES_KEY_SIZE:
        raise DecryptionError(f"Unwrapped key is {len(aes_key_bytes)} bytes, expected {AES_KEY_SIZE}.")

    # 3. Decrypt and verify the payload
    try:
        plaintext_bytes = aes_gcm_decrypt(ciphertext_bytes, aes_key_bytes, nonce_bytes, tag_bytes)
    except AuthenticationError:
        if not ciphertext_bytes:
            raise FormatError("Field 'data' is empty.") from None
        raise

    try:
        return plaintext_bytes.decode('utf-8')
    except UnicodeDecodeError as decode_error:
        raise DecryptionError("Verified plaintext is not valid UTF-8.") from decode_error


class MessageCipher:
    """
    Binds encrypt_message/decrypt_message to the keys of a KeyProvider.
    Keys are fetched on every call; nothing else is held between calls.
    """
    def __init__(self, key_provider: KeyProvider):
        self.key_provider = key_provider

    def encrypt(self, plaintext: str) -> Envelope:
        return encrypt_message(plaintext, self.key_provider.get_public_key())

    def decrypt(self, envelope: Union[Envelope, Mapping[str, Any]]) -> str:
        return decrypt_message(envelope, self.key_provider.get_private_key())
