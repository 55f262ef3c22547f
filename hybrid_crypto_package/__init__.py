# hybrid_crypto_package/__init__.py

"""
Hybrid Crypto Package (Using PyCryptodome)
This package provides the primitives behind the message envelope, including:
- Symmetric encryption/decryption using AES-256-GCM with a 96-bit nonce
- Wrapping/unwrapping of one-time AES keys with RSA-OAEP
- Strict base64 handling of envelope fields
- Ephemeral RSA key pair generation for tests and local development
"""
from .encoding import b64decode_field, b64encode_str
from .errors import (
    AuthenticationError,
    DecryptionError,
    EncryptionError,
    FormatError,
    HybridCryptoError,
    KeyConfigurationError,
)
from .key_generation import generate_rsa_keypair
from .key_wrapping import load_private_key, load_public_key, rsa_unwrap_key, rsa_wrap_key
from .symmetric_ciphers import (
    AES_KEY_SIZE,
    GCM_NONCE_SIZE,
    GCM_TAG_SIZE,
    aes_gcm_decrypt,
    aes_gcm_encrypt,
    generate_aes_key,
)

__all__ = [
    "AES_KEY_SIZE",
    "GCM_NONCE_SIZE",
    "GCM_TAG_SIZE",
    "generate_aes_key",
    "aes_gcm_encrypt",
    "aes_gcm_decrypt",
    "load_public_key",
    "load_private_key",
    "rsa_wrap_key",
    "rsa_unwrap_key",
    "generate_rsa_keypair",
    "b64encode_str",
    "b64decode_field",
    "HybridCryptoError",
    "EncryptionError",
    "FormatError",
    "AuthenticationError",
    "DecryptionError",
    "KeyConfigurationError",
]
