# --- File: security/key_provider.py ---
import os
import logging
from typing import Optional

from Crypto.PublicKey.RSA import RsaKey

import config
from hybrid_crypto_package import (
    DecryptionError,
    EncryptionError,
    KeyConfigurationError,
    load_private_key,
    load_public_key,
)

logger = logging.getLogger(__name__)


def _read_key_file(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    if not os.path.exists(path):
        logger.error(f"Key file not found: {path}")
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except IOError as e:
        logger.error(f"Error reading key file {path}: {e}")
        return None


class KeyProvider:
    """
    Holds the recipient RSA key pair supplied through the environment and hands
    parsed keys to each encrypt/decrypt call. Keys are never generated,
    rotated or written anywhere by this class.
    """
    def __init__(self, public_key_pem: Optional[str] = None, private_key_pem: Optional[str] = None,
                 min_key_bits: int = config.MIN_RSA_KEY_BITS):
        self.min_key_bits = min_key_bits
        self._public_key: Optional[RsaKey] = None
        self._private_key: Optional[RsaKey] = None

        if public_key_pem:
            try:
                self._public_key = load_public_key(public_key_pem)
                self._check_size(self._public_key, "public")
            except EncryptionError as e:
                logger.error(f"Configured public key is unusable: {e}")
        if private_key_pem:
            try:
                self._private_key = load_private_key(private_key_pem)
                self._check_size(self._private_key, "private")
            except DecryptionError as e:
                logger.error(f"Configured private key is unusable: {e}")

    @classmethod
    def from_config(cls) -> "KeyProvider":
        public_key_pem = config.PUBLIC_KEY or _read_key_file(config.PUBLIC_KEY_FILE)
        private_key_pem = config.PRIVATE_KEY or _read_key_file(config.PRIVATE_KEY_FILE)
        return cls(public_key_pem=public_key_pem, private_key_pem=private_key_pem)

    def _check_size(self, key: RsaKey, label: str):
        bits = key.size_in_bits()
        if bits < self.min_key_bits:
            logger.warning(f"Configured RSA {label} key is {bits} bits, below the recommended minimum of {self.min_key_bits}.")
        else:
            logger.info(f"Loaded {bits}-bit RSA {label} key.")

    @property
    def can_encrypt(self) -> bool:
        return self._public_key is not None

    @property
    def can_decrypt(self) -> bool:
        return self._private_key is not None

    def get_public_key(self) -> RsaKey:
        """Returns the recipient public key used to wrap AES keys."""
        if self._public_key is None:
            raise KeyConfigurationError("Recipient public key is not configured.")
        return self._public_key

    def get_private_key(self) -> RsaKey:
        """Returns the recipient private key used to unwrap AES keys."""
        if self._private_key is None:
            raise KeyConfigurationError("Recipient private key is not configured.")
        return self._private_key
