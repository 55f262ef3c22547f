# hybrid_crypto_package/key_generation.py
import logging

from Crypto.PublicKey import RSA

logger = logging.getLogger(__name__)

DEFAULT_RSA_KEY_BITS = 2048


def generate_rsa_keypair(bits=DEFAULT_RSA_KEY_BITS):
    """
    Generates an ephemeral RSA key pair for tests and local development.
    Nothing is written to disk.
    Returns:
        tuple: (public_key_pem, private_key_pem) as str.
    """
    logger.info(f"Generating {bits}-bit RSA keypair...")
    key = RSA.generate(bits)
    public_key_pem = key.public_key().export_key(format='PEM').decode('utf-8')
    private_key_pem = key.export_key(format='PEM').decode('utf-8')
    return public_key_pem, private_key_pem
