from fastapi import HTTPException, Body, Depends
from typing import Optional
from api.models import EncryptRequest, EncryptResponse, DecryptRequest, DecryptResponse, HealthResponse
from hybrid_crypto_package import HybridCryptoError, KeyConfigurationError
from security.key_provider import KeyProvider
from security.message_cipher import MessageCipher
import logging

logger = logging.getLogger(__name__)

ENCRYPT_INVALID_BODY = 'The "message" field is required and must be a string.'
ENCRYPT_FAILED = "Error while encrypting the message."
DECRYPT_INVALID_BODY = "Missing required fields: encryptedKey, iv, authTag, or data."
DECRYPT_FAILED = "Error while decrypting the message."

# Request-shape errors per route suffix, used by the validation handler in main.py
VALIDATION_ERROR_MESSAGES = {
    "/encrypt": ENCRYPT_INVALID_BODY,
    "/decrypt": DECRYPT_INVALID_BODY,
}

# --- Dependency Injection Setup ---
# Set by lifespan in main.py
_key_provider_instance: Optional[KeyProvider] = None


def get_key_provider() -> KeyProvider:
    global _key_provider_instance
    if _key_provider_instance is None:
        logger.warning("KeyProvider instance was None, attempting to initialize now (should have been done by lifespan).")
        _key_provider_instance = KeyProvider.from_config()
    return _key_provider_instance

def get_message_cipher(
    key_provider: KeyProvider = Depends(get_key_provider)
) -> MessageCipher:
    return MessageCipher(key_provider=key_provider)

# --- API Endpoints ---

def encrypt_message(
    encrypt_request: EncryptRequest = Body(...),
    cipher: MessageCipher = Depends(get_message_cipher)
):
    try:
        envelope = cipher.encrypt(encrypt_request.message)
    except KeyConfigurationError as e:
        logger.error(f"Encryption unavailable: {e}")
        raise HTTPException(status_code=500, detail=ENCRYPT_FAILED)
    except HybridCryptoError as e:
        logger.error(f"Encryption failed: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=ENCRYPT_FAILED)

    return EncryptResponse(**envelope.to_dict())

def decrypt_message(
    decrypt_request: DecryptRequest = Body(...),
    cipher: MessageCipher = Depends(get_message_cipher)
):
    try:
        plaintext = cipher.decrypt(decrypt_request.model_dump())
    except KeyConfigurationError as e:
        logger.error(f"Decryption unavailable: {e}")
        raise HTTPException(status_code=500, detail=DECRYPT_FAILED)
    except HybridCryptoError as e:
        # Cause stays in the server log; every client sees the same message
        logger.warning(f"Decryption rejected: {type(e).__name__}: {e}")
        raise HTTPException(status_code=400, detail=DECRYPT_FAILED)

    return DecryptResponse(decrypted=plaintext)

def health_check(
    key_provider: KeyProvider = Depends(get_key_provider)
):
    ready = key_provider.can_encrypt and key_provider.can_decrypt
    return HealthResponse(
        status="ok" if ready else "degraded",
        encryption_ready=key_provider.can_encrypt,
        decryption_ready=key_provider.can_decrypt,
    )
