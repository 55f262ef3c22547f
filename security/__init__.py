# security/__init__.py
from .envelope import Envelope, ENVELOPE_FIELDS
from .key_provider import KeyProvider
from .message_cipher import MessageCipher, decrypt_message, encrypt_message

__all__ = ["Envelope", "ENVELOPE_FIELDS", "KeyProvider", "MessageCipher", "encrypt_message", "decrypt_message"]
