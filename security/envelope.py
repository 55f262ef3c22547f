# --- File: security/envelope.py ---
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Dict, Mapping

from hybrid_crypto_package import FormatError

ENVELOPE_FIELDS = ("encryptedKey", "iv", "authTag", "data")


class Envelope(BaseModel):
    """
    Output of one hybrid encryption call. All four fields are base64 strings and
    only meaningful together. The algorithm choice (RSA-OAEP + AES-256-GCM) is
    implicit; no version or algorithm tag is carried.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    encrypted_key: str = Field(..., alias="encryptedKey", description="One-time AES key, RSA-OAEP wrapped with the recipient's public key (base64).")
    iv: str = Field(..., description="96-bit AES-GCM nonce (base64).")
    auth_tag: str = Field(..., alias="authTag", description="AES-GCM authentication tag (base64).")
    data: str = Field(..., description="AES-GCM ciphertext of the UTF-8 plaintext (base64).")

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Envelope":
        """Builds an envelope from a wire-named mapping; missing or non-string fields raise FormatError."""
        if not isinstance(mapping, Mapping):
            raise FormatError("Envelope must be a mapping of its four fields.")
        missing = [name for name in ENVELOPE_FIELDS if name not in mapping]
        if missing:
            raise FormatError(f"Envelope is missing field(s): {', '.join(missing)}.")
        try:
            return cls.model_validate({name: mapping[name] for name in ENVELOPE_FIELDS})
        except ValidationError as validation_error:
            raise FormatError("Envelope fields must be strings.") from validation_error
