from pydantic import BaseModel, Field

# --- API Request/Response Models (using Pydantic) ---

class EncryptRequest(BaseModel):
    """Request model for the encryption endpoint."""
    message: str = Field(..., min_length=1, description="Plaintext message to encrypt", examples=["Hello, world!"])

class EncryptResponse(BaseModel):
    """Response model for the encryption endpoint. Field names match the envelope wire format."""
    encryptedKey: str = Field(..., description="AES key encrypted with RSA (base64)")
    iv: str = Field(..., description="AES-GCM initialization vector (base64)")
    authTag: str = Field(..., description="AES-GCM authentication tag (base64)")
    data: str = Field(..., description="Encrypted message data (base64)")

class DecryptRequest(BaseModel):
    """Request model for the decryption endpoint. All four envelope fields are required."""
    encryptedKey: str = Field(..., min_length=1, description="AES key encrypted with RSA (base64)")
    iv: str = Field(..., min_length=1, description="AES-GCM initialization vector (base64)")
    authTag: str = Field(..., min_length=1, description="AES-GCM authentication tag (base64)")
    data: str = Field(..., min_length=1, description="Encrypted message data (base64)")

class DecryptResponse(BaseModel):
    """Response model for the decryption endpoint."""
    decrypted: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    encryption_ready: bool
    decryption_ready: bool
