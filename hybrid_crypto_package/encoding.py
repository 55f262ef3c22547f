# hybrid_crypto_package/encoding.py
import base64
import binascii

from .errors import FormatError


def b64encode_str(raw_bytes: bytes) -> str:
    return base64.b64encode(raw_bytes).decode('ascii')


def b64decode_field(value, field_name: str, allow_empty: bool = False) -> bytes:
    """
    Strictly decodes one base64 envelope field.
    Raises FormatError if the value is not a string, is not valid base64,
    or is empty (unless allow_empty is set).
    """
    if not isinstance(value, str):
        raise FormatError(f"Field '{field_name}' must be a base64 string.")
    if not value:
        if allow_empty:
            return b""
        raise FormatError(f"Field '{field_name}' is empty.")
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as b64_error:
        raise FormatError(f"Field '{field_name}' is not valid base64.") from b64_error
    if not decoded and not allow_empty:
        raise FormatError(f"Field '{field_name}' decodes to zero bytes.")
    return decoded
