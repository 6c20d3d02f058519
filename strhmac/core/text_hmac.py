from strhmac.crypto.hmac_engine import HMACEngine
from strhmac.errors import TextEncodingError


def _encode(value, name: str) -> bytes:
    if value is None:
        raise TypeError(f"{name} is required")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise TextEncodingError(name, e.reason) from e


def sha256_with_key(text: str, key: str) -> str:
    """
    HMAC-SHA256 of ``text`` under ``key``, both UTF-8 encoded.

    Returns 64 lowercase hex characters. An empty key is valid and distinct
    from ``None``, which is rejected.
    """
    message = _encode(text, "text")
    secret = _encode(key, "key")
    return HMACEngine.compute(secret, message)
