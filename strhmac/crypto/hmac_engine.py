import logging

from strhmac.crypto.sha256 import BLOCK_SIZE, sha256

logger = logging.getLogger(__name__)

IPAD = 0x36
OPAD = 0x5C


def _as_bytes(value, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    return bytes(value)


class HMACEngine:
    """RFC 2104 HMAC over SHA-256, rendered as lowercase hex."""

    @staticmethod
    def pad_key(key: bytes) -> bytes:
        """Hash keys longer than one block, then zero-fill to BLOCK_SIZE."""
        key = _as_bytes(key, "key")
        if len(key) > BLOCK_SIZE:
            logger.debug("Key of %d bytes exceeds block size, hashing it first", len(key))
            key = sha256(key)
        return key + b"\x00" * (BLOCK_SIZE - len(key))

    @staticmethod
    def compute(key: bytes, message: bytes) -> str:
        padded = HMACEngine.pad_key(key)
        message = _as_bytes(message, "message")

        inner_pad = bytes(b ^ IPAD for b in padded)
        outer_pad = bytes(b ^ OPAD for b in padded)

        inner = sha256(inner_pad + message)
        return sha256(outer_pad + inner).hex()
