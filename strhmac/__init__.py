"""HMAC-SHA256 of text under a text key, as lowercase hex."""
import logging

from strhmac.core.text_hmac import sha256_with_key
from strhmac.crypto.hmac_engine import HMACEngine
from strhmac.errors import HMACError, TextEncodingError
from strhmac.log import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["sha256_with_key", "HMACEngine", "HMACError", "TextEncodingError", "configure_logging"]
__version__ = "1.0.0"
