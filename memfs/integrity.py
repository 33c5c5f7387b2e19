"""
Module: integrity.py
Description: HMAC checksums over file content, used to detect content that was
             changed without going through the file system.
"""

import logging
from cryptography.fernet import Fernet
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

logger = logging.getLogger(__name__)


def generate_key() -> bytes:
    key = Fernet.generate_key()
    logger.debug("Checksum key generated.")
    return key


def generate_hmac(data: str | bytes, key: bytes) -> str:
    if isinstance(data, str):
        data_bytes = data.encode("utf-8")
    else:
        data_bytes = data

    h = hmac.HMAC(key, hashes.SHA256())
    h.update(data_bytes)
    return h.finalize().hex()


def verify_hmac(data: str | bytes, hmac_value: str, key: bytes) -> bool:
    if isinstance(data, str):
        data_bytes = data.encode("utf-8")
    else:
        data_bytes = data
    h = hmac.HMAC(key, hashes.SHA256())
    h.update(data_bytes)
    try:
        h.verify(bytes.fromhex(hmac_value))
    except (InvalidSignature, ValueError):
        logger.warning("HMAC verification failed.")
        return False
    return True
