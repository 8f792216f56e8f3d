"""Hashing and encoding helpers."""

from alerthook.utils.encoding import BASE32, BASE64, HEX, Codec
from alerthook.utils.hashing import HASH, HMAC, Hasher, HmacSigner

__all__ = ["BASE32", "BASE64", "HEX", "Codec", "HASH", "HMAC", "Hasher", "HmacSigner"]
