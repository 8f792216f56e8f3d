"""Binary-to-text codecs: hex, base64 and base32 variants."""

import base64
import binascii
from dataclasses import dataclass
from typing import Callable

from alerthook.core.exceptions import ValidationException


@dataclass(frozen=True)
class Codec:
    """Encode bytes to text and back.

    Decoding never raises on malformed input; it returns ``b""`` instead.
    """

    name: str
    encoder: Callable[[bytes], bytes]
    decoder: Callable[[bytes], bytes]
    padded: bool = True
    block: int = 4

    def encode(self, data: bytes | str) -> str:
        if isinstance(data, str):
            data = data.encode("utf-8")
        encoded = self.encoder(data).decode("ascii")
        if not self.padded:
            encoded = encoded.rstrip("=")
        return encoded

    def decode(self, text: str) -> bytes:
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError:
            return b""
        if not self.padded:
            raw += b"=" * (-len(raw) % self.block)
        try:
            return self.decoder(raw)
        except (binascii.Error, ValueError):
            return b""


def _b64_strict(data: bytes) -> bytes:
    return base64.b64decode(data, validate=True)


def _b64_urlsafe(data: bytes) -> bytes:
    return base64.b64decode(data, altchars=b"-_", validate=True)


HEX = Codec("hex", binascii.hexlify, binascii.unhexlify)


class _Base64:
    std = Codec("base64", base64.b64encode, _b64_strict)
    urlsafe = Codec("base64-urlsafe", base64.urlsafe_b64encode, _b64_urlsafe)
    std_nopadding = Codec("base64-nopad", base64.b64encode, _b64_strict, padded=False)
    urlsafe_nopadding = Codec("base64-urlsafe-nopad", base64.urlsafe_b64encode, _b64_urlsafe, padded=False)


class _Base32:
    std = Codec("base32", base64.b32encode, base64.b32decode, block=8)
    hex = Codec("base32-hex", base64.b32hexencode, base64.b32hexdecode, block=8)
    std_nopadding = Codec("base32-nopad", base64.b32encode, base64.b32decode, padded=False, block=8)
    hex_nopadding = Codec("base32-hex-nopad", base64.b32hexencode, base64.b32hexdecode, padded=False, block=8)


BASE64 = _Base64()
BASE32 = _Base32()

CODECS: dict[str, Codec] = {
    codec.name: codec
    for codec in (
        HEX,
        BASE64.std,
        BASE64.urlsafe,
        BASE64.std_nopadding,
        BASE64.urlsafe_nopadding,
        BASE32.std,
        BASE32.hex,
        BASE32.std_nopadding,
        BASE32.hex_nopadding,
    )
}


def get_codec(name: str) -> Codec:
    """Look up a codec by name.

    Raises:
        ValidationException: If no codec has that name
    """
    try:
        return CODECS[name]
    except KeyError:
        raise ValidationException(
            f"Unknown encoding: {name}",
            details={"encoding": name, "available": sorted(CODECS)},
        ) from None
