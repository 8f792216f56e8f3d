"""Message digests and HMAC signatures over text."""

import hashlib
import hmac
from typing import Callable

from alerthook.core.exceptions import ValidationException
from alerthook.utils.encoding import BASE64, HEX

ALGORITHMS = ("md5", "sha1", "sha256", "sha512")


def _to_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else text


def _check_algorithm(name: str) -> None:
    if name not in ALGORITHMS:
        raise ValidationException(
            f"Unknown hash algorithm: {name}",
            details={"algorithm": name, "available": list(ALGORITHMS)},
        )


class Hasher:
    """Digest functions keyed by algorithm name.

    ``md5``/``sha1``/``sha256``/``sha512`` return raw digests; the ``*_hex``
    and ``*_base64`` variants return lowercase hex or unpadded URL-safe
    base64 text.
    """

    def digest(self, algorithm: str, text: str | bytes) -> bytes:
        _check_algorithm(algorithm)
        return hashlib.new(algorithm, _to_bytes(text)).digest()

    def md5(self, text: str | bytes) -> bytes:
        return self.digest("md5", text)

    def sha1(self, text: str | bytes) -> bytes:
        return self.digest("sha1", text)

    def sha256(self, text: str | bytes) -> bytes:
        return self.digest("sha256", text)

    def sha512(self, text: str | bytes) -> bytes:
        return self.digest("sha512", text)

    def hexdigest(self, algorithm: str, text: str | bytes) -> str:
        return HEX.encode(self.digest(algorithm, text))

    def b64digest(self, algorithm: str, text: str | bytes) -> str:
        return BASE64.urlsafe_nopadding.encode(self.digest(algorithm, text))

    def md5_hex(self, text: str | bytes) -> str:
        return self.hexdigest("md5", text)

    def sha1_hex(self, text: str | bytes) -> str:
        return self.hexdigest("sha1", text)

    def sha256_hex(self, text: str | bytes) -> str:
        return self.hexdigest("sha256", text)

    def sha512_hex(self, text: str | bytes) -> str:
        return self.hexdigest("sha512", text)

    def md5_base64(self, text: str | bytes) -> str:
        return self.b64digest("md5", text)

    def sha1_base64(self, text: str | bytes) -> str:
        return self.b64digest("sha1", text)

    def sha256_base64(self, text: str | bytes) -> str:
        return self.b64digest("sha256", text)

    def sha512_base64(self, text: str | bytes) -> str:
        return self.b64digest("sha512", text)


class HmacSigner:
    """HMAC functions taking ``(key, text)``."""

    def sign(self, algorithm: str, key: str | bytes, text: str | bytes) -> bytes:
        _check_algorithm(algorithm)
        digestmod: Callable = getattr(hashlib, algorithm)
        return hmac.new(_to_bytes(key), _to_bytes(text), digestmod).digest()

    def md5(self, key: str | bytes, text: str | bytes) -> bytes:
        return self.sign("md5", key, text)

    def sha1(self, key: str | bytes, text: str | bytes) -> bytes:
        return self.sign("sha1", key, text)

    def sha256(self, key: str | bytes, text: str | bytes) -> bytes:
        return self.sign("sha256", key, text)

    def sha512(self, key: str | bytes, text: str | bytes) -> bytes:
        return self.sign("sha512", key, text)


HASH = Hasher()
HMAC = HmacSigner()
