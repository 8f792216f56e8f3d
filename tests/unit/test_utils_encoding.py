"""Tests for binary-to-text codecs."""

import pytest

from alerthook.core.exceptions import ValidationException
from alerthook.utils.encoding import BASE32, BASE64, HEX, get_codec


def test_hex_encode_lowercase() -> None:
    """Test hex encoding is lowercase."""
    assert HEX.encode(b"\xde\xad\xbe\xef") == "deadbeef"


def test_hex_encode_accepts_text() -> None:
    """Test text input is UTF-8 encoded first."""
    assert HEX.encode("hi") == "6869"


def test_hex_decode() -> None:
    """Test hex decoding, upper or lower case."""
    assert HEX.decode("DEADbeef") == b"\xde\xad\xbe\xef"


@pytest.mark.parametrize("bad", ["zz", "abc", "0x12", "deéad"])
def test_hex_decode_invalid_returns_empty(bad: str) -> None:
    """Test malformed hex decodes to empty bytes."""
    assert HEX.decode(bad) == b""


def test_base64_variants() -> None:
    """Test padded and unpadded base64."""
    assert BASE64.std.encode(b"hello world") == "aGVsbG8gd29ybGQ="
    assert BASE64.std_nopadding.encode(b"hello world") == "aGVsbG8gd29ybGQ"
    assert BASE64.std_nopadding.decode("aGVsbG8gd29ybGQ") == b"hello world"


def test_base64_urlsafe_alphabet() -> None:
    """Test URL-safe base64 uses - and _."""
    data = b"\xfb\xff\xbf"

    assert BASE64.std.encode(data) == "+/+/"
    assert BASE64.urlsafe.encode(data) == "-_-_"
    assert BASE64.urlsafe.decode("-_-_") == data


def test_base64_decode_invalid_returns_empty() -> None:
    """Test malformed base64 decodes to empty bytes."""
    assert BASE64.std.decode("!!!") == b""


def test_base32_variants() -> None:
    """Test padded and unpadded base32."""
    assert BASE32.std.encode(b"hello world") == "NBSWY3DPEB3W64TMMQ======"
    assert BASE32.std_nopadding.encode(b"hello world") == "NBSWY3DPEB3W64TMMQ"
    assert BASE32.std_nopadding.decode("NBSWY3DPEB3W64TMMQ") == b"hello world"
    assert BASE32.hex_nopadding.decode(BASE32.hex_nopadding.encode(b"hello world")) == b"hello world"


def test_get_codec() -> None:
    """Test codec lookup by name."""
    assert get_codec("hex") is HEX
    assert get_codec("base64-urlsafe-nopad") is BASE64.urlsafe_nopadding


def test_get_codec_unknown() -> None:
    """Test unknown codec name."""
    with pytest.raises(ValidationException) as exc_info:
        get_codec("rot13")

    assert exc_info.value.details["encoding"] == "rot13"
    assert "hex" in exc_info.value.details["available"]


@pytest.mark.parametrize("bad", ["aGVsbG8é", "NBSWY3DPé"])
def test_non_ascii_input_decodes_to_empty(bad: str) -> None:
    """Test non-ASCII characters invalidate the whole input."""
    assert BASE64.std_nopadding.decode(bad) == b""
    assert BASE32.std_nopadding.decode(bad) == b""
