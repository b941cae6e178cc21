"""Tests for the allocating Base64 helpers."""

from __future__ import annotations

import base64
import dataclasses
import logging
import random

import pytest

from inplace_base64 import Alphabet, Base64, Base64Codec, Base64Config


def test_base64_shortcuts() -> None:
    """Test the static helpers on the reference vectors."""
    assert Base64.encode(b"foo") == "Zm9v"
    assert Base64.encode(b"foobar") == "Zm9vYmFy"
    assert Base64.decode("Zg==") == b"f"
    assert Base64.decode("YW55IGNhcm5hbCBwbGVhc3VyZS4=") == b"any carnal pleasure."


def test_base64_url() -> None:
    """Test URL-safe encoding with and without padding."""
    assert Base64.encode_url(b"\xfb\xff") == "-_8="
    assert Base64.encode_url(b"\xfb\xff", padding=False) == "-_8"
    assert Base64.decode("-_8") == b"\xfb\xff"


def test_default_config() -> None:
    """Test that codecs default to the standard, padded alphabet."""
    codec = Base64Codec()

    assert codec.config == Base64Config(alphabet=Alphabet.STANDARD, padding=True)
    assert codec.encode(b"\xfb\xff") == "+/8="


def test_config_is_frozen() -> None:
    """Test that a configuration cannot change under a codec."""
    config = Base64Config()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.padding = False  # type: ignore[misc]


def test_round_trip_against_standard_library() -> None:
    """Test random payloads against the standard library."""
    rng = random.Random(20241018)
    standard = Base64Codec()
    unpadded = Base64Codec(Base64Config(alphabet=Alphabet.URL_SAFE, padding=False))

    for _ in range(200):
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(64)))

        assert standard.encode(data) == base64.b64encode(data).decode("ascii")
        assert unpadded.encode(data) == base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
        assert standard.decode(standard.encode(data)) == data
        assert unpadded.decode(unpadded.encode(data)) == data


def test_decode_bytes_and_non_ascii_text() -> None:
    """Test bytes input and that non-ASCII characters are skipped."""
    codec = Base64Codec()

    assert codec.decode(b"Zm9v") == b"foo"
    assert codec.decode("Zm9v€") == b"foo"
    assert codec.decode("Zmé9v") == b"foo"


def test_decode_empty() -> None:
    """Test that empty text decodes to empty bytes."""
    assert Base64Codec().decode("") == b""
    assert Base64Codec().encode(b"") == ""


def test_logs_stripped_padding(caplog: pytest.LogCaptureFixture) -> None:
    """Test that stripping padding is reported at debug level."""
    caplog.set_level(logging.DEBUG, logger="inplace_base64.codec")
    codec = Base64Codec(Base64Config(padding=False))

    assert codec.encode(b"f") == "Zg"
    assert "stripped 2 padding characters" in caplog.text
