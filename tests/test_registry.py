# tests/test_registry.py
from __future__ import annotations

import pytest

from charsetkit.registry import EXTRA_LABELS, CodecRegistry, Encoding


@pytest.fixture
def registry() -> CodecRegistry:
    return CodecRegistry()


def test_lookup_python_codec(registry: CodecRegistry):
    enc = registry.for_label("shift_jis")
    assert isinstance(enc, Encoding)
    assert enc.name == "shift_jis"


def test_lookup_is_case_insensitive(registry: CodecRegistry):
    assert registry.for_label("SHIFT_JIS") == registry.for_label("shift_jis")
    assert registry.for_label("Windows-1252").name == "cp1252"


def test_lookup_strips_ascii_whitespace(registry: CodecRegistry):
    assert registry.for_label("  utf-8\n").name == "utf-8"


@pytest.mark.parametrize(
    ("label", "codec"),
    [
        ("x-mac-cyrillic", "mac-cyrillic"),
        ("windows-31j", "cp932"),
        ("windows-949", "cp949"),
        ("X-SJIS", "cp932"),
    ],
)
def test_extra_labels(registry: CodecRegistry, label: str, codec: str):
    assert registry.for_label(label).name == codec


def test_every_extra_label_resolves(registry: CodecRegistry):
    for label in EXTRA_LABELS:
        assert registry.for_label(label) is not None, label


@pytest.mark.parametrize(
    "label",
    [
        "",
        "   ",
        "no-such-charset",
        "base64",
        "rot13",
        "zlib",
        "undefined",
        "unicode_escape",
        "raw-unicode-escape",
        "idna",
        "punycode",
    ],
)
def test_unknown_labels(registry: CodecRegistry, label: str):
    assert registry.for_label(label) is None


def test_non_ascii_label_is_unknown(registry: CodecRegistry):
    assert registry.for_label("utf–8") is None


def test_decode_strict_success(registry: CodecRegistry):
    text, had_errors = registry.for_label("utf-8").decode("café".encode())
    assert text == "café"
    assert had_errors is False


def test_decode_reports_errors(registry: CodecRegistry):
    text, had_errors = registry.for_label("utf-8").decode(b"abc\xff")
    assert had_errors is True
    assert text == "abc\ufffd"


def test_decode_truncated_multibyte_sequence(registry: CodecRegistry):
    _, had_errors = registry.for_label("shift_jis").decode(b"\x82\xa2\x82")
    assert had_errors is True


def test_encode_strict_success(registry: CodecRegistry):
    data, had_errors = registry.for_label("latin-1").encode("café")
    assert data == b"caf\xe9"
    assert had_errors is False


def test_encode_reports_errors(registry: CodecRegistry):
    data, had_errors = registry.for_label("ascii").encode("café")
    assert had_errors is True
    assert data == b"caf?"


def test_encoding_equality_ignores_codec_info(registry: CodecRegistry):
    assert registry.for_label("utf8") == registry.for_label("UTF-8")
    assert "codec_info" not in repr(registry.for_label("utf8"))


def test_labels_listing(registry: CodecRegistry):
    labels = registry.labels()
    assert labels == sorted(labels)
    assert "utf8" in labels
    assert "x-mac-cyrillic" in labels
    assert "windows-31j" in labels
    assert "base64_codec" not in labels
    assert "rot_13" not in labels
    assert "unicode_escape" not in labels
    assert "idna" not in labels
