"""Transcoding registry: maps encoding labels to codecs.

The default :class:`CodecRegistry` is backed by Python's codec registry,
extended with the Encoding Standard labels that Python does not know under
those names (``x-mac-cyrillic``, ``windows-31j``, ...).  Anything with a
``for_label`` method returning an :class:`Encoding` can stand in for it.
"""

from __future__ import annotations

import codecs
import dataclasses
from dataclasses import field
from encodings.aliases import aliases as _PYTHON_ALIASES
from typing import Callable, Protocol, TypeVar

_T = TypeVar("_T", str, bytes)

#: Labels from the WHATWG Encoding Standard mapped to the Python codec that
#: implements them, for labels Python's own alias table lacks.
EXTRA_LABELS: dict[str, str] = {
    "x-mac-cyrillic": "mac_cyrillic",
    "x-mac-ukrainian": "mac_cyrillic",
    "x-mac-roman": "mac_roman",
    "windows-31j": "cp932",
    "x-sjis": "cp932",
    "windows-949": "cp949",
    "windows-874": "cp874",
    "x-euc-jp": "euc_jp",
    "x-gbk": "gbk",
    "x-x-big5": "big5",
    "iso-8859-8-i": "iso8859_8",
    "csiso88598i": "iso8859_8",
    "x-cp1250": "cp1250",
    "x-cp1251": "cp1251",
    "x-cp1252": "cp1252",
    "x-cp1253": "cp1253",
    "x-cp1254": "cp1254",
    "x-cp1255": "cp1255",
    "x-cp1256": "cp1256",
    "x-cp1257": "cp1257",
    "x-cp1258": "cp1258",
}

# Text codecs that are not character encodings: escape and hostname
# transforms, and one that can never transcode anything.  Codec names are
# compared with underscores.
_EXCLUDED_CODECS: frozenset[str] = frozenset(
    {
        "undefined",
        "unicode_escape",
        "raw_unicode_escape",
        "idna",
        "punycode",
    }
)

_ASCII_WHITESPACE = "\t\n\f\r "


def _lossy(convert: Callable[[_T, str], tuple[_T, int]], value: _T, empty: _T) -> _T:
    """Best-effort rendering with replacement characters, for diagnostics."""
    try:
        return convert(value, "replace")[0]
    except UnicodeError:
        # Not every codec implements the "replace" error handler.
        return empty


@dataclasses.dataclass(frozen=True, slots=True)
class Encoding:
    """A concrete text encoding returned by a registry lookup."""

    name: str
    codec_info: codecs.CodecInfo = field(repr=False, compare=False)

    def decode(self, data: bytes) -> tuple[str, bool]:
        """Decode *data*.

        :returns: ``(text, had_errors)``.  When *had_errors* is true, *text*
            is a lossy rendering and must not be treated as a result.
        """
        try:
            return self.codec_info.decode(data, "strict")[0], False
        except UnicodeError:
            return _lossy(self.codec_info.decode, data, ""), True

    def encode(self, text: str) -> tuple[bytes, bool]:
        """Encode *text*.

        :returns: ``(data, had_errors)``, with the same contract as :meth:`decode`.
        """
        try:
            return self.codec_info.encode(text, "strict")[0], False
        except UnicodeError:
            return _lossy(self.codec_info.encode, text, b""), True


class TranscodingRegistry(Protocol):
    """Anything that can resolve an encoding label."""

    def for_label(self, label: str) -> Encoding | None:
        """Return the encoding for *label*, or ``None`` if it is not known."""
        ...


class CodecRegistry:
    """Registry backed by :func:`codecs.lookup` plus :data:`EXTRA_LABELS`.

    Lookups ignore case and surrounding ASCII whitespace.  Binary-to-binary
    and text-to-text codecs (``base64``, ``rot13``, ...) are not encodings
    and are reported as unknown, as are escape codecs such as
    ``unicode_escape`` and ``idna``.
    """

    def for_label(self, label: str) -> Encoding | None:
        key = label.strip(_ASCII_WHITESPACE).lower()
        if not key or not key.isascii():
            return None
        try:
            info = codecs.lookup(EXTRA_LABELS.get(key, key))
        except LookupError:
            return None
        if not getattr(info, "_is_text_encoding", True):
            return None
        if info.name.replace("-", "_") in _EXCLUDED_CODECS:
            return None
        return Encoding(name=info.name, codec_info=info)

    def labels(self) -> list[str]:
        """Return every label this registry accepts, sorted."""
        candidates = set(_PYTHON_ALIASES) | set(_PYTHON_ALIASES.values())
        found = {name for name in candidates if self.for_label(name) is not None}
        found.update(EXTRA_LABELS)
        return sorted(found)


#: Shared default instance; it holds no state.
DEFAULT_REGISTRY = CodecRegistry()
