"""Transcode dispatcher: decode bytes to text and encode text to bytes.

``try_decode`` and ``try_encode`` return a :class:`TranscodeOutcome` so a
caller can branch on the error kind; ``decode`` and ``encode`` unwrap it and
raise.  Every call is all-or-nothing: a failed outcome never carries a
partial value, and nothing falls back to another encoding.
"""

from __future__ import annotations

import dataclasses
import logging

from charsetkit._utils import as_input_bytes
from charsetkit.detector import StatisticalDetector, resolve_registry_label
from charsetkit.enums import LabelSource, Operation
from charsetkit.errors import CharsetError, InvalidInput, UnknownEncoding
from charsetkit.registry import DEFAULT_REGISTRY, TranscodingRegistry

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class TranscodeOutcome:
    """Result of a decode or encode call.

    On success *value* holds the text or bytes and *error* is ``None``.  On
    failure *value* is ``None`` and *error* holds the reason.  *label* is
    the registry label used, or ``None`` if no label could be resolved.
    """

    value: str | bytes | None
    label: str | None
    error: CharsetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str | bytes:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def try_decode(
    data: bytes | bytearray | memoryview | str,
    label: str | None = None,
    *,
    detector: StatisticalDetector | None = None,
    registry: TranscodingRegistry | None = None,
) -> TranscodeOutcome:
    """Decode *data* with *label*, detecting the encoding if *label* is None.

    Text input is decoded from its UTF-8 bytes.

    :raises TypeError: If *data* is neither bytes-like nor ``str``, or
        *label* is neither ``str`` nor ``None``.
    """
    raw = as_input_bytes(data)
    if label is not None and not isinstance(label, str):
        msg = f"encoding label must be str, got {type(label).__name__}"
        raise TypeError(msg)
    source = LabelSource.EXPLICIT
    if label is None:
        source = LabelSource.DETECTED
        try:
            label = resolve_registry_label(raw, detector)
        except CharsetError as e:
            logger.debug("decode: %s", e)
            return TranscodeOutcome(value=None, label=e.label, error=e)

    encoding = (registry or DEFAULT_REGISTRY).for_label(label)
    if encoding is None:
        logger.debug("decode: registry has no encoding for %r", label)
        return TranscodeOutcome(
            value=None, label=label, error=UnknownEncoding(label, source)
        )

    text, had_errors = encoding.decode(raw)
    if had_errors:
        logger.debug("decode: %d bytes are not valid %s", len(raw), encoding.name)
        return TranscodeOutcome(
            value=None,
            label=label,
            error=InvalidInput(label, Operation.DECODE, source),
        )
    return TranscodeOutcome(value=text, label=label)


def decode(
    data: bytes | bytearray | memoryview | str,
    label: str | None = None,
    *,
    detector: StatisticalDetector | None = None,
    registry: TranscodingRegistry | None = None,
) -> str:
    """Decode *data* to text.

    :param label: Encoding label; detected from *data* when omitted.
    :raises UnknownEncoding: If detection gave no label or *label* is not a
        known encoding.
    :raises UnsupportedEncoding: If the detected encoding has no registry
        equivalent.
    :raises InvalidInput: If *data* is not valid in the encoding.
    """
    return try_decode(data, label, detector=detector, registry=registry).unwrap()


def try_encode(
    text: str,
    label: str,
    *,
    registry: TranscodingRegistry | None = None,
) -> TranscodeOutcome:
    """Encode *text* with *label*.

    :raises TypeError: If *text* is not ``str`` or *label* is missing.
    """
    if not isinstance(text, str):
        msg = f"expected str input, got {type(text).__name__}"
        raise TypeError(msg)
    if not isinstance(label, str):
        msg = "encode() requires an encoding label"
        raise TypeError(msg)

    encoding = (registry or DEFAULT_REGISTRY).for_label(label)
    if encoding is None:
        logger.debug("encode: registry has no encoding for %r", label)
        return TranscodeOutcome(value=None, label=label, error=UnknownEncoding(label))

    data, had_errors = encoding.encode(text)
    if had_errors:
        logger.debug("encode: text has no faithful %s representation", encoding.name)
        return TranscodeOutcome(
            value=None, label=label, error=InvalidInput(label, Operation.ENCODE)
        )
    return TranscodeOutcome(value=data, label=label)


def encode(
    text: str,
    label: str,
    *,
    registry: TranscodingRegistry | None = None,
) -> bytes:
    """Encode *text* to bytes.

    :raises UnknownEncoding: If *label* is not a known encoding.
    :raises InvalidInput: If *text* cannot be represented in the encoding.
    """
    return try_encode(text, label, registry=registry).unwrap()
