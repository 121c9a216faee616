"""Detector adapter: classification records and registry label resolution."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Protocol

import chardet

from charsetkit._utils import DEFAULT_MAX_BYTES, _validate_max_bytes, as_input_bytes
from charsetkit.enums import LabelSource
from charsetkit.equivalences import registry_label_for
from charsetkit.errors import UnknownEncoding

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single classification of a byte buffer.

    An empty *label* means the detector could not tell; an empty *language*
    means it made no language guess.
    """

    label: str
    confidence: float
    language: str

    def to_dict(self) -> dict[str, str | float]:
        """Convert this result to the ``charset``/``language``/``confidence`` record."""
        return {
            "charset": self.label,
            "language": self.language,
            "confidence": self.confidence,
        }


class StatisticalDetector(Protocol):
    """Anything that can guess ``(label, confidence, language)`` for bytes."""

    def detect(self, data: bytes) -> tuple[str, float, str]:
        """Return the best guess for *data*; empty strings mean unknown."""
        ...


class ChardetDetector:
    """Statistical detector backed by :func:`chardet.detect`."""

    def __init__(
        self,
        max_bytes: int = DEFAULT_MAX_BYTES,
        should_rename_legacy: bool = False,
    ) -> None:
        """Initialize the detector.

        :param max_bytes: Number of leading bytes examined per call.
        :param should_rename_legacy: Passed through to :func:`chardet.detect`;
            reports Windows supersets instead of ISO encodings.
        """
        _validate_max_bytes(max_bytes)
        self.max_bytes = max_bytes
        self.should_rename_legacy = should_rename_legacy
        self.logger = logging.getLogger(__name__)

    def detect(self, data: bytes) -> tuple[str, float, str]:
        if not data:
            return "", 0.0, ""
        result = chardet.detect(
            data[: self.max_bytes], should_rename_legacy=self.should_rename_legacy
        )
        self.logger.debug("chardet result: %r", result)
        return (
            result["encoding"] or "",
            float(result["confidence"] or 0.0),
            result["language"] or "",
        )


#: Shared default instance; it holds no per-call state.
DEFAULT_DETECTOR = ChardetDetector()


def classify(
    data: bytes | bytearray | memoryview | str,
    detector: StatisticalDetector | None = None,
) -> DetectionResult:
    """Classify the encoding of *data*.

    Text input is classified through its UTF-8 bytes.  Never fails for valid
    input types; an unclassifiable buffer yields an empty label.

    :raises TypeError: If *data* is neither bytes-like nor ``str``.
    """
    raw = as_input_bytes(data)
    label, confidence, language = (detector or DEFAULT_DETECTOR).detect(raw)
    if math.isnan(confidence):
        confidence = 0.0
    return DetectionResult(
        label=label,
        confidence=min(max(confidence, 0.0), 1.0),
        language=language,
    )


def resolve_registry_label(
    data: bytes | bytearray | memoryview | str,
    detector: StatisticalDetector | None = None,
) -> str:
    """Detect the encoding of *data* and return a label for registry lookup.

    :raises UnknownEncoding: If detection produced no label.
    :raises UnsupportedEncoding: If the detected encoding has no registry
        equivalent.
    """
    detected = classify(data, detector)
    if not detected.label:
        logger.debug(
            "no usable detection (confidence %.3f)", detected.confidence
        )
        raise UnknownEncoding(None, LabelSource.DETECTED)
    label = registry_label_for(detected.label)
    logger.debug(
        "detected %s (confidence %.3f, language %r) -> registry label %s",
        detected.label,
        detected.confidence,
        detected.language,
        label,
    )
    return label
