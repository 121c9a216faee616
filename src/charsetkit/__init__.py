"""Character encoding detection and transcoding."""

from __future__ import annotations

from charsetkit.detector import (
    ChardetDetector,
    DetectionResult,
    classify,
    resolve_registry_label,
)
from charsetkit.enums import LabelSource, Operation
from charsetkit.errors import (
    CharsetError,
    InvalidInput,
    UnknownEncoding,
    UnsupportedEncoding,
)
from charsetkit.registry import CodecRegistry, Encoding
from charsetkit.transcode import (
    TranscodeOutcome,
    decode,
    encode,
    try_decode,
    try_encode,
)

__version__ = "1.0.0"
__all__ = [
    "ChardetDetector",
    "CharsetError",
    "CodecRegistry",
    "DetectionResult",
    "Encoding",
    "InvalidInput",
    "LabelSource",
    "Operation",
    "TranscodeOutcome",
    "UnknownEncoding",
    "UnsupportedEncoding",
    "classify",
    "decode",
    "encode",
    "resolve_registry_label",
    "try_decode",
    "try_encode",
]
