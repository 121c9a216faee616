# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

#: "いろはにほへとちりぬるを" in Shift_JIS.
IROHA_TEXT = "いろはにほへとちりぬるを"
IROHA_SJIS = bytes.fromhex(
    "82 a2 82 eb 82 cd 82 c9 82 d9 82 d6 82 c6 82 bf 82 e8 82 ca 82 e9 82 f0"
)


class StubDetector:
    """Detector double that reports a fixed guess and records its inputs."""

    def __init__(
        self, label: str = "", confidence: float = 0.0, language: str = ""
    ) -> None:
        self.label = label
        self.confidence = confidence
        self.language = language
        self.seen: list[bytes] = []

    def detect(self, data: bytes) -> tuple[str, float, str]:
        self.seen.append(data)
        return self.label, self.confidence, self.language


@pytest.fixture
def iroha_sjis() -> bytes:
    return IROHA_SJIS


@pytest.fixture
def sjis_detector() -> StubDetector:
    """A detector that classifies everything as Shift_JIS Japanese."""
    return StubDetector("SHIFT_JIS", 0.9090909361839294, "Japanese")
