"""Error kinds raised (or carried in outcomes) by charsetkit.

Every error keeps the label it is about and where that label came from, so
a caller can tell "detection gave no answer" apart from "the name you passed
is not an encoding" without parsing the message.
"""

from __future__ import annotations

from charsetkit.enums import LabelSource, Operation


class CharsetError(Exception):
    """Base class for all charsetkit errors."""

    #: Short heading used when reporting the error to a user.
    title: str = "Charset error"

    def __init__(
        self,
        message: str,
        label: str | None = None,
        source: LabelSource = LabelSource.EXPLICIT,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.label = label
        self.source = source

    def __str__(self) -> str:
        return self.message


class UnknownEncoding(CharsetError, LookupError):
    """No usable encoding: detection failed, or the registry has no such label.

    ``label is None`` means detection produced no label at all.
    """

    title = "Unknown encoding"

    def __init__(
        self, label: str | None, source: LabelSource = LabelSource.EXPLICIT
    ) -> None:
        if label is None:
            message = "unable to detect the input encoding; specify one explicitly"
        elif source is LabelSource.DETECTED:
            message = (
                f"detected encoding {label!r} is not recognized; "
                "specify one explicitly"
            )
        else:
            message = f"unknown encoding: {label!r}"
        super().__init__(message, label, source)


class UnsupportedEncoding(CharsetError, LookupError):
    """Detection named an encoding that has no faithful registry equivalent."""

    title = "Unsupported encoding"

    def __init__(self, label: str) -> None:
        super().__init__(
            f"input detected as {label}, which has no registry equivalent; "
            "specify an encoding explicitly",
            label,
            LabelSource.DETECTED,
        )


class InvalidInput(CharsetError, ValueError):
    """Decoding or encoding with the chosen encoding would lose data."""

    title = "Invalid input"

    def __init__(
        self,
        label: str,
        operation: Operation,
        source: LabelSource = LabelSource.EXPLICIT,
    ) -> None:
        if operation is Operation.DECODE:
            message = f"input is an invalid {label} string"
        else:
            message = f"input cannot be represented in {label}"
        super().__init__(message, label, source)
        self.operation = operation
