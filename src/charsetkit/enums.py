"""Enumerations for charsetkit."""

import enum


class LabelSource(enum.Enum):
    """Where an encoding label handed to the registry came from."""

    EXPLICIT = "explicit"
    DETECTED = "detected"


class Operation(enum.Enum):
    """Direction of a transcoding call."""

    DECODE = "decode"
    ENCODE = "encode"
