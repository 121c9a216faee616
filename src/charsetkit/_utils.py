"""Internal shared utilities for charsetkit."""

from __future__ import annotations

#: Default maximum number of bytes handed to the statistical detector.
DEFAULT_MAX_BYTES: int = 200_000


def as_input_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the byte representation of *data*.

    Text is represented by its UTF-8 bytes.  Lone surrogates map back to
    the bytes they escape (as produced by :func:`os.fsdecode`), or failing
    that to their surrogate code units, so text input never raises here.
    Any other type is rejected so that callers never see a silently coerced
    value.

    :raises TypeError: If *data* is neither bytes-like nor ``str``.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return data.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError:
            return data.encode("utf-8", errors="surrogatepass")
    msg = f"expected bytes or str input, got {type(data).__name__}"
    raise TypeError(msg)


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
