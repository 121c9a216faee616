"""Detector label to registry label remapping.

The statistical detector and the transcoding registry keep independent
vocabularies.  This module holds the two pieces of data that bridge them:

1. **Registry overrides**: detector labels whose registry spelling differs,
   or which would otherwise resolve to a near-miss encoding that mis-decodes
   the vendor extension ranges (e.g. CP932 vs. plain Shift_JIS).

2. **Unsupported labels**: detector labels with no faithful registry
   equivalent.  Auto-detection fails closed for these instead of
   substituting a different encoding.

Both tables are keyed by the uppercased detector label.
"""

from __future__ import annotations

from charsetkit.errors import UnsupportedEncoding

REGISTRY_OVERRIDES: dict[str, str] = {
    # chardet's non-standard name for the Mac OS Cyrillic code page.
    "MACCYRILLIC": "x-mac-cyrillic",
    # Microsoft's Shift_JIS with NEC/IBM extensions.
    "CP932": "windows-31j",
    # Unified Hangul Code, the Korean extension of EUC-KR.
    "CP949": "windows-949",
}

UNSUPPORTED_LABELS: frozenset[str] = frozenset(
    {
        "UTF-32",
        "UTF-32LE",
        "UTF-32BE",
        "UTF-32-LE",
        "UTF-32-BE",
        # UCS-4 in the two mixed byte orders; no codec reads them.
        "X-ISO-10646-UCS-4-3412",
        "X-ISO-10646-UCS-4-2143",
        "EUC-TW",
        "ISO-2022-CN",
    }
)


def registry_label_for(detected: str) -> str:
    """Map a non-empty detector label to the label to look up in the registry.

    Matching is case-insensitive.  Labels without an override are returned
    unchanged, in their original case.

    :raises UnsupportedEncoding: If *detected* is in :data:`UNSUPPORTED_LABELS`.
        The error carries *detected* as the detector spelled it.
    """
    key = detected.upper()
    if key in UNSUPPORTED_LABELS:
        raise UnsupportedEncoding(detected)
    return REGISTRY_OVERRIDES.get(key, detected)
