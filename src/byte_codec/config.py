"""
Global configuration for the byte codec.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_B64_PADDING: list[str] = ["strict", "pad"]

B64_PADDING = os.environ.get("BYTE_CODEC_B64_PADDING", "strict").lower()
"""
Base64 policy for a trailing group of 1 or 2 bytes ('strict' or 'pad').

'strict' rejects such input; 'pad' completes the group with '='.
Defaults to 'strict'.
"""

if B64_PADDING not in _SUPPORTED_B64_PADDING:
    raise ValueError(
        f"Invalid BYTE_CODEC_B64_PADDING environment variable: '{B64_PADDING}'. "
        f"Supported values: {_SUPPORTED_B64_PADDING}"
    )

B64_PAD_DEFAULT: bool = B64_PADDING == "pad"
"""Value used by `ByteString.to_b64` when the caller does not choose."""
