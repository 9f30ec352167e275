"""
Alphabets and block sizes shared by the hex and Base64 codecs.
"""

from __future__ import annotations

from typing import Final

HEX_ALPHABET: Final[str] = "0123456789ABCDEF"
"""Display characters for the 16 nibble values, indexed by value."""

BASE64_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
"""Display characters for the 64 sextet values, indexed by value (RFC 4648, section 4)."""

BASE64_PAD: Final[str] = "="
"""Stands in for each sextet that carries no input bits in a padded final group."""

HEX_CHARS_PER_BYTE: Final[int] = 2
"""One character per nibble."""

B64_BLOCK_BYTES: Final[int] = 3
"""Bytes consumed by one Base64 block (24 bits)."""

B64_BLOCK_CHARS: Final[int] = 4
"""Characters produced by one Base64 block (4 x 6 bits)."""
