import os
from typing import Optional

from .base import WORD_LENGTH, BitIndexError
from .engine import BitField, BitFieldIterator
from .generator import bitfield_type, generate, render_source


__all__ = [
    "BitField",
    "BitFieldIterator",
    "BitField128",
    "BitField192",
    "BitIndexError",
    "WORD_LENGTH",
    "bitfield_type",
    "generate",
    "render_source",
    "load_bitfield"
]

__version__ = "1.0.0"

DEFAULT_WORD_COUNT = 4

BitField128 = bitfield_type(4)
BitField192 = bitfield_type(6)


def load_bitfield(word_count: Optional[int] = None) -> type:
    """
    Factory function returning the bitfield type for a word count.

    Args:
        word_count: Number of 32-bit words. If not provided, the
                    BITFIELDS_WORD_COUNT environment variable is used,
                    then DEFAULT_WORD_COUNT.
    """
    if word_count is None:
        env_value = os.getenv("BITFIELDS_WORD_COUNT", "").strip()
        word_count = int(env_value) if env_value else DEFAULT_WORD_COUNT
    return bitfield_type(word_count)
