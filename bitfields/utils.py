import array
import operator
from typing import Tuple

from .base import BitIndexError, WORD_LENGTH, WORD_TYPECODE


def new_words(word_count: int) -> array.array:
    """Allocate zeroed word storage."""
    return array.array(WORD_TYPECODE, [0] * word_count)


def check_index(index: int, bit_count: int) -> int:
    """Bounds check for bit indices. Returns the index as a plain int."""
    index = operator.index(index)
    if index < 0 or index >= bit_count:
        raise BitIndexError(index, bit_count)
    return index


def locate(index: int) -> Tuple[int, int]:
    """
    Decompose a bit index into the index of the word holding it
    and the single-bit mask selecting it within that word.
    """
    return index // WORD_LENGTH, 1 << (index % WORD_LENGTH)


def word_to_bits(word: int) -> str:
    # most-significant digit first
    return format(word, f"0{WORD_LENGTH}b")
