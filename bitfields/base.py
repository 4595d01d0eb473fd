import array


WORD_LENGTH = 32
WORD_MASK = (1 << WORD_LENGTH) - 1

# array typecode holding one unsigned 32-bit word on this platform
WORD_TYPECODE = next(code for code in ("I", "L") if array.array(code).itemsize * 8 == WORD_LENGTH)


class BitIndexError(IndexError):
    """Raised when a bit index falls outside [0, bit_count)."""

    def __init__(self, index: int, bit_count: int):
        self.index = index
        self.bit_count = bit_count
        super().__init__(f"Bit index out of range: {index} (valid range is [0:{bit_count - 1}])")
