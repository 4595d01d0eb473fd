import operator
from typing import Iterable, Iterator, Union

from .base import WORD_LENGTH, WORD_MASK
from .utils import check_index, locate, new_words, word_to_bits


class BitField:
    """
    Fixed-width collection of flags stored as an array of unsigned 32-bit words.

    Use this when the number of unique flags exceeds the capacity of a single
    machine word. Concrete types are created per word count with
    ``bitfield_type()``; ``BitField128`` and ``BitField192`` are predefined.

    Named methods (``set_bit``, ``and_``, ``shift``...) and augmented
    assignment mutate the receiver. Operators (``& | ^ ~ << >>``) return
    a new instance and leave both operands untouched.
    """
    __slots__ = ("words",)

    word_count = 0
    word_length = WORD_LENGTH
    bit_count = 0

    def __init__(self):
        if self.word_count < 1:
            raise TypeError(
                f"{type(self).__name__} has no word count, create a sized type with bitfield_type()"
            )
        self.words = new_words(self.word_count)

    @classmethod
    def none(cls) -> "BitField":
        """A new bitfield with every bit set to 0."""
        return cls()

    @classmethod
    def all(cls) -> "BitField":
        """A new bitfield with every bit set to 1."""
        return ~cls()

    def copy(self) -> "BitField":
        clone = type(self)()
        clone.words[:] = self.words
        return clone

    def __copy__(self) -> "BitField":
        return self.copy()

    def __deepcopy__(self, memo) -> "BitField":
        return self.copy()

    def _mask_words(self, mask: "BitField"):
        if type(mask) is not type(self):
            raise TypeError(f"Expected a {type(self).__name__} mask, got {type(mask).__name__}")
        return mask.words

    # --- Bit manipulation ---

    def get_bit(self, index: int) -> bool:
        index = check_index(index, self.bit_count)
        word_index, mask = locate(index)
        return (self.words[word_index] & mask) == mask

    def set_bit(self, index: int) -> "BitField":
        index = check_index(index, self.bit_count)
        word_index, mask = locate(index)
        self.words[word_index] |= mask
        return self

    def unset_bit(self, index: int) -> "BitField":
        index = check_index(index, self.bit_count)
        word_index, mask = locate(index)
        self.words[word_index] &= ~mask & WORD_MASK
        return self

    def flip_bit(self, index: int) -> "BitField":
        index = check_index(index, self.bit_count)
        word_index, mask = locate(index)
        self.words[word_index] ^= mask
        return self

    def set_bits(self, bits: Union["BitField", Iterable[int]]) -> "BitField":
        """
        Set several bits to 1.

        Args:
            bits: Either a mask of the same type (``bits |= mask``) or an
                iterable of bit indices. Indices are applied in order, so an
                out-of-range index leaves the earlier ones already set.
        """
        if isinstance(bits, BitField):
            return self.or_(bits)
        for index in bits:
            self.set_bit(index)
        return self

    def unset_bits(self, bits: Union["BitField", Iterable[int]]) -> "BitField":
        """Set several bits to 0, from a mask (``bits &= ~mask``) or from indices."""
        if isinstance(bits, BitField):
            return self.and_not(bits)
        for index in bits:
            self.unset_bit(index)
        return self

    def flip_bits(self, bits: Union["BitField", Iterable[int]]) -> "BitField":
        """Flip several bits, from a mask (``bits ^= mask``) or from indices."""
        if isinstance(bits, BitField):
            return self.xor(bits)
        for index in bits:
            self.flip_bit(index)
        return self

    def __getitem__(self, index: int) -> bool:
        return self.get_bit(index)

    def __setitem__(self, index: int, value: bool):
        if value:
            self.set_bit(index)
        else:
            self.unset_bit(index)

    # --- Queries ---

    def is_empty(self) -> bool:
        """Determine if all bits are set to 0."""
        for word in self.words:
            if word != 0:
                return False
        return True

    def has_all_of(self, mask: "BitField") -> bool:
        """Determine if ALL of the bits of ``mask`` are set."""
        return (self & mask) == mask

    def has_any_of(self, mask: "BitField") -> bool:
        """Determine if ANY of the bits of ``mask`` are set."""
        return not (self & mask).is_empty()

    def has_none_of(self, mask: "BitField") -> bool:
        """Determine if NONE of the bits of ``mask`` are set."""
        return (self & mask).is_empty()

    def count(self) -> int:
        """Number of bits set to 1."""
        total = 0
        for word in self.words:
            while word:
                word &= word - 1
                total += 1
        return total

    # --- Boolean operations ---
    # Each one is applied word by word and written back into the receiver.

    def and_(self, mask: "BitField") -> "BitField":
        """bits & mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] &= other[i]
        return self

    def and_not(self, mask: "BitField") -> "BitField":
        """bits & ~mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] &= ~other[i] & WORD_MASK
        return self

    def nand(self, mask: "BitField") -> "BitField":
        """~(bits & mask)"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] = ~(words[i] & other[i]) & WORD_MASK
        return self

    def or_(self, mask: "BitField") -> "BitField":
        """bits | mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] |= other[i]
        return self

    def or_not(self, mask: "BitField") -> "BitField":
        """bits | ~mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] |= ~other[i] & WORD_MASK
        return self

    def nor(self, mask: "BitField") -> "BitField":
        """~(bits | mask)"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] = ~(words[i] | other[i]) & WORD_MASK
        return self

    def xor(self, mask: "BitField") -> "BitField":
        """bits ^ mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] ^= other[i]
        return self

    def xor_not(self, mask: "BitField") -> "BitField":
        """bits ^ ~mask"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] ^= ~other[i] & WORD_MASK
        return self

    def not_xor(self, mask: "BitField") -> "BitField":
        """~(bits ^ mask)"""
        other = self._mask_words(mask)
        words = self.words
        for i in range(self.word_count):
            words[i] = ~(words[i] ^ other[i]) & WORD_MASK
        return self

    def not_(self) -> "BitField":
        """~bits"""
        words = self.words
        for i in range(self.word_count):
            words[i] = ~words[i] & WORD_MASK
        return self

    def shift(self, count: int) -> "BitField":
        """
        Shift every bit by ``count`` positions, filling the vacated end with zeros.

        Positive counts shift right (towards bit 0), negative counts shift left
        (towards the highest bit). Bits pushed past either end are lost, so any
        ``abs(count) >= bit_count`` clears the field.

        The shift runs in two passes over the words: first by the remainder of
        ``count`` over the word length, carrying the bits that overflow one word
        into its neighbour, then by the whole number of words, moving array
        entries. Right and left shifts traverse the array in opposite orders.
        """
        count = operator.index(count)
        words = self.words
        word_count = self.word_count

        if count == 0:
            return self

        if abs(count) >= self.bit_count:
            for i in range(word_count):
                words[i] = 0
            return self

        whole_words, shift_amount = divmod(abs(count), WORD_LENGTH)
        right_shift = count > 0

        # (1) shift by less than a word, carrying bits across word boundaries
        if shift_amount:
            overflow_amount = WORD_LENGTH - shift_amount
            # the first word processed is filled with zeros from the trailing side
            carry = 0
            # words within whole_words of the far edge get pushed out by pass (2)
            if right_shift:
                for i in range(word_count - 1, whole_words - 1, -1):
                    word = words[i]
                    words[i] = (word >> shift_amount) | carry
                    carry = (word << overflow_amount) & WORD_MASK
            else:
                for i in range(word_count - whole_words):
                    word = words[i]
                    words[i] = ((word << shift_amount) & WORD_MASK) | carry
                    carry = word >> overflow_amount

        # (2) move whole words, reading each source before it is overwritten
        if whole_words:
            if right_shift:
                for i in range(word_count):
                    source = i + whole_words
                    words[i] = words[source] if source < word_count else 0
            else:
                for i in range(word_count - 1, -1, -1):
                    source = i - whole_words
                    words[i] = words[source] if source >= 0 else 0

        return self

    # --- Operators ---

    def __and__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.copy().and_(other)

    def __or__(self, other):
        if type(other) is type(self):
            return self.copy().or_(other)
        if isinstance(other, int):
            return self.copy().set_bit(other)
        return NotImplemented

    def __xor__(self, other):
        if type(other) is type(self):
            return self.copy().xor(other)
        if isinstance(other, int):
            return self.copy().flip_bit(other)
        return NotImplemented

    def __invert__(self):
        return self.copy().not_()

    def __lshift__(self, count):
        if not isinstance(count, int):
            return NotImplemented
        return self.copy().shift(-count)

    def __rshift__(self, count):
        if not isinstance(count, int):
            return NotImplemented
        return self.copy().shift(count)

    def __iand__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.and_(other)

    def __ior__(self, other):
        if type(other) is type(self):
            return self.or_(other)
        if isinstance(other, int):
            return self.set_bit(other)
        return NotImplemented

    def __ixor__(self, other):
        if type(other) is type(self):
            return self.xor(other)
        if isinstance(other, int):
            return self.flip_bit(other)
        return NotImplemented

    def __ilshift__(self, count):
        if not isinstance(count, int):
            return NotImplemented
        return self.shift(-count)

    def __irshift__(self, count):
        if not isinstance(count, int):
            return NotImplemented
        return self.shift(count)

    # --- Equality, hashing, iteration ---

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.words == other.words

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.words != other.words

    def __hash__(self):
        value = 17
        for word in self.words:
            value = 31 * value + hash(word)
        return value

    def __iter__(self) -> Iterator[bool]:
        return BitFieldIterator(self)

    def __repr__(self):
        digits = " ".join(word_to_bits(word) for word in reversed(self.words))
        return f"{type(self).__name__}( {digits} )"

    __str__ = __repr__


class BitFieldIterator:
    """
    Enumerates the bits of a field from least to most significant.

    The iterator keeps a cursor into the field's live storage rather than a
    snapshot, so changes made to the field while enumerating are seen by
    the following steps.
    """
    __slots__ = ("_field", "_index")

    def __init__(self, field: BitField):
        self._field = field
        self._index = -1

    @property
    def index(self) -> int:
        return self._index

    def move_next(self) -> bool:
        """Advance to the next bit. Returns False once every bit has been visited."""
        bit_count = self._field.bit_count
        if self._index < bit_count:
            self._index += 1
        return self._index < bit_count

    @property
    def current(self) -> bool:
        """The bit under the cursor. Raises BitIndexError outside the enumeration."""
        index = check_index(self._index, self._field.bit_count)
        word_index, mask = locate(index)
        return (self._field.words[word_index] & mask) == mask

    def reset(self):
        self._index = -1

    def __iter__(self):
        return self

    def __next__(self) -> bool:
        if not self.move_next():
            raise StopIteration
        return self.current
