import unittest

from bitfields import BitField128, BitField192, bitfield_type


def to_int(bits):
    return sum(word << (32 * i) for i, word in enumerate(bits.words))


def from_int(cls, value):
    bits = cls()
    for i in range(cls.word_count):
        bits.words[i] = (value >> (32 * i)) & 0xFFFFFFFF
    return bits


class TestShift(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.pattern = 0x8000_0001_DEAD_BEEF_0123_4567_F0F0_0F0F_A5A5_5A5A_1357_9BDF

    def test_zero_is_noop(self):
        bits = from_int(BitField192, self.pattern)
        self.assertEqual(to_int(bits.shift(0)), self.pattern)

    def test_shift_matches_integer_shift(self):
        full = (1 << 192) - 1
        for count in (1, 5, 31, 32, 33, 64, 95, 100, 160, 191):
            right = from_int(BitField192, self.pattern).shift(count)
            self.assertEqual(to_int(right), self.pattern >> count, f"right {count}")
            left = from_int(BitField192, self.pattern).shift(-count)
            self.assertEqual(to_int(left), (self.pattern << count) & full, f"left {count}")

    def test_saturation(self):
        for count in (192, 193, 1000, -192, -5000):
            self.assertTrue(BitField192.all().shift(count).is_empty())

    def test_largest_shift_keeps_single_bit(self):
        self.assertEqual(to_int(BitField128.all().shift(127)), 1)
        self.assertEqual(to_int(BitField128.all().shift(-127)), 1 << 127)

    def test_edge_bits(self):
        bits = BitField128().set_bits([0, 127])

        right = bits >> 1
        self.assertFalse(right[0])
        self.assertTrue(right[126])
        self.assertFalse(right[127])
        self.assertEqual(right.count(), 1)

        left = bits << 1
        self.assertTrue(left[1])
        self.assertFalse(left[0])
        self.assertFalse(left[127])
        self.assertEqual(left.count(), 1)

    def test_carry_between_words(self):
        bits = BitField128().set_bit(31)
        self.assertTrue((bits << 1)[32])
        self.assertTrue((bits << 33)[64])
        bits = BitField128().set_bit(64)
        self.assertTrue((bits >> 1)[63])
        self.assertTrue((bits >> 40)[24])

    def test_round_trip_clears_vacated_bits(self):
        a = from_int(BitField128, self.pattern & ((1 << 128) - 1))
        value = to_int(a)
        for d in (0, 1, 17, 32, 64, 127):
            low_cleared = (a >> d) << d
            self.assertEqual(to_int(low_cleared), value & ~((1 << d) - 1))
            high_cleared = (a << d) >> d
            self.assertEqual(to_int(high_cleared), value & ((1 << (128 - d)) - 1))

    def test_operators_map_to_shift(self):
        a = from_int(BitField128, 0xABCDEF)
        self.assertEqual(a << 4, a.copy().shift(-4))
        self.assertEqual(a >> 4, a.copy().shift(4))
        self.assertEqual(a << -4, a >> 4)
        b = a.copy()
        b <<= 8
        b >>= 8
        self.assertEqual(b, a)

    def test_single_word_field(self):
        bits32 = bitfield_type(1)
        bits = bits32().set_bits([0, 31])
        self.assertEqual(to_int(bits >> 31), 1)
        self.assertEqual(to_int(bits << 31), 1 << 31)
        self.assertTrue((bits << 32).is_empty())


if __name__ == "__main__":
    unittest.main()
