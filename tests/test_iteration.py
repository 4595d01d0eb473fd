import unittest

from bitfields import BitField128, BitIndexError, bitfield_type


class TestIteration(unittest.TestCase):
    def test_order(self):
        bits = bitfield_type(1)().set_bits([0, 3])
        values = list(bits)
        self.assertEqual(len(values), 32)
        self.assertEqual([i for i, value in enumerate(values) if value], [0, 3])

    def test_crosses_words(self):
        bits = BitField128().set_bits([31, 32, 127])
        self.assertEqual([i for i, value in enumerate(bits) if value], [31, 32, 127])

    def test_restartable(self):
        bits = BitField128().set_bit(10)
        self.assertEqual(list(bits), list(bits))

    def test_sees_live_changes(self):
        bits = BitField128()
        iterator = iter(bits)
        self.assertFalse(next(iterator))
        bits.set_bit(1)
        self.assertTrue(next(iterator))
        bits.set_bit(0)
        bits.unset_bit(2)
        self.assertFalse(next(iterator))

    def test_cursor(self):
        bits = BitField128().set_bit(0)
        iterator = iter(bits)
        with self.assertRaises(BitIndexError):
            iterator.current
        self.assertTrue(iterator.move_next())
        self.assertTrue(iterator.current)
        self.assertEqual(iterator.index, 0)

        while iterator.move_next():
            pass
        with self.assertRaises(BitIndexError):
            iterator.current
        self.assertFalse(iterator.move_next())

        iterator.reset()
        self.assertEqual(next(iterator), True)


if __name__ == "__main__":
    unittest.main()
