import unittest
from chip8_tracer.transport.image import ProgramImage

class TestProgramImage(unittest.TestCase):
    def setUp(self):
        self.image = ProgramImage(bytes([0x12, 0x34, 0xAB]), load_base=0x200)

    def test_read(self):
        self.assertEqual(len(self.image), 3)
        self.assertEqual(self.image.read(0), 0x12)
        self.assertEqual(self.image.read(2), 0xAB)

    def test_read_word_is_big_endian(self):
        self.assertEqual(self.image.read_word(0), 0x1234)
        self.assertEqual(self.image.read_word(1), 0x34AB)

    def test_read_out_of_bounds(self):
        with self.assertRaises(IndexError):
            self.image.read(3)
        with self.assertRaises(IndexError):
            self.image.read(-1)
        with self.assertRaises(IndexError):
            self.image.read_word(2)

    def test_slice(self):
        self.assertEqual(self.image.slice(1, 2), bytes([0x34, 0xAB]))
        with self.assertRaises(IndexError):
            self.image.slice(2, 2)

    def test_address_conversion(self):
        self.assertEqual(self.image.address_of(2), 0x202)
        self.assertEqual(self.image.offset_of(0x202), 2)
        self.assertEqual(self.image.offset_of(0x100), -0x100)

    def test_contains(self):
        self.assertTrue(self.image.contains(1, 2))
        self.assertFalse(self.image.contains(2, 2))
        self.assertFalse(self.image.contains(-1))

    def test_invalid_load_base(self):
        with self.assertRaises(ValueError):
            ProgramImage(b"", load_base=-1)

if __name__ == '__main__':
    unittest.main()
