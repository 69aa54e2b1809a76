from unittest import TestCase
from gmsm3.calculation import *
import logging

logging.basicConfig(level=logging.DEBUG)


class FundamentalTests(TestCase):
    def test_rls_32(self):
        self.assertEqual(rls_32(0x80000000, 1), 0x00000001)
        self.assertEqual(rls_32(0x12345678, 4), 0x23456781)
        self.assertEqual(rls_32(0x12345678, 0), 0x12345678)
        self.assertEqual(rls_32(0x12345678, 32), 0x12345678)
        self.assertEqual(rls_32(0x12345678, 36), 0x23456781)
        for n in range(0, 64):
            self.assertLessEqual(rls_32(0xffffffff, n), 0xffffffff)
            self.assertEqual(rls_32(rls_32(0x9abcdef0, n), 32 - n % 32), 0x9abcdef0)

    def test_mod_adds_32(self):
        self.assertEqual(mod_add_32(0xffffffff, 1), 0)
        self.assertEqual(mod_adds_32(0xffffffff, 0xffffffff, 2), 0)
        self.assertEqual(mod_adds_32(1, 2, 3, 4), 10)
        self.assertEqual(mod_adds_32(), 0)

    def test_words(self):
        octets = bytes.fromhex('0011223344556677')
        words = bytes_to_words_32(octets)
        self.assertEqual(words, [0x00112233, 0x44556677])
        self.assertEqual(words_32_to_bytes(words), octets)

        out = [0] * 4
        bytes_to_words_32(memoryview(octets), out)
        self.assertEqual(out, [0x00112233, 0x44556677, 0, 0])

        with self.assertRaises(ValueError):
            bytes_to_words_32(b'\x00' * 5)
