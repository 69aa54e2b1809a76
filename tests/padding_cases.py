from unittest import TestCase
from gmsm3 import *
import logging

logging.basicConfig(level=logging.DEBUG)


class PaddingCases(TestCase):
    def test_padding(self):
        # GB/T 32905-2016 附录A.1
        padded = bytes.fromhex('61626380' + '00' * 52 + '0000000000000018')
        self.assertEqual(sm3_pad(b'abc', 24), padded)

        padded = bytes.fromhex('80' + '00' * 63)
        self.assertEqual(sm3_pad(b'', 0), padded)

        # GB/T 32905-2016 附录A.2，64字节消息的填充为单独一个分组
        padded = bytes.fromhex('80' + '00' * 55 + '0000000000000200')
        self.assertEqual(sm3_pad(b'', 512), padded)

    def test_padding_length(self):
        for n in range(0, 56):
            self.assertEqual(len(sm3_pad(b'\xff' * n, n * 8)), 64)
        for n in range(56, 64):
            self.assertEqual(len(sm3_pad(b'\xff' * n, n * 8)), 128)

    def test_padding_layout(self):
        tail = bytes.fromhex('00112233445566778899')
        padded = sm3_pad(tail, 0x0102030405060708)
        self.assertEqual(padded[:10], tail)
        self.assertEqual(padded[10], 0x80)
        self.assertEqual(padded[11:56], b'\x00' * 45)
        self.assertEqual(padded[56:], bytes.fromhex('0102030405060708'))

        padded = sm3_pad(b'\x11' * 56, 56 * 8)
        self.assertEqual(padded[56], 0x80)
        self.assertEqual(padded[57:120], b'\x00' * 63)
        self.assertEqual(padded[120:], (56 * 8).to_bytes(8, byteorder='big'))

    def test_padding_pure(self):
        sm3obj = SM3Hash(b'0123456789' * 7)
        first = sm3obj.pad()
        self.assertEqual(sm3obj.pad(), first)
        self.assertEqual(first, sm3_pad(b'456789', 70 * 8))
        self.assertEqual(sm3obj.bit_length, 70 * 8)

    def test_padding_exceptions(self):
        with self.assertRaises(PaddingException):
            sm3_pad(b'\x00' * 64, 512)
        with self.assertRaises(PaddingException):
            sm3_pad(b'', -8)
