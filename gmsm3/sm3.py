from typing import Union, Tuple, Sequence, List, Optional
from enum import Enum
import logging

from .commons import HashAlgorithm
from .padding import sm3_pad
from .calculation import rls_32, mod_adds_32, bytes_to_words_32, words_32_to_bytes

logger = logging.getLogger(__name__)

# GB/T 32905-2016 4.1 初始值
SM3_IV = (0x7380166f, 0x4914b2b9, 0x172442d7, 0xda8a0600, 0xa96f30bc, 0x163138aa, 0xe38dee4d, 0xb0fb0e4e)

# GB/T 32905-2016 4.2 常量
_SM3_TJ = tuple(0x79cc4519 if 0 <= j < 16 else 0x7a879d8a for j in range(0, 64))

# 每轮使用的循环左移后的常量T_j <<< (j mod 32)
_SM3_TJ_ROTATED = tuple(rls_32(t, j % 32) for j, t in enumerate(_SM3_TJ))

SM3_BLOCK_BYTE_LENGTH = 64
SM3_OUTPUT_BYTE_LENGTH = 32

__all__ = ['SM3_IV', 'SM3_BLOCK_BYTE_LENGTH', 'SM3_OUTPUT_BYTE_LENGTH', 'SM3Exception', 'SM3StateException',
           'SM3State', 'sm3_cf', 'sm3_hash', 'SM3Hash']


class SM3Exception(Exception):

    def __init__(self, *args):
        super().__init__(*args)


class SM3StateException(SM3Exception):
    """杂凑计算已经结束后继续输入数据时抛出的异常"""

    def __init__(self, *args):
        super().__init__(*args)


class SM3State(Enum):
    ACCEPTING = 'accepting'
    FINALIZED = 'finalized'


def _sm3_ff_j(x: int, y: int, z: int, j: int):
    """GB/T 32905-2016 4.3 布尔函数FF_j"""
    if 0 <= j < 16:
        ret = x ^ y ^ z
    elif 16 <= j < 64:
        ret = (x & y) | (x & z) | (y & z)
    else:
        raise ValueError(f"j = {j}")
    return ret


def _sm3_gg_j(x: int, y: int, z: int, j: int):
    """GB/T 32905-2016 4.3 布尔函数GG_j"""
    if 0 <= j < 16:
        ret = x ^ y ^ z
    elif 16 <= j < 64:
        ret = (x & y) | ((~ x) & z)
    else:
        raise ValueError(f"j = {j}")
    return ret


def _sm3_p0(x: int):
    """GB/T 32905-2016 4.4 置换函数P0"""
    return x ^ rls_32(x, 9) ^ rls_32(x, 17)


def _sm3_p1(x: int):
    """GB/T 32905-2016 4.4 置换函数P1"""
    return x ^ rls_32(x, 15) ^ rls_32(x, 23)


def _sm3_expand(block_in: Union[bytes, bytearray, memoryview], w: List[int], w_: List[int]):
    """消息扩展函数

    GB/T 32905-2016 5.3.2
    :param block_in: 输入的64字节消息分组
    :param w: 68个32bit整数的列表，用于存放W
    :param w_: 64个32bit整数的列表，用于存放W'
    """
    bytes_to_words_32(block_in, w)

    for j in range(16, 68):
        w[j] = _sm3_p1(w[j - 16] ^ w[j - 9] ^ rls_32(w[j - 3], 15)) ^ rls_32(w[j - 13], 7) ^ w[j - 6]

    for j in range(0, 64):
        w_[j] = w[j] ^ w[j + 4]


def sm3_cf(v: Sequence[int], block_in: Union[bytes, bytearray, memoryview],
           w: Optional[List[int]] = None, w_: Optional[List[int]] = None) -> Tuple[int, ...]:
    """CF压缩函数：GB/T 32905-2016 5.3.3

    :param v: 迭代压缩输入，8个32bit整数（256 bits）
    :param block_in: 消息分组，64字节（512 bits）
    :param w: 可选的68个整数的列表，作为消息扩展的工作空间反复使用
    :param w_: 可选的64个整数的列表，作为消息扩展的工作空间反复使用
    :return: 迭代压缩输出，8个32bit整数
    """
    if len(block_in) != SM3_BLOCK_BYTE_LENGTH:
        raise ValueError(f'消息分组长度{len(block_in)}不是64字节/Block length {len(block_in)} is not 64 bytes')
    if w is None:
        w = [0] * 68
    if w_ is None:
        w_ = [0] * 64

    _sm3_expand(block_in, w, w_)

    a, b, c, d, e, f, g, h = v
    for j in range(0, 64):
        a12 = rls_32(a, 12)
        ss1 = rls_32(mod_adds_32(a12, e, _SM3_TJ_ROTATED[j]), 7)
        ss2 = ss1 ^ a12
        tt1 = mod_adds_32(_sm3_ff_j(a, b, c, j), d, ss2, w_[j])
        tt2 = mod_adds_32(_sm3_gg_j(e, f, g, j), h, ss1, w[j])
        d = c
        c = rls_32(b, 9)
        b = a
        a = tt1
        h = g
        g = rls_32(f, 19)
        f = e
        e = _sm3_p0(tt2)
    return tuple(x ^ y for x, y in zip(v, (a, b, c, d, e, f, g, h)))


def sm3_hash(message: Union[bytes, bytearray, memoryview]) -> bytes:
    sm3hash = SM3Hash()
    sm3hash.update(message)
    return sm3hash.digest()


class SM3Hash(HashAlgorithm):
    """SM3杂凑计算类，适用于分多次输入消息的情况

    GB/T 32905-2016
    finalize()之后不能再输入数据，需要先调用reset()。
    """
    BLOCK_BYTE_LENGTH = SM3_BLOCK_BYTE_LENGTH
    BLOCK_SIZE = BLOCK_BYTE_LENGTH * 8
    DIGEST_BYTE_LENGTH = SM3_OUTPUT_BYTE_LENGTH
    DIGEST_SIZE = DIGEST_BYTE_LENGTH * 8

    name = 'sm3'

    def __init__(self, data: Optional[Union[bytes, bytearray, memoryview]] = None):
        self._buffer = bytearray()
        self._length = 0
        self._v = SM3_IV
        self._state = SM3State.ACCEPTING
        self._digest = None

        self._w = [0] * 68
        self._w_ = [0] * 64

        if data is not None:
            self.update(data)

    @property
    def block_size(self) -> int:
        return SM3Hash.BLOCK_BYTE_LENGTH

    @property
    def digest_size(self) -> int:
        return SM3Hash.DIGEST_BYTE_LENGTH

    @property
    def state(self) -> SM3State:
        return self._state

    @property
    def bit_length(self) -> int:
        """已输入消息的长度（比特数）"""
        return self._length

    def reset(self):
        self._buffer.clear()
        self._length = 0
        self._v = SM3_IV
        self._state = SM3State.ACCEPTING
        self._digest = None
        logger.debug('SM3 reset')

    def _process_block(self):
        cursor = 0
        with memoryview(self._buffer) as buffer_view:
            while (next_cursor := cursor + SM3_BLOCK_BYTE_LENGTH) <= len(self._buffer):
                with buffer_view[cursor:next_cursor] as block_in:
                    self._v = sm3_cf(self._v, block_in, self._w, self._w_)
                cursor = next_cursor
        # 视图全部释放以后才能改变bytearray的长度
        del self._buffer[:cursor]

    def update(self, message: Union[bytes, bytearray, memoryview]) -> int:
        if isinstance(message, str):
            raise TypeError('消息必须是字节串，字符串需要先编码/Message must be bytes, encode str first')
        if self._state == SM3State.FINALIZED:
            raise SM3StateException('杂凑计算已经结束，需要先调用reset()'
                                    '/Hash is finalized, call reset() before writing again')
        with memoryview(message) as view, view.cast('B') as octets:
            byte_len = len(octets)
            self._buffer.extend(octets)
        self._length += byte_len * 8
        self._process_block()
        assert len(self._buffer) < SM3_BLOCK_BYTE_LENGTH
        return byte_len

    def pad(self) -> bytes:
        """根据尚未处理的消息尾部和消息总长度生成填充后的最后分组，不改变对象状态"""
        return sm3_pad(self._buffer, self._length)

    def finalize(self) -> bytes:
        if self._state == SM3State.FINALIZED:
            return self._digest

        padded = self.pad()
        v = self._v
        with memoryview(padded) as padded_view:
            for m in range(0, len(padded), SM3_BLOCK_BYTE_LENGTH):
                v = sm3_cf(v, padded_view[m:m + SM3_BLOCK_BYTE_LENGTH], self._w, self._w_)
        logger.debug('SM3 finalize: length=%d bits, padding blocks=%d',
                     self._length, len(padded) // SM3_BLOCK_BYTE_LENGTH)

        self._digest = words_32_to_bytes(v)
        self._state = SM3State.FINALIZED
        logger.debug('SM3 digest: %s', self._digest.hex())
        return self._digest

    def copy(self) -> 'SM3Hash':
        other = SM3Hash()
        other._buffer.extend(self._buffer)
        other._length = self._length
        other._v = self._v
        other._state = self._state
        other._digest = self._digest
        return other
